"""Servicio de bodega: carga, despacho, merge y reporte de totes."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import TextIO

from parametros import INPUT_ENCODING, TOTE_CAPACITY
from servidor.domain.models import Product, Tote
from servidor.services.report_formatter import format_warehouse_details
from servidor.services.tote_selection import RandomToteSelector, ToteSelector
from shared.errors import ParseError, ServiceError, ValidationError
from shared.line_format import is_blank, parse_order_line, parse_product_line
from shared.protocol import PickResult, ToteReportRow, WarehouseSummary

LOGGER = logging.getLogger(__name__)


class MergeMode(str, Enum):
    """Criterio para decidir que totes participan de un merge por UPC."""

    LITERAL = "literal"
    STRICT = "strict"

    @classmethod
    def from_name(cls, name: str) -> MergeMode:
        try:
            return cls(name.strip().lower())
        except ValueError as exc:
            options = ", ".join(mode.value for mode in cls)
            raise ValidationError(
                f"Modo de merge invalido: {name!r}. Opciones: {options}."
            ) from exc


class Warehouse:
    """Mantiene la lista ordenada de totes y opera sobre ella."""

    def __init__(
        self,
        selector: ToteSelector | None = None,
        merge_mode: MergeMode = MergeMode.LITERAL,
        output: TextIO | None = None,
        tote_capacity: int = TOTE_CAPACITY,
    ) -> None:
        self._totes: list[Tote] = []
        self._selector = selector or RandomToteSelector()
        self._merge_mode = merge_mode
        self._output = output
        self._tote_capacity = tote_capacity

    @property
    def totes(self) -> tuple[Tote, ...]:
        return tuple(self._totes)

    def product_count(self) -> int:
        return sum(len(tote) for tote in self._totes)

    def load_products(self, filename: str | Path) -> int:
        """Carga productos desde archivo y los ubica en totes.

        Retorna la cantidad de productos ubicados. Si el archivo no se puede
        leer se lanza ServiceError sin modificar la bodega.
        """
        lines = self._read_lines(Path(filename), "productos")
        self._emit("Loading products...")

        placed = 0
        for line_number, line in enumerate(lines, start=1):
            if is_blank(line):
                LOGGER.debug("Linea %s vacia en archivo de productos, se omite.", line_number)
                continue
            try:
                upc = parse_product_line(line, line_number=line_number)
            except ParseError as exc:
                LOGGER.warning("Linea %s de productos omitida: %s", line_number, exc)
                continue

            self._place_product(Product(upc=upc))
            placed += 1

        self._emit("Loading complete.")
        LOGGER.info(
            "Productos cargados desde %s: productos=%s, totes=%s",
            filename,
            placed,
            len(self._totes),
        )
        return placed

    def fulfill_orders(self, filename: str | Path) -> list[PickResult]:
        """Despacha cada orden del archivo; los errores de formato omiten la linea."""
        lines = self._read_lines(Path(filename), "ordenes")
        self._emit("\nFulfilling orders...")

        results: list[PickResult] = []
        for line_number, line in enumerate(lines, start=1):
            if is_blank(line):
                continue
            try:
                order = parse_order_line(line, line_number=line_number)
            except ParseError as exc:
                LOGGER.warning("Linea %s de ordenes omitida: %s", line_number, exc)
                continue

            results.extend(self.fulfill_order(order.order_number, order.upcs))

        self._emit("\nOrders complete.")
        LOGGER.info(
            "Ordenes procesadas desde %s: retiros=%s, no_encontrados=%s",
            filename,
            sum(1 for result in results if result.found),
            sum(1 for result in results if not result.found),
        )
        return results

    def fulfill_order(self, order_number: str, upcs: Sequence[str]) -> list[PickResult]:
        """Retira de un tote todas las unidades de cada UPC pedido."""
        self._emit(f"\nOrder fulfillment started: Order {order_number}")

        results: list[PickResult] = []
        for upc in upcs:
            tote = self._find_tote_with_product(upc)
            if tote is None:
                self._emit(f"Product with UPC {upc} not found in any tote.")
                LOGGER.info("UPC %s no encontrado para orden %s.", upc, order_number)
                results.append(PickResult(order_number=order_number, upc=upc, tote_index=None))
                continue

            tote_index = self._index_of(tote)
            self._emit(f"Retrieving product from tote ({tote_index}) for UPC: {upc}")
            removed = tote.remove_upc(upc)
            self._emit(f"Order fulfilled--> Order {order_number}, {upc}")
            LOGGER.debug(
                "Retiradas %s unidades de %s desde tote %s (quedan %s).",
                len(removed),
                upc,
                tote_index,
                len(tote),
            )
            results.append(
                PickResult(
                    order_number=order_number,
                    upc=upc,
                    tote_index=tote_index,
                    removed=len(removed),
                )
            )
        return results

    def merge_totes(self) -> bool:
        """Consolida los totes que comparten UPC y elimina los totes vacios."""
        self._emit("\nMerging partially filled totes...")
        totes_before = len(self._totes)

        absorbed_by: dict[Tote, Tote] = {}
        for upc, group in self._group_totes_by_upc().items():
            sources = self._resolve_absorbed(group, absorbed_by)
            if len(sources) <= 1:
                continue

            merged = Tote(capacity=self._tote_capacity)
            for source in sources:
                merged.products.extend(source.products)
                source.products.clear()
                absorbed_by[source] = merged

            self._totes = [tote for tote in self._totes if tote not in absorbed_by]
            self._totes.append(merged)
            LOGGER.debug(
                "Merge de %s totes para UPC %s: %s unidades del UPC, %s productos.",
                len(sources),
                upc,
                merged.count(upc),
                len(merged),
            )

        self._totes = [tote for tote in self._totes if not tote.is_empty()]

        self._emit("Merge complete.")
        LOGGER.info(
            "Merge completado (modo=%s): totes antes=%s, despues=%s",
            self._merge_mode.value,
            totes_before,
            len(self._totes),
        )
        return True

    def summarize(self) -> WarehouseSummary:
        """Calcula filas del reporte y conteo de totes llenos/parciales/vacios."""
        summary = WarehouseSummary()
        for tote in self._totes:
            count = sum(1 for other in self._totes if other is tote)
            summary.rows.append(ToteReportRow(upc=tote.representative_upc, count=count))

            if tote.is_full():
                summary.full += 1
            elif not tote.is_empty():
                summary.partial += 1
            else:
                summary.empty += 1
        return summary

    def display_details(self) -> WarehouseSummary:
        """Imprime el detalle de la bodega y retorna el resumen calculado."""
        summary = self.summarize()
        self._emit(format_warehouse_details(summary))
        return summary

    def _place_product(self, product: Product) -> None:
        for tote in self._totes:
            if tote.is_empty() or tote.is_full():
                continue
            if tote.representative_upc == product.upc:
                tote.add_product(product)
                return

        new_tote = Tote(capacity=self._tote_capacity)
        new_tote.add_product(product)
        self._totes.append(new_tote)
        self._emit(f"Used additional tote ({len(self._totes) - 1}) for UPC: {product.upc}")

    def _find_tote_with_product(self, upc: str) -> Tote | None:
        candidates = [
            tote
            for tote in self._totes
            if not tote.is_empty() and tote.representative_upc == upc
        ]
        if not candidates:
            return None
        return self._selector.choose(candidates)

    def _group_totes_by_upc(self) -> dict[str, list[Tote]]:
        """Agrupa totes por UPC en orden de aparicion, sin repetir totes."""
        totes_by_upc: dict[str, list[Tote]] = {}
        for tote in self._totes:
            if self._merge_mode is MergeMode.STRICT and not tote.is_homogeneous():
                continue
            for upc in tote.upcs():
                totes_by_upc.setdefault(upc, []).append(tote)
        return totes_by_upc

    @staticmethod
    def _resolve_absorbed(group: list[Tote], absorbed_by: dict[Tote, Tote]) -> list[Tote]:
        """Reemplaza totes ya absorbidos por el tote que los contiene."""
        resolved: dict[Tote, None] = {}
        for tote in group:
            while tote in absorbed_by:
                tote = absorbed_by[tote]
            resolved[tote] = None
        return list(resolved)

    def _index_of(self, tote: Tote) -> int:
        return next(index for index, candidate in enumerate(self._totes) if candidate is tote)

    def _read_lines(self, path: Path, label: str) -> list[str]:
        try:
            with path.open("r", encoding=INPUT_ENCODING) as source_file:
                return source_file.readlines()
        except FileNotFoundError as exc:
            raise ServiceError(f"No existe el archivo de {label}: {path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ServiceError(f"No fue posible leer el archivo de {label}: {path}") from exc

    def _emit(self, message: str) -> None:
        print(message, file=self._output or sys.stdout)
