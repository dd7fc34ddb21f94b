"""Interfaz de acceso del driver a la bodega."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from shared.protocol import PickResult, WarehouseSummary


class WarehouseGateway(Protocol):
    """Operaciones que el driver ejecuta sobre una bodega."""

    def load_products(self, filename: str | Path) -> int:
        """Carga productos desde archivo en totes."""

    def fulfill_orders(self, filename: str | Path) -> list[PickResult]:
        """Despacha las ordenes del archivo."""

    def merge_totes(self) -> bool:
        """Consolida totes parciales del mismo UPC."""

    def display_details(self) -> WarehouseSummary:
        """Imprime el detalle de totes y retorna el resumen."""
