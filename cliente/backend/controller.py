"""Controlador del flujo batch de la bodega."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from shared.errors import ServiceError
from shared.protocol import PickResult, WarehouseSummary

from .gateway import WarehouseGateway

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class SimulationReport:
    """Resultados acumulados de una corrida completa."""

    loaded: int = 0
    picks: list[PickResult] = field(default_factory=list)
    merged: bool = False
    summaries: list[WarehouseSummary] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


class SimulationController:
    """Secuencia carga, despacho y merge sobre una bodega.

    Los errores de cada operacion se registran y la corrida continua con la
    siguiente fase.
    """

    def __init__(self, warehouse: WarehouseGateway) -> None:
        self._warehouse = warehouse

    def run(self, products_path: Path, orders_path: Path) -> SimulationReport:
        """Ejecuta load -> display -> fulfill -> display -> merge -> display."""
        report = SimulationReport()

        report.loaded = self._load(products_path, report)
        report.summaries.append(self._warehouse.display_details())

        report.picks = self._fulfill(orders_path, report)
        report.summaries.append(self._warehouse.display_details())

        report.merged = self._warehouse.merge_totes()
        report.summaries.append(self._warehouse.display_details())

        LOGGER.info(
            "Corrida finalizada: cargados=%s, retiros=%s, errores=%s",
            report.loaded,
            len(report.picks),
            len(report.errors),
        )
        return report

    def _load(self, products_path: Path, report: SimulationReport) -> int:
        try:
            return self._warehouse.load_products(products_path)
        except ServiceError as exc:
            LOGGER.error("Error: archivo de productos no disponible. %s", exc)
            report.errors.append(str(exc))
            return 0

    def _fulfill(self, orders_path: Path, report: SimulationReport) -> list[PickResult]:
        try:
            return self._warehouse.fulfill_orders(orders_path)
        except ServiceError as exc:
            LOGGER.error("Error: archivo de ordenes no disponible. %s", exc)
            report.errors.append(str(exc))
            return []
