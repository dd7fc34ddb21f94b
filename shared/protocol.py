"""DTOs compartidos entre la bodega y el driver."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class OrderLine:
    """Orden parseada desde el archivo de ordenes."""

    order_number: str
    upcs: list[str]


@dataclass(slots=True)
class PickResult:
    """Resultado de retirar un UPC de una orden."""

    order_number: str
    upc: str
    tote_index: int | None
    removed: int = 0

    @property
    def found(self) -> bool:
        return self.tote_index is not None


@dataclass(slots=True)
class ToteReportRow:
    """Fila del reporte: UPC representativo y cantidad de totes."""

    upc: str | None
    count: int


@dataclass(slots=True)
class WarehouseSummary:
    """Resumen de ocupacion de totes de la bodega."""

    rows: list[ToteReportRow] = field(default_factory=list)
    full: int = 0
    partial: int = 0
    empty: int = 0

    @property
    def total(self) -> int:
        return self.full + self.partial + self.empty
