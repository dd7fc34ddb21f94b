"""Formateo puro del reporte de totes."""

from __future__ import annotations

from shared.protocol import WarehouseSummary

_EMPTY_LABEL = "Empty"
_UPC_COLUMN_WIDTH = 15


def format_tote_table(summary: WarehouseSummary) -> list[str]:
    """Construye la tabla ``UPC  # Totes`` con una fila por tote."""
    lines = [
        f"{'UPC':<{_UPC_COLUMN_WIDTH}} # Totes",
        f"{'-' * _UPC_COLUMN_WIDTH} -------",
    ]
    for row in summary.rows:
        label = row.upc if row.upc is not None else _EMPTY_LABEL
        lines.append(f"{label:<{_UPC_COLUMN_WIDTH}} {row.count}")
    return lines


def format_summary_line(summary: WarehouseSummary) -> str:
    return (
        f"{summary.full} full totes, "
        f"{summary.partial} partially filled totes, and "
        f"{summary.empty} empty totes"
    )


def format_warehouse_details(summary: WarehouseSummary) -> str:
    """Bloque completo de detalle de bodega listo para imprimir."""
    lines = ["", "Warehouse details:"]
    lines.extend(format_tote_table(summary))
    lines.extend(["", "Warehouse summary:", format_summary_line(summary)])
    return "\n".join(lines)
