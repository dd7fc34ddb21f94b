"""Formato de lineas de los archivos de productos y ordenes."""

from __future__ import annotations

from parametros import FIELD_SEPARATOR
from shared.errors import ParseError
from shared.protocol import OrderLine


def split_fields(line: str) -> list[str]:
    """Separa una linea por coma y limpia espacios de cada campo."""
    return [part.strip() for part in line.split(FIELD_SEPARATOR)]


def is_blank(line: str) -> bool:
    """Indica si la linea no tiene contenido util."""
    return not line.strip()


def parse_product_line(line: str, line_number: int | None = None) -> str:
    """Retorna el UPC de una linea de productos (solo se usa el primer campo)."""
    upc = split_fields(line)[0]
    if not upc:
        raise ParseError(
            f"Linea de producto sin UPC: {line.strip()!r}",
            line_number=line_number,
            line=line,
        )
    return upc


def parse_order_line(line: str, line_number: int | None = None) -> OrderLine:
    """Parsea ``numeroOrden, UPC1, ..., UPCn`` en un OrderLine."""
    order_number, *upcs = split_fields(line)
    if not order_number:
        raise ParseError(
            f"Linea de orden sin numero de orden: {line.strip()!r}",
            line_number=line_number,
            line=line,
        )
    if not upcs:
        raise ParseError(
            f"Orden {order_number} sin productos.",
            line_number=line_number,
            line=line,
        )
    if any(not upc for upc in upcs):
        raise ParseError(
            f"Orden {order_number} contiene un UPC vacio.",
            line_number=line_number,
            line=line,
        )
    return OrderLine(order_number=order_number, upcs=upcs)
