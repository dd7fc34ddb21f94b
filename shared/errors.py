"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Error de validacion de datos de entrada."""


class ParseError(ValidationError):
    """Linea de archivo de entrada con formato invalido."""

    def __init__(self, message: str, line_number: int | None = None, line: str = "") -> None:
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class ServiceError(Exception):
    """Error en la ejecucion de servicios."""
