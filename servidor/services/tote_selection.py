"""Estrategias para elegir un tote entre varios candidatos."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Protocol

from servidor.domain.models import Tote
from shared.errors import ValidationError

SELECTION_RANDOM = "random"
SELECTION_FIRST = "first"
AVAILABLE_SELECTIONS: tuple[str, ...] = (SELECTION_RANDOM, SELECTION_FIRST)


class ToteSelector(Protocol):
    """Interfaz de seleccion de tote para retirar productos."""

    def choose(self, candidates: Sequence[Tote]) -> Tote:
        """Elige un tote de una lista no vacia de candidatos."""


class RandomToteSelector:
    """Elige un candidato al azar con un generador explicito."""

    def __init__(self, rng: random.Random | None = None, seed: int | None = None) -> None:
        self._rng = rng or random.Random(seed)

    def choose(self, candidates: Sequence[Tote]) -> Tote:
        if not candidates:
            raise ValueError("No hay totes candidatos para elegir.")
        return candidates[self._rng.randrange(len(candidates))]


class FirstMatchToteSelector:
    """Elige siempre el primer candidato en orden de la bodega."""

    def choose(self, candidates: Sequence[Tote]) -> Tote:
        if not candidates:
            raise ValueError("No hay totes candidatos para elegir.")
        return candidates[0]


def build_selector(name: str, seed: int | None = None) -> ToteSelector:
    """Construye el selector configurado por nombre."""
    normalized = name.strip().lower()
    if normalized == SELECTION_RANDOM:
        return RandomToteSelector(seed=seed)
    if normalized == SELECTION_FIRST:
        return FirstMatchToteSelector()
    raise ValidationError(
        f"Estrategia de seleccion invalida: {name!r}. "
        f"Opciones: {', '.join(AVAILABLE_SELECTIONS)}."
    )
