"""Punto de entrada de la simulacion de bodega."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from cliente.backend.controller import SimulationController
from parametros import (
    DEFAULT_MERGE_MODE,
    DEFAULT_SELECTION,
    ORDERS_FILENAME,
    PRODUCTS_FILENAME,
)
from servidor.services.tote_selection import AVAILABLE_SELECTIONS, build_selector
from servidor.services.warehouse import MergeMode, Warehouse

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parsea opciones de estrategia; los archivos de entrada son fijos."""
    parser = argparse.ArgumentParser(
        description=(
            f"Carga {PRODUCTS_FILENAME} en totes, despacha {ORDERS_FILENAME}, "
            "hace merge de totes parciales e imprime reportes."
        )
    )
    parser.add_argument(
        "--selection",
        choices=AVAILABLE_SELECTIONS,
        default=DEFAULT_SELECTION,
        help="Estrategia para elegir tote cuando varios tienen el UPC pedido.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Semilla del generador aleatorio (solo con --selection random).",
    )
    parser.add_argument(
        "--merge-mode",
        choices=[mode.value for mode in MergeMode],
        default=DEFAULT_MERGE_MODE,
        help="literal: cualquier tote con el UPC participa; strict: solo totes homogeneos.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None, base_dir: Path | None = None) -> int:
    """Ejecuta la simulacion completa en el directorio de trabajo."""
    args = parse_args(argv)

    selector = build_selector(args.selection, seed=args.seed)
    merge_mode = MergeMode.from_name(args.merge_mode)

    working_dir = base_dir or Path.cwd()
    LOGGER.info("Iniciando simulacion en: %s", working_dir)
    warehouse = Warehouse(selector=selector, merge_mode=merge_mode)
    controller = SimulationController(warehouse)
    controller.run(
        products_path=working_dir / PRODUCTS_FILENAME,
        orders_path=working_dir / ORDERS_FILENAME,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
