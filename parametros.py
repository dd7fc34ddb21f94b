"""Parametros globales del proyecto."""

from __future__ import annotations

import logging
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
PRODUCTS_FILENAME = "products.txt"
ORDERS_FILENAME = "orders.txt"
INPUT_ENCODING = "utf-8-sig"
FIELD_SEPARATOR = ","
TOTE_CAPACITY = 10
DEFAULT_SELECTION = "random"
DEFAULT_MERGE_MODE = "literal"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
