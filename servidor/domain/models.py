"""Modelos de dominio de la bodega."""

from __future__ import annotations

from dataclasses import dataclass, field

from parametros import TOTE_CAPACITY


@dataclass(frozen=True, slots=True)
class Product:
    """Representa una unidad de producto identificada por su UPC."""

    upc: str


@dataclass(eq=False, slots=True)
class Tote:
    """Contenedor ordenado de productos con capacidad nominal.

    La capacidad es blanda: ``is_full`` la respeta al cargar, pero un tote
    resultante de un merge puede superarla. Los totes se comparan por
    identidad, nunca por contenido.
    """

    products: list[Product] = field(default_factory=list)
    capacity: int = TOTE_CAPACITY

    def __len__(self) -> int:
        return len(self.products)

    def __str__(self) -> str:
        upcs = ", ".join(product.upc for product in self.products)
        return f"Tote[{upcs}]"

    def add_product(self, product: Product) -> None:
        self.products.append(product)

    def is_full(self) -> bool:
        return len(self.products) >= self.capacity

    def is_empty(self) -> bool:
        return not self.products

    @property
    def representative_upc(self) -> str | None:
        """UPC del primer producto, o None si el tote esta vacio."""
        if self.is_empty():
            return None
        return self.products[0].upc

    def upcs(self) -> list[str]:
        """UPCs distintos del tote en orden de aparicion."""
        return list(dict.fromkeys(product.upc for product in self.products))

    def count(self, upc: str) -> int:
        return sum(1 for product in self.products if product.upc == upc)

    def is_homogeneous(self) -> bool:
        return len(self.upcs()) <= 1

    def remove_upc(self, upc: str) -> list[Product]:
        """Retira todas las unidades del UPC y las retorna."""
        removed = [product for product in self.products if product.upc == upc]
        self.products[:] = [product for product in self.products if product.upc != upc]
        return removed
