"""In-memory implementation of ProductRepository."""

from collections.abc import Iterable

from core.models.product import Product
from core.repositories.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):
    """Read-only product collection held as an immutable snapshot."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: tuple[Product, ...] = tuple(products)

    def list_products(self) -> list[Product]:
        return list(self._products)
