"""Abstract contract for product persistence."""

from abc import ABC, abstractmethod

from core.models.product import Product


class ProductRepository(ABC):
    """Contract for reading the product collection.

    Implementations could be DynamoDB, an in-memory snapshot, PostgreSQL, etc.
    Services depend on this interface, not the implementation.
    """

    @abstractmethod
    def list_products(self) -> list[Product]:
        """List every product in natural (insertion) order.

        Returns:
            List of products

        Raises:
            DynamoDBError: If the backing store cannot be read
            ProductListFailedError: If stored items cannot be converted
        """
