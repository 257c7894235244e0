"""
Business logic for product listing.
"""

from aws_lambda_powertools import Logger

from core.filters.in_memory_product_filter import InMemoryProductFilter
from core.filters.sort import SortOrder
from core.infrastructure.aws.dynamodb_products import DynamoDBProducts
from core.models.errors import ProductListFailedError, ProductServiceError
from core.models.page import Page
from core.repositories.product_repository import ProductRepository

logger = Logger(UTC=True)


class ListProductsService:
    """Application service responsible for listing products.

    This service coordinates:
    - Reading the product collection from the repository
    - Sorting and paginating the snapshot in memory
    """

    def __init__(self, repository: ProductRepository | None = None) -> None:
        """Initialize list service with its product repository."""
        self.repository: ProductRepository = repository or DynamoDBProducts()
        self.filters = InMemoryProductFilter()

    def list_products(
        self,
        *,
        page: int,
        size: int,
        sort: SortOrder | None = None,
    ) -> Page:
        """List products for the requested page, optionally sorted."""

        try:
            products = self.repository.list_products()

        except ProductServiceError:
            raise

        except Exception as exc:
            logger.exception("Failed to fetch products")
            raise ProductListFailedError(
                message="Unable to retrieve products",
            ) from exc

        result = self.filters.paginate(
            products,
            page_number=page,
            page_size=size,
            sort=sort,
        )

        logger.info(
            "Products listed successfully",
            extra={
                "page": page,
                "size": size,
                "sort": str(sort) if sort else None,
                "count": result.number_of_elements,
                "total": result.total_elements,
            },
        )

        return result
