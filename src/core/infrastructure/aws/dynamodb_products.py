"""DynamoDB-backed implementation of ProductRepository."""

from decimal import Decimal
from typing import Any

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError
from pydantic import ValidationError as PydanticValidationError

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter, DynamoDBAdapterProtocol
from core.models.errors import DynamoDBError, ProductListFailedError
from core.models.product import Product
from core.repositories.product_repository import ProductRepository
from core.utils.constants import (
    ERROR_CODE_PRODUCT_CREATE_FAILED,
    ERROR_CODE_PRODUCT_INVALID_FORMAT,
    ERROR_CODE_PRODUCT_LIST_FAILED,
)

Item = dict[str, Any]

logger = Logger(UTC=True)


class DynamoDBProducts(ProductRepository):
    """DynamoDB-backed product storage with error handling.

    Items are keyed by ``product_id``; the numeric ``position`` attribute
    defines the natural (insertion) order of the collection.

    All boto3 errors are caught and translated into
    domain-specific errors with stable semantics.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol | None = None) -> None:
        """Initialize with DynamoDB adapter."""
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter()

    def put_product(self, *, product_id: str, product: Product, position: int) -> None:
        """Store a product at the given natural-order position.

        Raises:
            ValueError: If product_id is empty or position is negative
            DynamoDBError: If the write fails
        """
        if not product_id or not product_id.strip():
            raise ValueError("product_id must be a non-empty string")

        if position < 0:
            raise ValueError("position must be zero or a positive integer")

        item: Item = {
            "product_id": product_id,
            "position": position,
            "name": product.name,
            "price": Decimal(str(product.price)),
        }

        try:
            self._db.put_item(item=item)
            logger.debug(
                "Product stored",
                extra={"product_id": product_id, "position": position},
            )

        except ClientError as exc:
            logger.error(
                "DynamoDB put_item failed",
                extra={
                    "product_id": product_id,
                    "error_code": exc.response.get("Error", {}).get("Code"),
                },
            )
            raise DynamoDBError(
                message="Unable to store product",
                error_code=ERROR_CODE_PRODUCT_CREATE_FAILED,
                details={"product_id": product_id},
            ) from exc

    def list_products(self) -> list[Product]:
        """List every product ordered by position.

        NOTE:
        - A full table scan is performed; the scan is paginated
          internally by following LastEvaluatedKey.
        - DynamoDB scans return items in hash order, so the natural
          order is restored from the ``position`` attribute.
        """
        logger.debug("Listing products")

        items: list[Item] = []
        scan_kwargs: dict[str, Any] = {}

        try:
            while True:
                response = self._db.scan(**scan_kwargs)
                page_items = response.get("Items", [])

                if not isinstance(page_items, list):
                    raise DynamoDBError(
                        message="Invalid scan response from DynamoDB",
                        error_code=ERROR_CODE_PRODUCT_LIST_FAILED,
                    )

                items.extend(page_items)

                last_evaluated_key = response.get("LastEvaluatedKey")
                if not last_evaluated_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_evaluated_key

        except ClientError as exc:
            logger.error(
                "DynamoDB scan failed",
                extra={"error_code": exc.response.get("Error", {}).get("Code")},
            )
            raise DynamoDBError(
                message="Unable to list products",
                error_code=ERROR_CODE_PRODUCT_LIST_FAILED,
            ) from exc

        products = [
            self._to_product(item)
            for item in sorted(items, key=lambda item: item.get("position", 0))
        ]

        logger.info("Products listed", extra={"count": len(products)})
        return products

    @staticmethod
    def _to_product(item: Item) -> Product:
        """Convert a raw DynamoDB item to a Product."""
        try:
            return Product(name=item["name"], price=float(item["price"]))
        except (KeyError, TypeError, ValueError, PydanticValidationError) as exc:
            logger.error(
                "Malformed product item",
                extra={"product_id": item.get("product_id")},
            )
            raise ProductListFailedError(
                message="Stored product has an invalid format",
                error_code=ERROR_CODE_PRODUCT_INVALID_FORMAT,
                details={"product_id": item.get("product_id")},
            ) from exc
