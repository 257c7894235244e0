"""
Product filtering service for list operations.

Provides a coordination layer that applies sorting and pagination
strategies to in-memory product collections. This service does
not perform data access and is intended to operate on pre-fetched items.
"""

from collections.abc import Sequence

from aws_lambda_powertools import Logger

from core.filters.page_pagination import paginate
from core.filters.sort import SortOrder
from core.models.errors import InvalidParameterError
from core.models.page import Page
from core.models.product import Product

logger = Logger(UTC=True)


class InMemoryProductFilter:
    """
    Service responsible for sorting and paginating products.

    This class orchestrates in-memory refinement strategies:
    - Stable single-field sorting
    - Page-number pagination
    """

    def paginate(
        self,
        items: Sequence[Product],
        *,
        page_number: int,
        page_size: int,
        sort: SortOrder | None = None,
    ) -> Page:
        """
        Apply sorting and pagination to a list of products.

        Args:
            items: Products in natural order
            page_number: Zero-based page index
            page_size: Maximum number of products per page
            sort: Optional sort order

        Returns:
            Page envelope

        Raises:
            InvalidParameterError: If pagination parameters are invalid
        """
        try:
            return paginate(
                items,
                page_number=page_number,
                page_size=page_size,
                sort=sort,
            )
        except InvalidParameterError as exc:
            logger.warning(
                "Invalid pagination parameters",
                extra={
                    "page": page_number,
                    "size": page_size,
                    "sort": str(sort) if sort else None,
                    "error": exc.message,
                },
            )
            raise
