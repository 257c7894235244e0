"""
Page-number based pagination utilities.
"""

import math
from collections.abc import Sequence

from core.filters.sort import SortOrder
from core.models.errors import InvalidParameterError
from core.models.page import Page, Pageable, SortInfo
from core.models.product import Product
from core.utils.constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MIN_PAGE_SIZE,
)


class PagePagination:
    """
    Page-number pagination helper.

    This class encapsulates all logic related to slicing a list of products
    into a zero-based page of a fixed size and describing the result.

    Typical usage:
    1. Validate page number and page size
    2. Slice the (already sorted) items
    3. Wrap the slice in a Page envelope
    """

    @staticmethod
    def validate(page_number: int, page_size: int) -> tuple[bool, str]:
        """
        Validate pagination parameters.

        Validation rules:
        - page_number must be zero or positive
        - page_size must be at least MIN_PAGE_SIZE

        Returns:
            A tuple of:
            - is_valid: Whether parameters are valid
            - error_message: Human-readable error message if invalid

        Example:
            validate(page_number=0, page_size=20)
            → (True, "")
        """
        if page_number < 0:
            return False, "Page must be zero or a positive integer"

        if page_size < MIN_PAGE_SIZE:
            return False, f"Size must be at least {MIN_PAGE_SIZE}"

        return True, ""

    @staticmethod
    def slice(
        items: Sequence[Product],
        page_number: int,
        page_size: int,
    ) -> list[Product]:
        """
        Return the items of the requested page.

        Example:
            items = [A, B, C, D]
            page_number = 1
            page_size = 3

            → [D]
        """
        offset = page_number * page_size
        return list(items[offset : offset + page_size])

    @staticmethod
    def build_page(
        content: list[Product],
        *,
        total_elements: int,
        page_number: int,
        page_size: int,
        is_sorted: bool,
    ) -> Page:
        """
        Wrap a page slice with its pagination metadata.

        Notes:
            - Page numbering starts at 0
            - total_pages is rounded up and is 0 for an empty collection
            - last is True once the page reaches the end of the collection,
              including pages requested past the end
        """
        offset = page_number * page_size
        total_pages = math.ceil(total_elements / page_size)
        number_of_elements = len(content)
        sort_info = SortInfo.of(is_sorted)

        return Page(
            content=content,
            total_elements=total_elements,
            total_pages=total_pages,
            size=page_size,
            number=page_number,
            number_of_elements=number_of_elements,
            first=page_number == 0,
            last=offset + number_of_elements >= total_elements,
            empty=number_of_elements == 0,
            sort=sort_info,
            pageable=Pageable(
                offset=offset,
                page_number=page_number,
                page_size=page_size,
                sort=sort_info,
            ),
        )


def paginate(
    items: Sequence[Product],
    page_number: int = DEFAULT_PAGE,
    page_size: int = DEFAULT_PAGE_SIZE,
    sort: SortOrder | None = None,
) -> Page:
    """
    Sort (optionally) and paginate a product collection.

    Args:
        items: Full collection in natural order
        page_number: Zero-based page index
        page_size: Maximum number of products per page
        sort: Optional sort order applied before slicing

    Returns:
        Page envelope for the requested page

    Raises:
        InvalidParameterError: If page_number or page_size is out of range
    """
    is_valid, error_message = PagePagination.validate(page_number, page_size)
    if not is_valid:
        raise InvalidParameterError(
            message=error_message,
            details={"page": page_number, "size": page_size},
        )

    ordered = sort.apply(list(items)) if sort else list(items)
    content = PagePagination.slice(ordered, page_number, page_size)

    return PagePagination.build_page(
        content,
        total_elements=len(ordered),
        page_number=page_number,
        page_size=page_size,
        is_sorted=sort is not None,
    )
