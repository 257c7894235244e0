"""Page envelope models.

The envelope is serialized with camelCase keys (``totalElements``,
``pageable.pageNumber`` ...) so API consumers receive the same shape as a
classic Spring Data page. Python code uses the snake_case attribute names.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt
from pydantic.alias_generators import to_camel

from core.models.product import Product


class _EnvelopeModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class SortInfo(_EnvelopeModel):
    """Describes whether a sort was applied to the page content."""

    sorted: StrictBool = Field(..., description="True when a sort order was applied")
    unsorted: StrictBool = Field(..., description="True when content is in natural order")
    empty: StrictBool = Field(..., description="True when no sort order was requested")

    @classmethod
    def of(cls, is_sorted: bool) -> "SortInfo":
        return cls(sorted=is_sorted, unsorted=not is_sorted, empty=not is_sorted)


class Pageable(_EnvelopeModel):
    """Pagination request echoed back in the envelope."""

    offset: StrictInt = Field(..., description="Index of the first item of this page")
    page_number: StrictInt = Field(..., description="Zero-based page index")
    page_size: StrictInt = Field(..., description="Requested page size")
    paged: StrictBool = Field(True, description="Pagination was applied")
    unpaged: StrictBool = Field(False, description="Inverse of paged")
    sort: SortInfo = Field(..., description="Sort applied to the content")


class Page(_EnvelopeModel):
    """Paginated response for listing products."""

    content: list[Product] = Field(..., description="Products of the current page")
    total_elements: StrictInt = Field(..., description="Number of products in the collection")
    total_pages: StrictInt = Field(..., description="Number of pages for the requested size")
    size: StrictInt = Field(..., description="Requested page size")
    number: StrictInt = Field(..., description="Zero-based page index")
    number_of_elements: StrictInt = Field(..., description="Number of products in this page")
    first: StrictBool = Field(..., description="Whether this is the first page")
    last: StrictBool = Field(..., description="Whether no page follows this one")
    empty: StrictBool = Field(..., description="Whether this page has no content")
    sort: SortInfo
    pageable: Pageable

    def to_response(self) -> dict:
        """Serialize to the JSON-ready camelCase representation."""
        return self.model_dump(by_alias=True)
