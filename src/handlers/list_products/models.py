"""
Pydantic models for list products request.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.filters.sort import SortOrder
from core.models.errors import InvalidParameterError
from core.utils.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MIN_PAGE_SIZE


class ListProductsRequest(BaseModel):
    """
    Validation model for list products API.

    Query parameters:
    - page: zero-based page index
    - size: page size
    - sort: single ``field,direction`` instruction (e.g. ``price,DESC``)
    """

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    # Pagination
    page: int = Field(
        default=DEFAULT_PAGE,
        ge=0,
        description="Zero-based page index",
    )
    size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        ge=MIN_PAGE_SIZE,
        description=f"Results per page (at least {MIN_PAGE_SIZE})",
    )

    # Sorting
    sort: str | None = Field(
        default=None,
        description="Sort instruction: <field>,<ASC|DESC>",
    )

    @field_validator("sort")
    @classmethod
    def normalize_sort(cls, value: str | None) -> str | None:
        """Validate and normalize the sort instruction.

        Input:  "price,desc"
        Output: "price,DESC"
        """
        if not value:
            return None

        try:
            return str(SortOrder.parse(value))
        except InvalidParameterError as exc:
            raise ValueError(exc.message) from exc

    @property
    def sort_order(self) -> SortOrder | None:
        return SortOrder.parse(self.sort) if self.sort else None
