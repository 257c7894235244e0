"""
Sort specification for product listings.

Sortable fields are an explicit registry of typed accessors, so a sort
request never reaches into arbitrary attributes of a product.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from core.models.errors import InvalidParameterError
from core.models.product import Product
from core.utils.constants import DEFAULT_SORT_DIRECTION, SORT_SEPARATOR


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: str) -> "SortDirection":
        """Parse a direction case-insensitively."""
        try:
            return cls(value.strip().upper())
        except ValueError as exc:
            raise InvalidParameterError(
                message=f"Invalid sort direction '{value}'. Expected ASC or DESC",
                details={"direction": value},
            ) from exc


class SortField(str, Enum):
    NAME = "name"
    PRICE = "price"

    @classmethod
    def parse(cls, value: str) -> "SortField":
        try:
            return cls(value.strip())
        except ValueError as exc:
            raise InvalidParameterError(
                message=f"Invalid sort field '{value}'",
                details={
                    "field": value,
                    "allowed": sorted(field.value for field in cls),
                },
            ) from exc

    @property
    def accessor(self) -> Callable[[Product], Any]:
        return SORT_ACCESSORS[self]


SORT_ACCESSORS: dict[SortField, Callable[[Product], Any]] = {
    SortField.NAME: lambda product: product.name,
    SortField.PRICE: lambda product: product.price,
}


@dataclass(frozen=True)
class SortOrder:
    """A single sort instruction: field plus direction."""

    field: SortField
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, value: str) -> "SortOrder":
        """
        Parse a ``field[,direction]`` query value.

        Example:
            SortOrder.parse("price,DESC")
            → SortOrder(field=SortField.PRICE, direction=SortDirection.DESC)
        """
        parts = [part.strip() for part in value.split(SORT_SEPARATOR)]

        if len(parts) > 2 or not parts[0]:
            raise InvalidParameterError(
                message=f"Invalid sort '{value}'. Expected <field>,<ASC|DESC>",
                details={"sort": value},
            )

        field = SortField.parse(parts[0])
        direction = SortDirection.parse(
            parts[1] if len(parts) == 2 else DEFAULT_SORT_DIRECTION
        )
        return cls(field=field, direction=direction)

    def apply(self, items: list[Product]) -> list[Product]:
        """Return a stably sorted copy of ``items``.

        ``sorted`` keeps equal elements in their original order even with
        ``reverse=True``.
        """
        return sorted(
            items,
            key=self.field.accessor,
            reverse=self.direction is SortDirection.DESC,
        )

    def __str__(self) -> str:
        return f"{self.field.value}{SORT_SEPARATOR}{self.direction.value}"
