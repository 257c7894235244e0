"""Shared product model."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class Product(BaseModel):
    """Product returned by the Product Catalog API."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr = Field(..., min_length=1, description="Product name")
    price: float = Field(..., ge=0, description="Unit price")
