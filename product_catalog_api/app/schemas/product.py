"""
Pydantic models for product data.

``ProductBase`` holds the client supplied fields shared by the
create and update payloads.  ``Product`` is the stored record and
the response body; it carries the server assigned ``id`` first, then
the same fields.  Stored records are frozen: an update builds a new
``Product`` rather than mutating the old one.

Prices are kept as ``Decimal`` but written to JSON as numbers.  To
make that exact, a price may have at most ``PRICE_MAX_DIGITS``
significant digits; anything a float cannot reproduce digit for
digit is rejected with 422 on the way in.
"""

from decimal import Decimal
from math import isfinite
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, PlainSerializer

# A decimal with up to 15 significant digits survives a float round trip.
PRICE_MAX_DIGITS = 15


def _check_price(price: Decimal) -> Decimal:
    if not isfinite(float(price)):
        raise ValueError("price is out of range")
    return price


Price = Annotated[
    Decimal,
    Field(max_digits=PRICE_MAX_DIGITS, allow_inf_nan=False),
    AfterValidator(_check_price),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ProductBase(BaseModel):
    name: str = Field(..., examples=["Laptop"])
    description: str = Field(..., examples=["High-performance laptop"])
    price: Price = Field(..., examples=[999.99])


class ProductCreate(ProductBase):
    """Schema for creating a product."""
    pass


class ProductUpdate(ProductBase):
    """Schema for replacing a product.

    Every field is required; an update replaces the whole record and
    keeps only its ``id``.
    """
    pass


class Product(BaseModel):
    """A product record as stored and returned by the API."""

    id: int
    name: str
    description: str
    price: Price

    model_config = {
        "frozen": True,
    }
