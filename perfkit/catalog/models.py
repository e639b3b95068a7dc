"""Pydantic models for generated sheet products.

The serialized form of ``GeneratedProduct`` (``to_payload()``) is the body
the commerce platform's product creation endpoint accepts.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Platform References
# ============================================================================


class CategoryRef(BaseModel):
    """Product category as listed by the platform."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., description="Category ID")
    name: str | None = Field(default=None, description="Category name")


class ShippingProfileRef(BaseModel):
    """Shipping profile assigned to generated products."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., description="Shipping profile ID")


class SalesChannelRef(BaseModel):
    """Sales channel a product is published to."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., description="Sales channel ID")


# ============================================================================
# Generated Product
# ============================================================================


class ProductStatus(str, Enum):
    """Product publication status."""

    DRAFT = "draft"
    PUBLISHED = "published"


class SheetVariantCombination(BaseModel):
    """One size/color/height triple a variant embodies.

    Serialized with the option titles as keys, e.g.
    ``{"Size": "90x200", "Color": "Navy", "Height": "30cm"}``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    size: str = Field(..., alias="Size")
    color: str = Field(..., alias="Color")
    height: str = Field(..., alias="Height")


class VariantPrice(BaseModel):
    """Variant price in one currency."""

    amount: int = Field(..., description="Price amount in major units")
    currency_code: str = Field(..., description="Lowercase ISO currency code")


class GeneratedVariant(BaseModel):
    """A purchasable variant of a generated product."""

    title: str
    sku: str
    options: SheetVariantCombination
    prices: list[VariantPrice] = Field(default_factory=list)


class ProductImage(BaseModel):
    """Product image reference."""

    url: str


class ProductOption(BaseModel):
    """Option declaration with the values used by the product's variants."""

    title: str
    values: list[str]


class GeneratedProduct(BaseModel):
    """A complete sheet product ready for the platform's create endpoint."""

    title: str
    category_ids: list[str] = Field(default_factory=list)
    description: str
    handle: str
    weight: int = Field(..., description="Weight in grams")
    status: ProductStatus = ProductStatus.PUBLISHED
    shipping_profile_id: str
    images: list[ProductImage] = Field(default_factory=list)
    options: list[ProductOption] = Field(default_factory=list)
    variants: list[GeneratedVariant] = Field(default_factory=list)
    sales_channels: list[SalesChannelRef] = Field(default_factory=list)

    def option_values(self, title: str) -> list[str]:
        """Get declared values of an option.

        Args:
            title: Option title ("Size", "Color" or "Height").

        Returns:
            Values list, empty if the option is not declared.
        """
        for option in self.options:
            if option.title == title:
                return option.values
        return []

    def to_payload(self) -> dict[str, Any]:
        """Convert to the platform's JSON payload.

        Returns:
            Dictionary representation with option titles as variant keys.
        """
        return self.model_dump(mode="json", by_alias=True)
