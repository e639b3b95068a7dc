"""Bed sheet product generator.

Builds catalogs of sheet products whose variants are sampled from the
size x color x height option space. Products cycle through the sheet
types round-robin; variant combinations, prices and weights are random.
Pass a seed to reproduce those; SKU suffixes stay unique per run.
"""

import math
import random
import re
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import structlog

from perfkit.catalog.combinations import (
    COLORS,
    HEIGHTS,
    SHEET_DESCRIPTIONS,
    SHEET_TYPES,
    SIZES,
)
from perfkit.catalog.identifiers import UniqueStringGenerator
from perfkit.catalog.models import (
    CategoryRef,
    GeneratedProduct,
    GeneratedVariant,
    ProductImage,
    ProductOption,
    ProductStatus,
    SalesChannelRef,
    SheetVariantCombination,
    ShippingProfileRef,
    VariantPrice,
)
from perfkit.domain.exceptions import InvalidArgumentError

logger = structlog.get_logger()


# ============================================================================
# Constants
# ============================================================================

# Preferred category names, in lookup order
PREFERRED_CATEGORIES = ("Sheets", "Bedding")

PRODUCT_IMAGES = (
    "https://res.cloudinary.com/do9lggzv1/image/fetch/c_limit,w_3840/f_auto/q_auto/v1/"
    "https://sadrlmedusaprod.blob.core.windows.net/medusaprod/medusaprod/produktbilleder/"
    "unikka/hmkuv0902007hb.jpg?_a=BAVAZGE70",
    "https://res.cloudinary.com/do9lggzv1/image/fetch/c_limit,w_3840/f_auto/q_auto/v1/"
    "https://sadrlmedusaprod.blob.core.windows.net/medusaprod/medusaprod/produktbilleder/"
    "unikka/hmkuv0902007blb.jpg?_a=BAVAZGE70",
    "https://res.cloudinary.com/do9lggzv1/image/fetch/c_limit,w_3840/f_auto/q_auto/v1/"
    "https://sadrlmedusaprod.blob.core.windows.net/medusaprod/medusaprod/produktbilleder/"
    "hmkuv0902007lgb.jpg?_a=BAVAZGE70",
)

# Weight range in grams, upper bound exclusive
MIN_WEIGHT = 600
MAX_WEIGHT = 1000

SKU_SUFFIX_LENGTH = 8

TOTAL_COMBINATIONS = len(SIZES) * len(COLORS) * len(HEIGHTS)


# ============================================================================
# Generator Configuration
# ============================================================================


@dataclass(frozen=True)
class PriceRange:
    """Variant price bounds in major currency units."""

    min: int = 20
    max: int = 80


@dataclass
class GeneratorConfig:
    """Configuration for sheet product generation.

    Attributes:
        num_products: Number of products to generate.
        handle_id: Salt appended to every handle so reruns don't collide.
        variants_per_product: Variants per product (capped at the
            number of distinct combinations).
        price_range: Bounds for random variant prices.
        currencies: Currency codes; each variant gets one price per code.
        seed: Random seed for reproducibility, None for a fresh source.
    """

    num_products: int
    handle_id: int
    variants_per_product: int
    price_range: PriceRange = field(default_factory=PriceRange)
    currencies: list[str] = field(default_factory=lambda: ["eur", "usd"])
    seed: int | None = None


# ============================================================================
# Helpers
# ============================================================================


def _compact_upper(value: str) -> str:
    return re.sub(r"\s+", "", value).upper()


def _kebab_lower(value: str) -> str:
    return re.sub(r"\s+", "-", value.lower())


def size_sort_key(size: str) -> tuple[int, int]:
    """Sort key ordering sizes by width, then length."""
    width, length = size.split("x")
    return int(width), int(length)


def height_sort_key(height: str) -> int:
    """Sort key ordering heights by their value in millimeters."""
    return int(height.removesuffix("cm")) * 10


def build_variant_sku(sheet_type: str, combination: SheetVariantCombination, suffix: str) -> str:
    """Build a variant SKU.

    Args:
        sheet_type: Sheet type name, e.g. "Egyptian Cotton".
        combination: Variant combination.
        suffix: Random suffix keeping the SKU unique.

    Returns:
        SKU such as ``"SHEET-EGYPTIANCOTTON-90X200-NAVY-30CM-aB3xY9k2"``.
    """
    return "-".join(
        [
            "SHEET",
            _compact_upper(sheet_type),
            combination.size.replace("x", "X"),
            _compact_upper(combination.color),
            combination.height.replace("cm", "CM"),
            suffix,
        ]
    )


def build_handle(sheet_type: str, product_number: int, handle_id: int) -> str:
    """Build a URL-safe product handle."""
    return f"{_kebab_lower(sheet_type)}-sheet-set-{product_number}-{handle_id}"


def describe_sheet_type(sheet_type: str) -> str:
    """Get description for a sheet type, with a generic fallback."""
    description = SHEET_DESCRIPTIONS.get(sheet_type)
    if description:
        return description
    kind = sheet_type.lower()
    return (
        f"Premium {kind} bed sheet set. Experience luxury and comfort with our "
        f"high-quality {kind} sheets, designed for the perfect night's sleep."
    )


def resolve_category_ids(categories: Sequence[CategoryRef]) -> list[str]:
    """Pick the category for generated products.

    Looks for a category named "Sheets", then "Bedding", then falls back
    to the first category.

    Args:
        categories: Categories available on the platform.

    Returns:
        Single-element list of the chosen ID, or empty if none exist.
    """
    for name in PREFERRED_CATEGORIES:
        match = next((c for c in categories if c.name == name), None)
        if match is not None:
            return [match.id]
    if categories:
        return [categories[0].id]
    return []


def unrank_combination(index: int) -> SheetVariantCombination:
    """Map an index in ``[0, TOTAL_COMBINATIONS)`` onto a combination.

    The order matches nested iteration over sizes, then colors, then
    heights.
    """
    per_size = len(COLORS) * len(HEIGHTS)
    size_index, rest = divmod(index, per_size)
    color_index, height_index = divmod(rest, len(HEIGHTS))
    return SheetVariantCombination(
        size=SIZES[size_index],
        color=COLORS[color_index],
        height=HEIGHTS[height_index],
    )


def _coerce(model: type, value: Any) -> Any:
    if isinstance(value, model):
        return value
    if isinstance(value, Mapping):
        return model.model_validate(value)
    return model.model_validate(value, from_attributes=True)


# ============================================================================
# Sheet Product Generator
# ============================================================================


class SheetProductGenerator:
    """Generates bed sheet products with combinatorial variants.

    Example usage:
        generator = SheetProductGenerator(
            GeneratorConfig(num_products=10, handle_id=1700000000, variants_per_product=8)
        )
        products = generator.generate(categories, shipping_profile, sales_channels)
    """

    def __init__(self, config: GeneratorConfig, rng: random.Random | None = None) -> None:
        """Initialize generator with configuration.

        Args:
            config: Generator configuration.
            rng: Random source; seeded from ``config.seed`` if not provided.

        SKU suffixes come from a secure source owned by this generator, never
        from ``rng``, so seeded runs still get fresh SKUs.
        """
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.sku_suffixes = UniqueStringGenerator()

    @property
    def variants_per_product(self) -> int:
        """Get effective number of variants per product."""
        return max(0, min(self.config.variants_per_product, TOTAL_COMBINATIONS))

    @property
    def expected_variant_count(self) -> int:
        """Get total number of variants a run produces."""
        return max(0, self.config.num_products) * self.variants_per_product

    def sample_combinations(self, count: int) -> list[SheetVariantCombination]:
        """Sample distinct combinations uniformly without replacement.

        Args:
            count: Number of combinations (capped at the total).

        Returns:
            Combinations in random order.
        """
        count = max(0, min(count, TOTAL_COMBINATIONS))
        indices = self.rng.sample(range(TOTAL_COMBINATIONS), count)
        return [unrank_combination(i) for i in indices]

    def _random_amount(self) -> int:
        price_range = self.config.price_range
        return math.floor(
            self.rng.random() * (price_range.max - price_range.min) + price_range.min
        )

    def _generate_variant(
        self, sheet_type: str, combination: SheetVariantCombination
    ) -> GeneratedVariant:
        suffix = self.sku_suffixes.generate(SKU_SUFFIX_LENGTH)
        return GeneratedVariant(
            title=f"{combination.size} / {combination.color} / {combination.height}",
            sku=build_variant_sku(sheet_type, combination, suffix),
            options=combination,
            prices=[
                VariantPrice(amount=self._random_amount(), currency_code=currency)
                for currency in self.config.currencies
            ],
        )

    def _build_options(
        self, combinations: list[SheetVariantCombination]
    ) -> list[ProductOption]:
        sizes = sorted({c.size for c in combinations}, key=size_sort_key)
        colors = sorted({c.color for c in combinations})
        heights = sorted({c.height for c in combinations}, key=height_sort_key)
        return [
            ProductOption(title="Size", values=sizes),
            ProductOption(title="Color", values=colors),
            ProductOption(title="Height", values=heights),
        ]

    def _generate_product(
        self,
        index: int,
        category_ids: list[str],
        shipping_profile: ShippingProfileRef,
        sales_channel: SalesChannelRef,
    ) -> GeneratedProduct:
        sheet_type = SHEET_TYPES[index % len(SHEET_TYPES)]
        product_number = index + 1

        combinations = self.sample_combinations(self.config.variants_per_product)
        logger.info(
            "Generated sheet product variants",
            product_number=product_number,
            sheet_type=sheet_type,
            variant_count=len(combinations),
        )

        return GeneratedProduct(
            title=f"{sheet_type} Bed Sheet Set {product_number}",
            category_ids=list(category_ids),
            description=describe_sheet_type(sheet_type),
            handle=build_handle(sheet_type, product_number, self.config.handle_id),
            weight=self.rng.randrange(MIN_WEIGHT, MAX_WEIGHT),
            status=ProductStatus.PUBLISHED,
            shipping_profile_id=shipping_profile.id,
            images=[ProductImage(url=url) for url in PRODUCT_IMAGES],
            options=self._build_options(combinations),
            variants=[self._generate_variant(sheet_type, c) for c in combinations],
            sales_channels=[SalesChannelRef(id=sales_channel.id)],
        )

    def iter_products(
        self,
        categories: Sequence[Any],
        shipping_profile: Any,
        sales_channels: Sequence[Any],
    ) -> Iterator[GeneratedProduct]:
        """Generate products one at a time.

        Args:
            categories: Platform categories (models, dicts or objects
                with ``id`` and ``name``).
            shipping_profile: Shipping profile with an ``id``.
            sales_channels: Sales channels; the first one is used.

        Yields:
            GeneratedProduct instances.

        Raises:
            InvalidArgumentError: If ``sales_channels`` is empty.
        """
        if not sales_channels:
            raise InvalidArgumentError(
                "sales_channels", "at least one sales channel is required"
            )

        category_refs = [_coerce(CategoryRef, c) for c in categories]
        profile = _coerce(ShippingProfileRef, shipping_profile)
        channel = _coerce(SalesChannelRef, sales_channels[0])
        category_ids = resolve_category_ids(category_refs)

        logger.info(
            "Sheet catalog dimensions",
            total_combinations=TOTAL_COMBINATIONS,
            sizes=len(SIZES),
            size_range=f"{SIZES[0]} to {SIZES[-1]}",
            colors=len(COLORS),
            heights=len(HEIGHTS),
            height_range=f"{HEIGHTS[0]} to {HEIGHTS[-1]}",
        )

        for i in range(self.config.num_products):
            yield self._generate_product(i, category_ids, profile, channel)

    def generate(
        self,
        categories: Sequence[Any],
        shipping_profile: Any,
        sales_channels: Sequence[Any],
    ) -> list[GeneratedProduct]:
        """Generate all products as a list.

        Returns:
            List of generated products.
        """
        return list(self.iter_products(categories, shipping_profile, sales_channels))


def generate_sheet_products(
    config: GeneratorConfig,
    categories: Sequence[Any],
    shipping_profile: Any,
    sales_channels: Sequence[Any],
) -> list[GeneratedProduct]:
    """Generate sheet products for the platform's create endpoint.

    Args:
        config: Generator configuration.
        categories: Platform categories.
        shipping_profile: Shipping profile for all products.
        sales_channels: Sales channels; products go to the first one.

    Returns:
        List of generated products.

    Raises:
        InvalidArgumentError: If ``sales_channels`` is empty.
    """
    return SheetProductGenerator(config).generate(
        categories, shipping_profile, sales_channels
    )
