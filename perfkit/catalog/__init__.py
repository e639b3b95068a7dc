"""Sheet Catalog Generation.

Provides option catalogs, the combination calculator, identifier helpers
and the sheet product generator used to seed performance-test catalogs.
"""

from perfkit.catalog.combinations import (
    COLORS,
    HEIGHTS,
    SHEET_TYPES,
    SIZES,
    CombinationInfo,
    calculate_sheet_combinations,
    display_combination_info,
)
from perfkit.catalog.generator import (
    GeneratorConfig,
    PriceRange,
    SheetProductGenerator,
    generate_sheet_products,
)
from perfkit.catalog.identifiers import (
    CHARSET,
    UniqueStringGenerator,
    generate_base64_string,
    generate_custom_random_string,
    generate_hex_string,
    generate_multiple_unique_strings,
    generate_random_string,
    generate_secure_random_string,
    generate_short_unique_id,
    generate_unique_id,
    generate_unique_slug,
)
from perfkit.catalog.models import (
    CategoryRef,
    GeneratedProduct,
    GeneratedVariant,
    SalesChannelRef,
    SheetVariantCombination,
    ShippingProfileRef,
)

__all__ = [
    # Option catalogs
    "COLORS",
    "HEIGHTS",
    "SHEET_TYPES",
    "SIZES",
    "CombinationInfo",
    "calculate_sheet_combinations",
    "display_combination_info",
    # Identifiers
    "CHARSET",
    "UniqueStringGenerator",
    "generate_base64_string",
    "generate_custom_random_string",
    "generate_hex_string",
    "generate_multiple_unique_strings",
    "generate_random_string",
    "generate_secure_random_string",
    "generate_short_unique_id",
    "generate_unique_id",
    "generate_unique_slug",
    # Models
    "CategoryRef",
    "GeneratedProduct",
    "GeneratedVariant",
    "SalesChannelRef",
    "SheetVariantCombination",
    "ShippingProfileRef",
    # Generator
    "GeneratorConfig",
    "PriceRange",
    "SheetProductGenerator",
    "generate_sheet_products",
]
