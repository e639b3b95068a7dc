"""Sheet option catalogs and combination calculator.

Defines the size, color and height option values shared by the product
generator, and reports how many distinct variants they allow. Useful for
planning performance tests against variant-heavy products.
"""

from dataclasses import dataclass


# ============================================================================
# Option Catalogs
# ============================================================================

# Widths and lengths in cm
WIDTHS: tuple[int, ...] = tuple(range(70, 221, 10))
LENGTHS: tuple[int, ...] = tuple(range(180, 241, 10))

# Width-major order: 70x180, 70x190, ..., 220x240
SIZES: tuple[str, ...] = tuple(f"{w}x{l}" for w in WIDTHS for l in LENGTHS)

COLORS: tuple[str, ...] = (
    "White",
    "Cream",
    "Light Blue",
    "Sage Green",
    "Soft Pink",
    "Charcoal",
    "Navy",
    "Burgundy",
    "Lavender",
    "Mint Green",
    "Dusty Rose",
    "Stone Gray",
    "Ivory",
    "Pearl",
    "Silver",
    "Platinum",
    "Champagne",
    "Beige",
    "Taupe",
    "Mocha",
    "Espresso",
    "Black",
    "Midnight Blue",
    "Royal Blue",
    "Teal",
    "Forest Green",
    "Olive",
    "Rose Gold",
    "Blush",
    "Coral",
    "Peach",
    "Apricot",
    "Sunshine",
    "Golden",
    "Amber",
    "Rust",
    "Terracotta",
    "Brick Red",
    "Wine",
    "Plum",
    "Eggplant",
    "Violet",
    "Lilac",
    "Periwinkle",
    "Sky Blue",
    "Aqua",
    "Turquoise",
    "Seafoam",
    "Jade",
    "Emerald",
)

# Mattress heights the fitted sheet covers
HEIGHTS: tuple[str, ...] = (
    "20cm",  # Ultra Low
    "22cm",  # Very Low
    "25cm",  # Standard
    "27cm",  # Medium Low
    "30cm",  # Deep
    "32cm",  # Medium Deep
    "35cm",  # Extra Deep
    "37cm",  # Very Deep
    "40cm",  # Super Deep
    "42cm",  # Ultra Deep
    "45cm",  # Maximum
    "50cm",  # Oversized
)

SHEET_TYPES: tuple[str, ...] = (
    "Egyptian Cotton",
    "Bamboo",
    "Linen",
    "Percale",
    "Sateen",
    "Jersey",
    "Flannel",
    "Microfiber",
    "Silk",
    "Organic Cotton",
    "Tencel",
    "Hemp",
)

SHEET_DESCRIPTIONS: dict[str, str] = {
    "Egyptian Cotton": (
        "Premium Egyptian cotton bed sheet set. Experience luxury and comfort "
        "with our long-staple cotton sheets, known for their exceptional "
        "softness and durability."
    ),
    "Bamboo": (
        "Eco-friendly bamboo bed sheet set. Naturally antibacterial and "
        "moisture-wicking, perfect for sensitive skin and temperature regulation."
    ),
    "Linen": (
        "100% pure linen bed sheet set. Breathable and naturally textured, "
        "offering a relaxed, lived-in luxury that gets softer with every wash."
    ),
    "Percale": (
        "Crisp percale weave bed sheet set. Cool and breathable with a "
        "hotel-like feel, perfect for warm sleepers who prefer a crisp finish."
    ),
    "Sateen": (
        "Silky sateen weave bed sheet set. Lustrous and smooth with a subtle "
        "sheen, offering a luxurious drape and elegant appearance."
    ),
    "Jersey": (
        "Soft jersey knit bed sheet set. Stretchy and cozy like your favorite "
        "t-shirt, providing ultimate comfort and easy care."
    ),
    "Flannel": (
        "Cozy flannel bed sheet set. Brushed for extra warmth and softness, "
        "perfect for cooler months and creating a warm, inviting bed."
    ),
    "Microfiber": (
        "Ultra-soft microfiber bed sheet set. Wrinkle-resistant and easy-care, "
        "offering comfort and convenience at an affordable price."
    ),
    "Silk": (
        "Luxurious mulberry silk bed sheet set. Temperature-regulating and "
        "hypoallergenic, providing the ultimate in luxury bedding."
    ),
    "Organic Cotton": (
        "Certified organic cotton bed sheet set. Grown without harmful "
        "chemicals, offering pure comfort that's gentle on you and the environment."
    ),
    "Tencel": (
        "Sustainable Tencel bed sheet set. Made from eucalyptus fibers, "
        "naturally cooling and moisture-wicking with a silky-smooth feel."
    ),
    "Hemp": (
        "Durable hemp bed sheet set. Naturally antimicrobial and environmentally "
        "friendly, becoming softer and more comfortable over time."
    ),
}

# Variant count a single product should be able to reach in load tests
TARGET_VARIANTS = 1000


# ============================================================================
# Combination Calculator
# ============================================================================


@dataclass(frozen=True)
class CombinationInfo:
    """Counts of the sheet option space.

    Attributes:
        widths: Number of width values.
        lengths: Number of length values.
        size_count: Number of sizes (widths x lengths).
        color_count: Number of colors.
        height_count: Number of heights.
        total_combinations: Number of distinct size/color/height variants.
        width_range: Smallest and largest width, e.g. "70-220".
        length_range: Smallest and largest length, e.g. "180-240".
        size_examples: Smallest, middle and largest size.
    """

    widths: int
    lengths: int
    size_count: int
    color_count: int
    height_count: int
    total_combinations: int
    width_range: str
    length_range: str
    size_examples: tuple[str, str, str]


def calculate_sheet_combinations(
    widths: tuple[int, ...] = WIDTHS,
    lengths: tuple[int, ...] = LENGTHS,
    color_count: int = len(COLORS),
    height_count: int = len(HEIGHTS),
) -> CombinationInfo:
    """Calculate the size of the sheet variant space.

    Args:
        widths: Width values in cm.
        lengths: Length values in cm.
        color_count: Number of colors.
        height_count: Number of heights.

    Returns:
        CombinationInfo; the defaults give 112 sizes and 67,200 variants.
    """
    size_count = len(widths) * len(lengths)
    mid_w = widths[len(widths) // 2]
    mid_l = lengths[len(lengths) // 2]

    return CombinationInfo(
        widths=len(widths),
        lengths=len(lengths),
        size_count=size_count,
        color_count=color_count,
        height_count=height_count,
        total_combinations=size_count * color_count * height_count,
        width_range=f"{widths[0]}-{widths[-1]}",
        length_range=f"{lengths[0]}-{lengths[-1]}",
        size_examples=(
            f"{widths[0]}x{lengths[0]}",
            f"{mid_w}x{mid_l}",
            f"{widths[-1]}x{lengths[-1]}",
        ),
    )


def format_combination_report(info: CombinationInfo) -> list[str]:
    """Render the combination report as console lines.

    Args:
        info: Calculated combination info.

    Returns:
        Report lines, without trailing newlines.
    """
    lines = [
        "Sheet Product Combination Calculator",
        "=" * 37,
        f"Widths: {info.widths} options ({info.width_range}cm)",
        f"Lengths: {info.lengths} options ({info.length_range}cm)",
        f"Total Sizes: {info.size_count} combinations",
        f"Colors: {info.color_count} options",
        f"Heights: {info.height_count} options ({HEIGHTS[0]}-{HEIGHTS[-1]})",
        "",
        f"TOTAL POSSIBLE VARIANTS: {info.total_combinations:,}",
        "",
        "Size Examples:",
    ]
    for label, size in zip(("Smallest", "Medium", "Largest"), info.size_examples):
        lines.append(f"   {label}: {size}")

    lines += [
        "",
        "Recommended Test Scenarios:",
        "   - Small test: 10-50 variants",
        "   - Medium test: 100-500 variants",
        "   - Large test: 500-1000 variants",
        f"   - Maximum: {min(TARGET_VARIANTS, info.total_combinations):,} variants",
        "",
    ]

    if info.total_combinations >= TARGET_VARIANTS:
        lines.append(
            f"Can generate {TARGET_VARIANTS}+ unique variants for performance testing!"
        )
    else:
        lines.append(f"Limited to {info.total_combinations} unique variants")

    return lines


def display_combination_info() -> CombinationInfo:
    """Print the combination report for the default catalogs.

    Returns:
        The calculated combination info.
    """
    info = calculate_sheet_combinations()
    for line in format_combination_report(info):
        print(line)
    return info
