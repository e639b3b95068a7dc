"""Tests for the sheet product generator."""

import re
from types import SimpleNamespace

import pytest

from perfkit.catalog.combinations import COLORS, HEIGHTS, SHEET_TYPES, SIZES
from perfkit.catalog.generator import (
    MAX_WEIGHT,
    MIN_WEIGHT,
    PRODUCT_IMAGES,
    TOTAL_COMBINATIONS,
    GeneratorConfig,
    PriceRange,
    SheetProductGenerator,
    build_handle,
    describe_sheet_type,
    generate_sheet_products,
    height_sort_key,
    resolve_category_ids,
    size_sort_key,
    unrank_combination,
)
from perfkit.catalog.models import CategoryRef, ProductStatus
from perfkit.domain.exceptions import InvalidArgumentError

SKU_PATTERN = re.compile(r"^SHEET-[A-Z]+-\d+X\d+-[A-Z]+-\d+CM-[A-Za-z0-9]{8}$")


@pytest.fixture
def categories() -> list[dict]:
    """Platform categories including a Sheets category."""
    return [
        {"id": "pcat_towels", "name": "Towels"},
        {"id": "pcat_bedding", "name": "Bedding"},
        {"id": "pcat_sheets", "name": "Sheets"},
    ]


@pytest.fixture
def shipping_profile() -> dict:
    """Default shipping profile."""
    return {"id": "sp_default", "name": "Default"}


@pytest.fixture
def sales_channels() -> list[dict]:
    """Sales channels; the first is the default."""
    return [{"id": "sc_default"}, {"id": "sc_other"}]


def combination_key(variant) -> tuple[str, str, str]:
    return (variant.options.size, variant.options.color, variant.options.height)


def without_sku_suffixes(payload: dict) -> dict:
    """Payload with the random SKU suffixes cut off."""
    variants = [
        {**variant, "sku": variant["sku"].rsplit("-", 1)[0]} for variant in payload["variants"]
    ]
    return {**payload, "variants": variants}


class TestUnrankCombination:
    """Tests for mapping indices onto combinations."""

    def test_first_and_last(self) -> None:
        """Bounds map onto the first and last combinations."""
        first = unrank_combination(0)
        last = unrank_combination(TOTAL_COMBINATIONS - 1)
        assert (first.size, first.color, first.height) == ("70x180", "White", "20cm")
        assert (last.size, last.color, last.height) == ("220x240", "Emerald", "50cm")

    def test_height_varies_fastest(self) -> None:
        """Order matches nested size, color, height iteration."""
        assert unrank_combination(1).height == "22cm"
        assert unrank_combination(12).color == "Cream"
        assert unrank_combination(600).size == "70x190"

    def test_bijective(self) -> None:
        """Distinct indices give distinct combinations."""
        combos = {
            (c.size, c.color, c.height)
            for c in (unrank_combination(i) for i in range(0, TOTAL_COMBINATIONS, 7))
        }
        assert len(combos) == len(range(0, TOTAL_COMBINATIONS, 7))


class TestHelpers:
    """Tests for handle, description and category helpers."""

    def test_handle(self) -> None:
        """Handles are kebab-case with number and salt."""
        assert build_handle("Egyptian Cotton", 1, 42) == "egyptian-cotton-sheet-set-1-42"
        assert build_handle("Silk", 9, 1700000000) == "silk-sheet-set-9-1700000000"

    def test_description_lookup(self) -> None:
        """Known sheet types use their table entry."""
        assert describe_sheet_type("Bamboo").startswith("Eco-friendly bamboo")

    def test_description_fallback(self) -> None:
        """Unknown sheet types get a generic description."""
        description = describe_sheet_type("Merino Wool")
        assert description.startswith("Premium merino wool bed sheet set.")
        assert "high-quality merino wool sheets" in description

    def test_category_prefers_sheets(self) -> None:
        """Sheets wins over Bedding."""
        refs = [CategoryRef(id="a", name="Bedding"), CategoryRef(id="b", name="Sheets")]
        assert resolve_category_ids(refs) == ["b"]

    def test_category_falls_back_to_bedding(self) -> None:
        """Bedding is used when there is no Sheets category."""
        refs = [CategoryRef(id="a", name="Towels"), CategoryRef(id="b", name="Bedding")]
        assert resolve_category_ids(refs) == ["b"]

    def test_category_falls_back_to_first(self) -> None:
        """First category is used when neither name matches."""
        refs = [CategoryRef(id="a", name="Towels"), CategoryRef(id="b", name="Rugs")]
        assert resolve_category_ids(refs) == ["a"]

    def test_no_categories(self) -> None:
        """No categories give no category ids."""
        assert resolve_category_ids([]) == []

    def test_sort_keys(self) -> None:
        """Sizes sort numerically by width then length, heights by value."""
        assert sorted(["220x180", "90x200", "90x190"], key=size_sort_key) == [
            "90x190",
            "90x200",
            "220x180",
        ]
        assert sorted(["50cm", "20cm", "100cm"], key=height_sort_key) == [
            "20cm",
            "50cm",
            "100cm",
        ]


class TestSheetProductGenerator:
    """Tests for SheetProductGenerator."""

    def test_single_product_shape(self, categories, shipping_profile, sales_channels) -> None:
        """One product with five catalog-valid variants."""
        products = generate_sheet_products(
            GeneratorConfig(num_products=1, handle_id=42, variants_per_product=5),
            categories,
            shipping_profile,
            sales_channels,
        )

        assert len(products) == 1
        product = products[0]
        assert len(product.variants) == 5
        assert product.title == "Egyptian Cotton Bed Sheet Set 1"
        assert product.handle == "egyptian-cotton-sheet-set-1-42"

        for variant in product.variants:
            combo = variant.options
            assert combo.size in SIZES
            assert combo.color in COLORS
            assert combo.height in HEIGHTS
            assert SKU_PATTERN.match(variant.sku)
            assert variant.sku.startswith("SHEET-EGYPTIANCOTTON-")
            assert combo.size.replace("x", "X") in variant.sku
            assert combo.color.replace(" ", "").upper() in variant.sku
            assert combo.height.replace("cm", "CM") in variant.sku
            assert variant.title == f"{combo.size} / {combo.color} / {combo.height}"

    def test_distinct_combinations_per_product(
        self, categories, shipping_profile, sales_channels
    ) -> None:
        """Each product samples distinct combinations."""
        products = generate_sheet_products(
            GeneratorConfig(num_products=3, handle_id=7, variants_per_product=200),
            categories,
            shipping_profile,
            sales_channels,
        )

        assert len(products) == 3
        for product in products:
            assert len(product.variants) == 200
            keys = {combination_key(v) for v in product.variants}
            assert len(keys) == 200

    def test_round_robin_sheet_types(self, categories, shipping_profile, sales_channels) -> None:
        """Sheet types cycle by product index."""
        products = generate_sheet_products(
            GeneratorConfig(num_products=14, handle_id=1, variants_per_product=1),
            categories,
            shipping_profile,
            sales_channels,
        )

        expected = [SHEET_TYPES[i % len(SHEET_TYPES)] for i in range(14)]
        assert [p.title.split(" Bed Sheet Set")[0] for p in products] == expected
        assert products[12].title == "Egyptian Cotton Bed Sheet Set 13"
        assert products[9].handle == "organic-cotton-sheet-set-10-1"

    def test_options_match_variants(self, categories, shipping_profile, sales_channels) -> None:
        """Option values are the sorted unique values used by variants."""
        product = generate_sheet_products(
            GeneratorConfig(num_products=1, handle_id=1, variants_per_product=60, seed=3),
            categories,
            shipping_profile,
            sales_channels,
        )[0]

        sizes = {v.options.size for v in product.variants}
        colors = {v.options.color for v in product.variants}
        heights = {v.options.height for v in product.variants}

        assert [o.title for o in product.options] == ["Size", "Color", "Height"]
        assert product.option_values("Size") == sorted(sizes, key=size_sort_key)
        assert product.option_values("Color") == sorted(colors)
        assert product.option_values("Height") == sorted(heights, key=height_sort_key)
        assert product.option_values("Pattern") == []

    def test_prices(self, categories, shipping_profile, sales_channels) -> None:
        """One price per currency within the configured range."""
        config = GeneratorConfig(
            num_products=2,
            handle_id=1,
            variants_per_product=30,
            price_range=PriceRange(min=30, max=100),
            currencies=["eur", "usd", "gbp"],
        )
        products = generate_sheet_products(config, categories, shipping_profile, sales_channels)

        for product in products:
            for variant in product.variants:
                assert [p.currency_code for p in variant.prices] == ["eur", "usd", "gbp"]
                assert all(30 <= p.amount < 100 for p in variant.prices)

    def test_default_prices(self, categories, shipping_profile, sales_channels) -> None:
        """Defaults are eur and usd between 20 and 80."""
        product = generate_sheet_products(
            GeneratorConfig(num_products=1, handle_id=1, variants_per_product=20),
            categories,
            shipping_profile,
            sales_channels,
        )[0]

        for variant in product.variants:
            assert [p.currency_code for p in variant.prices] == ["eur", "usd"]
            assert all(20 <= p.amount < 80 for p in variant.prices)

    def test_product_fields(self, categories, shipping_profile, sales_channels) -> None:
        """Products reference the resolved category, profile and channel."""
        products = generate_sheet_products(
            GeneratorConfig(num_products=5, handle_id=1, variants_per_product=2),
            categories,
            shipping_profile,
            sales_channels,
        )

        for product in products:
            assert product.category_ids == ["pcat_sheets"]
            assert product.shipping_profile_id == "sp_default"
            assert [c.id for c in product.sales_channels] == ["sc_default"]
            assert product.status == ProductStatus.PUBLISHED
            assert [i.url for i in product.images] == list(PRODUCT_IMAGES)
            assert MIN_WEIGHT <= product.weight < MAX_WEIGHT
            assert product.description

    def test_accepts_objects(self) -> None:
        """References can be objects with attributes."""
        product = generate_sheet_products(
            GeneratorConfig(num_products=1, handle_id=1, variants_per_product=1),
            [SimpleNamespace(id="pcat_1", name="Bedding")],
            SimpleNamespace(id="sp_1"),
            [SimpleNamespace(id="sc_1")],
        )[0]

        assert product.category_ids == ["pcat_1"]
        assert product.shipping_profile_id == "sp_1"
        assert product.sales_channels[0].id == "sc_1"

    def test_empty_categories(self, shipping_profile, sales_channels) -> None:
        """No categories give products without category ids."""
        product = generate_sheet_products(
            GeneratorConfig(num_products=1, handle_id=1, variants_per_product=1),
            [],
            shipping_profile,
            sales_channels,
        )[0]
        assert product.category_ids == []

    def test_empty_sales_channels(self, categories, shipping_profile) -> None:
        """At least one sales channel is required."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            generate_sheet_products(
                GeneratorConfig(num_products=1, handle_id=1, variants_per_product=1),
                categories,
                shipping_profile,
                [],
            )
        assert exc_info.value.argument == "sales_channels"

    def test_zero_products(self, categories, shipping_profile, sales_channels) -> None:
        """Zero products give an empty list."""
        products = generate_sheet_products(
            GeneratorConfig(num_products=0, handle_id=1, variants_per_product=5),
            categories,
            shipping_profile,
            sales_channels,
        )
        assert products == []

    def test_variant_count_capped(self) -> None:
        """Variants per product never exceed the combination count."""
        generator = SheetProductGenerator(
            GeneratorConfig(num_products=2, handle_id=1, variants_per_product=10**6)
        )
        assert generator.variants_per_product == TOTAL_COMBINATIONS == 67200
        assert generator.expected_variant_count == 2 * 67200

    def test_negative_variant_count_clamped(self) -> None:
        """Negative counts give no variants rather than a negative total."""
        generator = SheetProductGenerator(
            GeneratorConfig(num_products=3, handle_id=1, variants_per_product=-4)
        )
        assert generator.variants_per_product == 0
        assert generator.expected_variant_count == 0

    def test_negative_product_count_clamped(self) -> None:
        """Negative product counts give an expected total of zero."""
        generator = SheetProductGenerator(
            GeneratorConfig(num_products=-2, handle_id=1, variants_per_product=5)
        )
        assert generator.variants_per_product == 5
        assert generator.expected_variant_count == 0

    def test_sample_combinations_distinct(self) -> None:
        """Sampling is without replacement."""
        generator = SheetProductGenerator(
            GeneratorConfig(num_products=1, handle_id=1, variants_per_product=1, seed=11)
        )
        combos = generator.sample_combinations(1000)
        assert len({(c.size, c.color, c.height) for c in combos}) == 1000

    def test_seeded_runs_are_reproducible(
        self, categories, shipping_profile, sales_channels
    ) -> None:
        """Same seed gives the same products apart from SKU suffixes."""
        config = GeneratorConfig(num_products=2, handle_id=5, variants_per_product=10, seed=42)
        first = generate_sheet_products(config, categories, shipping_profile, sales_channels)
        second = generate_sheet_products(config, categories, shipping_profile, sales_channels)

        assert [without_sku_suffixes(p.to_payload()) for p in first] == [
            without_sku_suffixes(p.to_payload()) for p in second
        ]

    def test_seeded_runs_get_fresh_skus(
        self, categories, shipping_profile, sales_channels
    ) -> None:
        """Reseeding with a new handle salt never reuses SKUs."""
        first = generate_sheet_products(
            GeneratorConfig(num_products=1, handle_id=1700000000, variants_per_product=50, seed=1),
            categories,
            shipping_profile,
            sales_channels,
        )[0]
        second = generate_sheet_products(
            GeneratorConfig(num_products=1, handle_id=1700000500, variants_per_product=50, seed=1),
            categories,
            shipping_profile,
            sales_channels,
        )[0]

        assert [combination_key(v) for v in first.variants] == [
            combination_key(v) for v in second.variants
        ]
        assert {v.sku for v in first.variants}.isdisjoint(v.sku for v in second.variants)

    def test_skus_unique_within_run(self, categories, shipping_profile, sales_channels) -> None:
        """Every SKU in a run is distinct."""
        products = generate_sheet_products(
            GeneratorConfig(num_products=3, handle_id=2, variants_per_product=200, seed=7),
            categories,
            shipping_profile,
            sales_channels,
        )
        skus = [v.sku for p in products for v in p.variants]
        assert len(skus) == len(set(skus)) == 600
        assert all(SKU_PATTERN.match(sku) for sku in skus)

    def test_unseeded_runs_differ(self, categories, shipping_profile, sales_channels) -> None:
        """Unseeded runs have the same shape but different SKUs."""
        config = GeneratorConfig(num_products=1, handle_id=5, variants_per_product=10)
        first = generate_sheet_products(config, categories, shipping_profile, sales_channels)[0]
        second = generate_sheet_products(config, categories, shipping_profile, sales_channels)[0]

        assert first.title == second.title
        assert first.handle == second.handle
        assert len(first.variants) == len(second.variants)
        assert {v.sku for v in first.variants} != {v.sku for v in second.variants}


class TestPayload:
    """Tests for the platform payload form."""

    def test_payload_uses_option_titles(self, categories, shipping_profile, sales_channels) -> None:
        """Variant options serialize with option titles as keys."""
        product = generate_sheet_products(
            GeneratorConfig(num_products=1, handle_id=1, variants_per_product=3),
            categories,
            shipping_profile,
            sales_channels,
        )[0]

        payload = product.to_payload()
        assert payload["status"] == "published"
        assert payload["sales_channels"] == [{"id": "sc_default"}]
        assert set(payload["variants"][0]["options"]) == {"Size", "Color", "Height"}
        assert set(payload["variants"][0]["prices"][0]) == {"amount", "currency_code"}
        assert [o["title"] for o in payload["options"]] == ["Size", "Color", "Height"]
