#!/usr/bin/env python3
"""Seed bed sheet products script.

Generates sheet products with combinatorial variants and creates them on
the commerce platform through its admin API.

Usage:
    python scripts/seed_sheets.py --products 10 --variants 100
    python scripts/seed_sheets.py --products 1 --variants 1000 --currency eur --currency gbp
    python scripts/seed_sheets.py --products 3 --variants 200 --dry-run
"""

import argparse
import asyncio
import sys
import time
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from perfkit.catalog.generator import GeneratorConfig, PriceRange
from perfkit.catalog.service import CatalogSeeder
from perfkit.infrastructure.config import settings
from perfkit.infrastructure.log_config import configure_logging
from perfkit.infrastructure.medusa_client import MedusaClient


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Seed bed sheet products for performance testing",
    )
    parser.add_argument(
        "--products",
        type=int,
        default=1,
        help="Number of products to generate (default: 1)",
    )
    parser.add_argument(
        "--variants",
        type=int,
        default=100,
        help="Variants per product (default: 100, max: 67200)",
    )
    parser.add_argument(
        "--handle-id",
        type=int,
        default=None,
        help="Salt appended to handles (default: current unix time)",
    )
    parser.add_argument("--min-price", type=int, default=20, help="Minimum variant price")
    parser.add_argument("--max-price", type=int, default=80, help="Maximum variant price")
    parser.add_argument(
        "--currency",
        action="append",
        dest="currencies",
        help="Currency code, repeatable (default: eur, usd)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--batch-size",
        type=int,
        default=10,
        help="Products per create request (default: 10)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Generate products without contacting the platform",
    )
    return parser


async def main() -> None:
    """Main entry point."""
    args = build_parser().parse_args()
    configure_logging(settings.log_level)

    config = GeneratorConfig(
        num_products=args.products,
        handle_id=args.handle_id if args.handle_id is not None else int(time.time()),
        variants_per_product=args.variants,
        price_range=PriceRange(min=args.min_price, max=args.max_price),
        currencies=args.currencies or ["eur", "usd"],
        seed=args.seed,
    )

    print("=" * 60)
    print("Sheet Catalog Seeder")
    print("=" * 60)
    print(f"Products: {config.num_products}")
    print(f"Variants per product: {config.variants_per_product}")
    print(f"Handle salt: {config.handle_id}")
    print(f"Dry run: {args.dry_run}")
    print()

    async with MedusaClient() as client:
        seeder = CatalogSeeder(client)
        result = await seeder.seed(
            config,
            batch_size=args.batch_size,
            dry_run=args.dry_run,
        )

    print(f"  ✓ Generated: {result['products_generated']} products")
    print(f"  ✓ Variants: {result['variants_generated']}")
    print(f"  ✓ Created: {result['products_created']} products")
    print(f"  ✓ Sheet types: {result['sheet_types_used']}")
    print()
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
