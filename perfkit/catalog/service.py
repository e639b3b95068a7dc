"""Sheet catalog seeding service.

Resolves the platform references generated products need, runs the
sheet product generator and submits the products in batches.
"""

from typing import Any

import structlog

from perfkit.catalog.generator import GeneratorConfig, SheetProductGenerator
from perfkit.catalog.models import GeneratedProduct
from perfkit.domain.exceptions import InvalidArgumentError
from perfkit.infrastructure.medusa_client import MedusaClient

logger = structlog.get_logger()

# Placeholder references used when products are generated without a platform
DRY_RUN_CATEGORIES = [{"id": "pcat_dry_run", "name": "Sheets"}]
DRY_RUN_SHIPPING_PROFILE = {"id": "sp_dry_run"}
DRY_RUN_SALES_CHANNELS = [{"id": "sc_dry_run"}]


class CatalogSeeder:
    """Seeds sheet products into the platform.

    Example usage:
        async with MedusaClient() as client:
            seeder = CatalogSeeder(client)
            result = await seeder.seed(GeneratorConfig(10, 1700000000, 50))
    """

    def __init__(self, client: MedusaClient | None = None) -> None:
        """Initialize seeder.

        Args:
            client: Platform client; required unless seeding as a dry run.
        """
        self.client = client

    async def _resolve_references(
        self,
    ) -> tuple[list[dict[str, Any]], dict[str, Any], list[dict[str, Any]]]:
        if self.client is None:
            raise InvalidArgumentError("client", "a platform client is required")

        categories = await self.client.list_categories()
        shipping_profiles = await self.client.list_shipping_profiles()
        sales_channels = await self.client.list_sales_channels()

        if not shipping_profiles:
            raise InvalidArgumentError(
                "shipping_profile", "the platform has no shipping profile"
            )

        logger.info(
            "Resolved platform references",
            categories=len(categories),
            shipping_profile_id=shipping_profiles[0]["id"],
            sales_channels=len(sales_channels),
        )
        return categories, shipping_profiles[0], sales_channels

    async def seed(
        self,
        config: GeneratorConfig,
        batch_size: int = 10,
        dry_run: bool = False,
    ) -> dict[str, Any]:
        """Generate sheet products and create them on the platform.

        Args:
            config: Generator configuration.
            batch_size: Products per create request.
            dry_run: Generate against placeholder references and skip
                the platform entirely.

        Returns:
            Seeding result with counts.
        """
        if batch_size < 1:
            raise InvalidArgumentError("batch_size", "must be at least 1")

        if dry_run:
            categories = DRY_RUN_CATEGORIES
            shipping_profile = DRY_RUN_SHIPPING_PROFILE
            sales_channels = DRY_RUN_SALES_CHANNELS
        else:
            categories, shipping_profile, sales_channels = await self._resolve_references()

        generator = SheetProductGenerator(config)
        products = generator.generate(categories, shipping_profile, sales_channels)

        created = 0
        if not dry_run:
            for start in range(0, len(products), batch_size):
                batch = products[start:start + batch_size]
                result = await self.client.create_products([p.to_payload() for p in batch])
                created += len(result)
                logger.info(
                    "Submitted product batch",
                    batch_start=start,
                    batch_size=len(batch),
                    created_total=created,
                )

        return summarize(products, created=created, dry_run=dry_run)


def summarize(
    products: list[GeneratedProduct], created: int = 0, dry_run: bool = False
) -> dict[str, Any]:
    """Summarize a generation run.

    Args:
        products: Generated products.
        created: Products the platform reported as created.
        dry_run: Whether the run skipped the platform.

    Returns:
        Counts of products, variants, sheet types and handles.
    """
    return {
        "dry_run": dry_run,
        "products_generated": len(products),
        "products_created": created,
        "variants_generated": sum(len(p.variants) for p in products),
        "sheet_types_used": len({p.title.split(" Bed Sheet Set")[0] for p in products}),
        "handles": [p.handle for p in products],
    }
