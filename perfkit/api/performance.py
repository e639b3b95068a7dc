"""Performance test endpoints.

Lets an operator re-run the platform's product update workflow or run the
diagnostic product query (``variants.id`` projection) for one product.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Path, Request, status

from perfkit.api.schemas import ProductResponse
from perfkit.infrastructure.medusa_client import MedusaClient

logger = structlog.get_logger()

router = APIRouter(prefix="/admin/performance/product", tags=["Performance"])


async def get_medusa_client(request: Request) -> AsyncGenerator[MedusaClient, None]:
    """Get platform client for the current request.

    Yields:
        MedusaClient closed after the request completes.
    """
    client = MedusaClient(request_id=getattr(request.state, "request_id", None))
    try:
        yield client
    finally:
        await client.close()


MedusaClientDep = Annotated[MedusaClient, Depends(get_medusa_client)]
ProductId = Annotated[str, Path(description="Product ID")]


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/{product_id}",
    response_model=ProductResponse,
    status_code=status.HTTP_200_OK,
    summary="Trigger product update workflow",
    description="Run the platform's update product workflow with an empty update.",
)
async def trigger_update_product(
    product_id: ProductId,
    client: MedusaClientDep,
) -> ProductResponse:
    """Trigger the update product workflow.

    Args:
        product_id: Product identifier.
        client: Platform client.

    Returns:
        The updated product.
    """
    logger.info("Triggering update product workflow", product_id=product_id)
    product = await client.update_product(product_id)
    return ProductResponse(product=product)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    status_code=status.HTTP_200_OK,
    summary="Query product with variant ids",
    description="Query id, title, variants.id and images.* of one product.",
)
async def query_product(
    product_id: ProductId,
    client: MedusaClientDep,
) -> ProductResponse:
    """Run the diagnostic product query.

    Args:
        product_id: Product identifier.
        client: Platform client.

    Returns:
        The product projection, or null if not found.
    """
    logger.info("Querying product with variant ids", product_id=product_id)
    product = await client.query_product(product_id)
    return ProductResponse(product=product)
