"""HTTP client for the commerce platform's admin API.

Wraps the admin REST endpoints the performance tooling needs: running the
product update workflow, querying a product projection, creating products
in batches and listing the categories, shipping profiles and sales
channels that generated products reference.
"""

from typing import Any

import httpx
import structlog

from perfkit.infrastructure.config import settings

logger = structlog.get_logger()

# Fields requested by the diagnostic product query
PRODUCT_QUERY_FIELDS = ("id", "title", "variants.id", "images.*")


class MedusaClientError(Exception):
    """Error from a platform admin API call."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class MedusaClient:
    """Async HTTP client for the platform admin API.

    Example usage:
        client = MedusaClient()
        try:
            product = await client.query_product("prod_123")
        finally:
            await client.close()
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_token: str | None = None,
        timeout: float | None = None,
        request_id: str | None = None,
    ) -> None:
        """Initialize client.

        Args:
            base_url: Platform backend URL (settings if not provided).
            api_token: Admin API token (settings if not provided).
            timeout: Request timeout in seconds.
            request_id: Optional request ID for correlation.
        """
        self.base_url = (base_url or settings.medusa_backend_url).rstrip("/")
        self.api_token = api_token or settings.medusa_api_token
        self.timeout = timeout if timeout is not None else settings.medusa_timeout
        self.request_id = request_id
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            headers = {
                "Authorization": f"Bearer {self.api_token}",
                "Accept": "application/json",
            }
            if self.request_id:
                headers["X-Request-ID"] = self.request_id
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=headers,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str,
        action: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        allow_not_found: bool = False,
    ) -> dict[str, Any] | None:
        """Send a request and decode the JSON body.

        Args:
            method: HTTP method.
            path: Admin API path.
            action: Short description used in errors and logs.
            json: Request body.
            params: Query parameters.
            allow_not_found: Return None on 404 instead of raising.

        Returns:
            Decoded JSON body, or None for an allowed 404.

        Raises:
            MedusaClientError: On transport errors or non-2xx responses.
        """
        try:
            client = await self._get_client()
            response = await client.request(method, path, json=json, params=params)
        except httpx.RequestError as e:
            logger.error(
                "Platform API request failed",
                action=action,
                path=path,
                error=str(e),
            )
            raise MedusaClientError(f"{action} request failed: {str(e)}") from e

        if response.status_code == 404 and allow_not_found:
            return None

        if response.status_code not in (200, 201):
            logger.warning(
                "Platform API returned error",
                action=action,
                path=path,
                status_code=response.status_code,
            )
            raise MedusaClientError(
                f"Failed to {action}: {response.text}",
                response.status_code,
            )

        return response.json()

    async def update_product(
        self, product_id: str, update: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Run the product update workflow.

        An empty update still runs the whole workflow, which is what the
        performance trigger relies on.

        Args:
            product_id: Product identifier.
            update: Fields to update.

        Returns:
            Updated product.
        """
        data = await self._request(
            "POST",
            f"/admin/products/{product_id}",
            "update product",
            json=update or {},
        )
        return data.get("product", data)

    async def query_product(
        self,
        product_id: str,
        fields: tuple[str, ...] = PRODUCT_QUERY_FIELDS,
    ) -> dict[str, Any] | None:
        """Query a product projection.

        Args:
            product_id: Product identifier.
            fields: Fields to select.

        Returns:
            Product projection, or None if the product does not exist.
        """
        data = await self._request(
            "GET",
            f"/admin/products/{product_id}",
            "query product",
            params={"fields": ",".join(fields)},
            allow_not_found=True,
        )
        if data is None:
            return None
        return data.get("product")

    async def create_products(self, products: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Create products in one batch.

        Args:
            products: Product payloads.

        Returns:
            Created products.
        """
        data = await self._request(
            "POST",
            "/admin/products/batch",
            "create products",
            json={"create": products},
        )
        created = data.get("created", [])
        logger.info("Created products", count=len(created))
        return created

    async def list_categories(self, limit: int = 100) -> list[dict[str, Any]]:
        """List product categories."""
        data = await self._request(
            "GET",
            "/admin/product-categories",
            "list categories",
            params={"limit": limit, "fields": "id,name"},
        )
        return data.get("product_categories", [])

    async def list_shipping_profiles(self) -> list[dict[str, Any]]:
        """List shipping profiles."""
        data = await self._request(
            "GET",
            "/admin/shipping-profiles",
            "list shipping profiles",
        )
        return data.get("shipping_profiles", [])

    async def list_sales_channels(self) -> list[dict[str, Any]]:
        """List sales channels."""
        data = await self._request(
            "GET",
            "/admin/sales-channels",
            "list sales channels",
        )
        return data.get("sales_channels", [])

    async def __aenter__(self) -> "MedusaClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Context manager exit."""
        await self.close()
