"""API schemas.

Pydantic models for response validation and serialization.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[Any] | dict[str, Any] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class ProductResponse(BaseModel):
    """Product returned by the performance endpoints.

    The product is passed through as the platform returned it.
    """

    product: dict[str, Any] | None = Field(
        ..., description="Product from the platform, null if not found"
    )
