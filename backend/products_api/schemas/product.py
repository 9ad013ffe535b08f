"""
Products API: Pydantic Request/Response Schemas
=================================================

What:  Pydantic models defining the HTTP contract for products.
How:   FastAPI validates request bodies against these models, serializes
       responses through them, and builds the OpenAPI docs from them.

Request bodies only check types here. Business rules (blank names, negative
or oversized prices, prices finer than a cent) are enforced by
ProductService and reported as 400.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_serializer

from products_api.store.base import Product


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ProductIn(BaseModel):
    """
    Body of POST /api/products and PUT /api/products/{id}.

    `id` is accepted so clients can send back a full record, but it is never
    trusted: creation assigns a fresh id and replacement uses the path id.
    """
    id: Optional[int] = Field(default=None, description="Ignored; ids are assigned by the server")
    name: str = Field(description="Product name", examples=["Tomato Soup"])
    price: Decimal = Field(description="Unit price", examples=["1.39"])

    def to_product(self, product_id: int = 0) -> Product:
        return Product(id=product_id, name=self.name, price=self.price)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class ProductResponse(BaseModel):
    """A stored product as returned by the API."""
    id: int = Field(description="Server-assigned product identifier")
    name: str = Field(description="Product name")
    price: Decimal = Field(description="Unit price")

    model_config = {"from_attributes": True}

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        # JSON number, not pydantic's default decimal string. Prices are at
        # most 12 significant digits (NUMERIC(12, 2)), well inside the 15 that
        # a double round-trips, so float() never changes the value.
        return float(price)


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "product with ID '42' was not found",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer checks."""
    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    store: str = Field(description="Active store backend: memory or sql")
    product_count: Optional[int] = Field(
        default=None,
        description="Number of live products (null when the store is unreachable)",
    )
    uptime_seconds: float = Field(description="Seconds since service started")
