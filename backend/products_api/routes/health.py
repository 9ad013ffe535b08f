"""
Products API: Health Check Route
===================================

What:  Health check endpoint for monitoring and load balancer checks.
How:   Counts live products through the store; a failing count marks the
       service unhealthy (HTTP 503).

Status levels:
    - healthy:   store answered (HTTP 200)
    - unhealthy: store raised (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response

from products_api import __version__
from products_api.dependencies import get_store
from products_api.schemas.product import HealthResponse
from products_api.store.base import ProductStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    response: Response,
    store: ProductStore = Depends(get_store),
) -> HealthResponse:
    overall = "healthy"
    product_count = None

    try:
        product_count = await store.count()
    except Exception as e:
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: store unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        store=store.backend_name,
        product_count=product_count,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
