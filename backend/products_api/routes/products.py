"""
Products API: Product Route Handlers
=======================================

What:  The five product endpoints.
How:   Each handler resolves the store, delegates to ProductService and
       picks the status code.

    GET    /api/products        → 200 list (X-Total-Count header)
    GET    /api/products/{id}   → 200 product | 404
    POST   /api/products        → 201 created product (Location header)
    PUT    /api/products/{id}   → 204, also when the id is not live
    DELETE /api/products/{id}   → 204, also when the id is not live

Ids outside 0..2**63-1 are rejected with 422 before any store is touched.
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Response

from products_api.dependencies import get_store
from products_api.schemas.product import ErrorResponse, ProductIn, ProductResponse
from products_api.services.product_service import product_service
from products_api.store.base import MAX_PRODUCT_ID, ProductStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Products"])

ProductId = Annotated[
    int, Path(ge=0, le=MAX_PRODUCT_ID, description="Server-assigned product identifier")
]


@router.get(
    "/products",
    response_model=List[ProductResponse],
    summary="List all products",
    description="Returns every product in the order it was created.",
)
async def list_products(
    response: Response,
    store: ProductStore = Depends(get_store),
) -> List[ProductResponse]:
    result = await product_service.list_products(store)
    response.headers["X-Total-Count"] = str(len(result))
    return result


@router.get(
    "/products/{product_id}",
    response_model=ProductResponse,
    responses={
        200: {"description": "The product", "model": ProductResponse},
        404: {"description": "Product not found", "model": ErrorResponse},
    },
    summary="Get a single product by ID",
)
async def get_product(
    product_id: ProductId,
    store: ProductStore = Depends(get_store),
) -> ProductResponse:
    return await product_service.get_product(store, product_id)


@router.post(
    "/products",
    status_code=201,
    response_model=ProductResponse,
    responses={
        201: {"description": "Product created", "model": ProductResponse},
        400: {"description": "Invalid product data", "model": ErrorResponse},
    },
    summary="Create a product",
    description="Creates a product. Any `id` in the body is ignored; the server assigns one.",
)
async def create_product(
    payload: ProductIn,
    response: Response,
    store: ProductStore = Depends(get_store),
) -> ProductResponse:
    created = await product_service.create_product(store, payload)
    response.headers["Location"] = f"/api/products/{created.id}"
    return created


@router.put(
    "/products/{product_id}",
    status_code=204,
    responses={
        204: {"description": "Product replaced (no-op when the id is not live)"},
        400: {"description": "Invalid product data", "model": ErrorResponse},
    },
    summary="Replace a product's name and price",
)
async def replace_product(
    product_id: ProductId,
    payload: ProductIn,
    store: ProductStore = Depends(get_store),
) -> Response:
    await product_service.replace_product(store, product_id, payload)
    return Response(status_code=204)


@router.delete(
    "/products/{product_id}",
    status_code=204,
    responses={204: {"description": "Product removed (no-op when the id is not live)"}},
    summary="Delete a product",
)
async def delete_product(
    product_id: ProductId,
    store: ProductStore = Depends(get_store),
) -> Response:
    await product_service.delete_product(store, product_id)
    return Response(status_code=204)
