"""
Products API: Product Service
================================

What:  Thin adapter between the HTTP routes and a ProductStore.
How:   Applies input rules, calls exactly one store operation, and converts
       the result into response models. A None from get_by_id becomes
       NotFoundError; update/delete of an absent id stay silent no-ops.
Who:   Called by routes/products.py with the store injected per request.

The service keeps no state of its own; every method receives the store.
"""

import logging
from typing import List

from products_api.exceptions import NotFoundError, ValidationError
from products_api.schemas.product import ProductIn, ProductResponse
from products_api.store.base import MAX_PRICE, PRICE_QUANTUM, ProductStore

logger = logging.getLogger(__name__)


class ProductService:
    """
    Business rules for product requests.

    Responsibilities:
        - list_products(): full snapshot, insertion order
        - get_product(): single lookup with not-found handling
        - create_product(): validate, add, return the stored record
        - replace_product(): validate, update by path id
        - delete_product(): delete by id
    """

    async def list_products(self, store: ProductStore) -> List[ProductResponse]:
        products = await store.list_all()
        return [ProductResponse.model_validate(p) for p in products]

    async def get_product(self, store: ProductStore, product_id: int) -> ProductResponse:
        """
        Retrieve a single product.

        Raises:
            NotFoundError: no live product has `product_id` (→ 404)
        """
        product = await store.get_by_id(product_id)
        if product is None:
            logger.info("Product %d not found", product_id)
            raise NotFoundError(resource="product", resource_id=str(product_id))
        return ProductResponse.model_validate(product)

    async def create_product(self, store: ProductStore, payload: ProductIn) -> ProductResponse:
        self._validate(payload)
        created = await store.add(payload.to_product())
        logger.info("Created product %d (%s)", created.id, created.name)
        return ProductResponse.model_validate(created)

    async def replace_product(
        self, store: ProductStore, product_id: int, payload: ProductIn
    ) -> None:
        """
        Replace name and price of `product_id`.

        The path id wins over any id in the body. An absent id is not an
        error: the store leaves everything unchanged.
        """
        self._validate(payload)
        if payload.id is not None and payload.id != product_id:
            logger.debug(
                "Ignoring body id %d for PUT on product %d", payload.id, product_id
            )
        await store.update(payload.to_product(product_id))

    async def delete_product(self, store: ProductStore, product_id: int) -> None:
        await store.delete(product_id)

    @staticmethod
    def _validate(payload: ProductIn) -> None:
        if not payload.name.strip():
            raise ValidationError(message="Product name must not be blank", field="name")
        if payload.price < 0:
            raise ValidationError(
                message="Product price must not be negative",
                field="price",
                context={"price": str(payload.price)},
            )
        if payload.price > MAX_PRICE:
            raise ValidationError(
                message=f"Product price must not exceed {MAX_PRICE}",
                field="price",
                context={"price": str(payload.price)},
            )
        if payload.price != payload.price.quantize(PRICE_QUANTUM):
            raise ValidationError(
                message="Product price must not have more than 2 decimal places",
                field="price",
                context={"price": str(payload.price)},
            )


product_service = ProductService()
