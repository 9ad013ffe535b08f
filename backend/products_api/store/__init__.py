# Store package init
"""
Products API: Product Stores
==============================

Store Inventory:
    - ProductStore (abstract): the five-operation contract
    - InMemoryProductStore: dict + monotonic counter under one lock (default)
    - SqlProductStore: async SQLAlchemy over DATABASE_URL

`open_store()` builds whichever backend the settings select; the app
factory and lifespan own the returned object and close it on shutdown.
"""

import logging
from decimal import Decimal
from typing import List

from products_api.config import Settings
from products_api.store.base import Product, ProductStore
from products_api.store.memory import InMemoryProductStore

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS: List[Product] = [
    Product(name="Tomato Soup", price=Decimal("1.39")),
    Product(name="Yo-yo", price=Decimal("3.75")),
    Product(name="Hammer", price=Decimal("16.99")),
]


async def open_store(config: Settings) -> ProductStore:
    """Build and initialize the store selected by `config.store_backend`."""
    if config.store_backend == "sql":
        from products_api.database import create_engine
        from products_api.store.sql import SqlProductStore

        store = SqlProductStore(create_engine(config.database_url, echo=config.db_echo))
        await store.initialize()
    else:
        store = InMemoryProductStore()
    logger.info("Product store ready: %s", store.backend_name)
    return store


async def seed_sample_products(store: ProductStore) -> List[Product]:
    """Add the sample catalog through the regular add() path."""
    added = [await store.add(product) for product in SAMPLE_PRODUCTS]
    logger.info("Seeded %d sample products", len(added))
    return added


__all__ = [
    "Product",
    "ProductStore",
    "InMemoryProductStore",
    "SAMPLE_PRODUCTS",
    "open_store",
    "seed_sample_products",
]
