"""
Products API: In-Memory Product Store
========================================

What:  Process-local product store; the default backend.
How:   An insertion-ordered dict keyed by id plus a monotonic id counter,
       both guarded by a single threading.Lock.
Who:   Built by the app factory (or by tests) and injected into routes.

Ordering:
    dicts keep insertion order, so list_all returns products in the order
    they were added. Updating a value keeps its slot; deleting a key keeps
    the relative order of everything else.

Id assignment:
    `_next_id` only ever grows. Deleting product 2 out of [1, 2, 3] and then
    adding a product yields id 4, never a second 3.

Locking:
    Every operation runs entirely under one threading.Lock and does no I/O
    while holding it. The store can be shared by the event loop and worker
    threads.
"""

import logging
import threading
from dataclasses import replace
from typing import Dict, List, Optional

from products_api.store.base import Product, ProductStore, quantize_price

logger = logging.getLogger(__name__)


class InMemoryProductStore(ProductStore):
    """Product store backed by a dict held in process memory."""

    backend_name = "memory"

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._products: Dict[int, Product] = {}
        self._next_id = 1

    async def list_all(self) -> List[Product]:
        with self._lock:
            return [replace(p) for p in self._products.values()]

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        with self._lock:
            product = self._products.get(product_id)
            return replace(product) if product is not None else None

    async def add(self, product: Product) -> Product:
        with self._lock:
            stored = replace(product, id=self._next_id, price=quantize_price(product.price))
            self._next_id += 1
            self._products[stored.id] = stored
            logger.debug("Added product %d (%s)", stored.id, stored.name)
            return replace(stored)

    async def update(self, product: Product) -> None:
        with self._lock:
            existing = self._products.get(product.id)
            if existing is None:
                logger.debug("Update skipped: product %d is not live", product.id)
                return
            existing.name = product.name
            existing.price = quantize_price(product.price)
            logger.debug("Updated product %d", product.id)

    async def delete(self, product_id: int) -> None:
        with self._lock:
            if self._products.pop(product_id, None) is not None:
                logger.debug("Deleted product %d", product_id)

    async def count(self) -> int:
        with self._lock:
            return len(self._products)
