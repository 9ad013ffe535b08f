"""
Products API: Store Contract
==============================

What:  The `Product` record and the abstract `ProductStore` every backend implements.
How:   ABC + abstractmethod, so a backend missing an operation fails at
       instantiation instead of at call time.
Who:   Implemented by InMemoryProductStore and SqlProductStore; consumed by
       ProductService through FastAPI dependency injection.

Contract (all operations are total):
    list_all()        → snapshot of live products in insertion order
    get_by_id(id)     → the product, or None when it is not live
    add(product)      → ignores product.id, assigns the next id, returns the stored copy
    update(product)   → replaces name/price of the live product with product.id;
                        no-op when absent; never changes the set of live ids
    delete(id)        → removes the product; no-op when absent

Ids are handed out by a strictly increasing counter and are never reused,
even after deletes. They fit a signed 64-bit integer (MAX_PRODUCT_ID).

Prices are kept to cents: stores pass every incoming price through
quantize_price() before keeping it, so all backends hold the same value.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

MAX_PRODUCT_ID = 2**63 - 1

PRICE_QUANTUM = Decimal("0.01")
# NUMERIC(12, 2)
MAX_PRICE = Decimal("9999999999.99")


def quantize_price(price: Decimal) -> Decimal:
    """Round `price` to cents, half up."""
    return price.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)


@dataclass
class Product:
    """A catalog entry. `id` is 0 until a store assigns one."""

    name: str
    price: Decimal
    id: int = 0


class ProductStore(ABC):
    """Persistence interface for products."""

    # Label reported by /health
    backend_name: str = "abstract"

    @abstractmethod
    async def list_all(self) -> List[Product]:
        """Return every live product, oldest first."""

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Optional[Product]:
        """Return the product with `product_id`, or None."""

    @abstractmethod
    async def add(self, product: Product) -> Product:
        """
        Store a new product under a freshly assigned id.

        Any id carried by `product` is ignored. The returned object is a copy
        owned by the caller.
        """

    @abstractmethod
    async def update(self, product: Product) -> None:
        """Replace name and price of the live product with `product.id`."""

    @abstractmethod
    async def delete(self, product_id: int) -> None:
        """Remove the product with `product_id` if it is live."""

    async def count(self) -> int:
        return len(await self.list_all())

    async def close(self) -> None:
        """Release backend resources. Nothing to do by default."""
