"""
Products API: SQLAlchemy Product Store
=========================================

What:  ProductStore implementation persisting products through async SQLAlchemy.
How:   One short-lived session per operation; writes commit before returning.
Who:   Built by the app lifespan when STORE_BACKEND=sql.

Contract notes:
    - Ids come from the database (AUTOINCREMENT on SQLite), never from the
      caller, and are not reused after deletes.
    - update/delete issue a single UPDATE/DELETE ... WHERE id = :id, so an
      absent id simply matches zero rows.
    - Ids outside 0..MAX_PRODUCT_ID cannot be stored in an INTEGER column;
      they are treated as absent without touching the database.
    - Prices are quantized to cents before they are written, so the Product
      returned by add() equals what get_by_id() reads back.
    - SQLAlchemy failures surface as DatabaseError; the original exception
      type is kept in the error context for the logs.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from products_api.database import create_session_factory, create_tables
from products_api.exceptions import DatabaseError
from products_api.models.product import ProductRow
from products_api.store.base import MAX_PRODUCT_ID, Product, ProductStore, quantize_price

logger = logging.getLogger(__name__)


def _to_product(row: ProductRow) -> Product:
    return Product(id=row.id, name=row.name, price=row.price)


def _storable_id(product_id: int) -> bool:
    return 0 <= product_id <= MAX_PRODUCT_ID


class SqlProductStore(ProductStore):
    """
    Product store over an AsyncEngine.

    Lifecycle:
        store = SqlProductStore(engine)
        await store.initialize()   # CREATE TABLE IF NOT EXISTS
        ...
        await store.close()        # disposes the engine
    """

    backend_name = "sql"

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._session_factory = create_session_factory(engine)

    async def initialize(self) -> None:
        try:
            await create_tables(self._engine)
        except SQLAlchemyError as e:
            logger.error("Could not create products table: %s", str(e))
            raise DatabaseError(
                message="Could not prepare the product database.",
                context={"error_type": type(e).__name__},
            ) from e

    async def list_all(self) -> List[Product]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(ProductRow).order_by(ProductRow.id))
                return [_to_product(row) for row in result.scalars().all()]
        except SQLAlchemyError as e:
            raise self._wrap("list_all", e) from e

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        if not _storable_id(product_id):
            return None
        try:
            async with self._session_factory() as session:
                row = await session.get(ProductRow, product_id)
                return _to_product(row) if row is not None else None
        except SQLAlchemyError as e:
            raise self._wrap("get_by_id", e, product_id=product_id) from e

    async def add(self, product: Product) -> Product:
        try:
            async with self._session_factory() as session:
                row = ProductRow(name=product.name, price=quantize_price(product.price))
                session.add(row)
                await session.flush()  # assigns row.id
                await session.commit()
                logger.debug("Inserted product %d (%s)", row.id, row.name)
                return _to_product(row)
        except SQLAlchemyError as e:
            raise self._wrap("add", e) from e

    async def update(self, product: Product) -> None:
        if not _storable_id(product.id):
            logger.debug("Update skipped: product %d is not live", product.id)
            return
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    update(ProductRow)
                    .where(ProductRow.id == product.id)
                    .values(name=product.name, price=quantize_price(product.price))
                )
                await session.commit()
                if result.rowcount == 0:
                    logger.debug("Update skipped: product %d is not live", product.id)
        except SQLAlchemyError as e:
            raise self._wrap("update", e, product_id=product.id) from e

    async def delete(self, product_id: int) -> None:
        if not _storable_id(product_id):
            return
        try:
            async with self._session_factory() as session:
                await session.execute(delete(ProductRow).where(ProductRow.id == product_id))
                await session.commit()
        except SQLAlchemyError as e:
            raise self._wrap("delete", e, product_id=product_id) from e

    async def count(self) -> int:
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(func.count(ProductRow.id)))
                return result.scalar() or 0
        except SQLAlchemyError as e:
            raise self._wrap("count", e) from e

    async def close(self) -> None:
        await self._engine.dispose()

    @staticmethod
    def _wrap(operation: str, error: SQLAlchemyError, **context) -> DatabaseError:
        logger.error("Database error in %s: %s", operation, str(error), exc_info=True)
        return DatabaseError(
            message="Could not access the product database. Please try again.",
            context={"operation": operation, "error_type": type(error).__name__, **context},
        )
