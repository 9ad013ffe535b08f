"""
Products API: Product SQLAlchemy Model
========================================

What:  ORM model for the `products` table used by SqlProductStore.

Table Design:
    - id: INTEGER primary key. `sqlite_autoincrement` makes SQLite use
      AUTOINCREMENT, so ids of deleted rows are never handed out again.
      PostgreSQL identity/serial columns already behave that way.
    - name: free text, no uniqueness constraint.
    - price: NUMERIC(12, 2), read back as Decimal.
"""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from products_api.database import Base


class ProductRow(Base):
    """One row per live product."""

    __tablename__ = "products"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2, asdecimal=True), nullable=False)

    def __repr__(self) -> str:
        return f"<ProductRow(id={self.id}, name='{self.name}', price={self.price})>"
