"""
Products API: Product Service Unit Tests
===========================================

What:  ProductService against a mocked store (no HTTP, no real storage).

What we test:
    ✅ get_product maps None to NotFoundError
    ✅ create ignores body ids and returns the stored record
    ✅ replace uses the path id and tolerates absent ids
    ✅ blank names and negative, oversized or sub-cent prices are rejected
       before the store is touched
    ✅ prices serialize to JSON numbers without losing cents
"""

from decimal import Decimal

import pytest

from products_api.exceptions import NotFoundError, ValidationError
from products_api.schemas.product import ProductIn, ProductResponse
from products_api.services.product_service import ProductService
from products_api.store.base import MAX_PRICE, Product


class TestProductServiceRead:
    """Tests for list and get."""

    def setup_method(self):
        self.service = ProductService()

    @pytest.mark.asyncio
    async def test_list_products(self, mock_store):
        """list_products should keep the store order."""
        mock_store.list_all.return_value = [
            Product(id=1, name="Tomato Soup", price=Decimal("1.39")),
            Product(id=3, name="Hammer", price=Decimal("16.99")),
        ]

        result = await self.service.list_products(mock_store)

        assert [p.id for p in result] == [1, 3]
        assert result[1].name == "Hammer"

    @pytest.mark.asyncio
    async def test_get_product_found(self, mock_store):
        """A live id returns the product as a ProductResponse."""
        mock_store.get_by_id.return_value = Product(id=2, name="Yo-yo", price=Decimal("3.75"))

        result = await self.service.get_product(mock_store, 2)

        assert result.id == 2
        assert result.price == Decimal("3.75")
        mock_store.get_by_id.assert_awaited_once_with(2)

    @pytest.mark.asyncio
    async def test_get_product_not_found(self, mock_store):
        """A None from the store should raise NotFoundError."""
        mock_store.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get_product(mock_store, 9)

        assert exc_info.value.context["resource_id"] == "9"


class TestProductServiceWrite:
    """Tests for create, replace and delete."""

    def setup_method(self):
        self.service = ProductService()

    @pytest.mark.asyncio
    async def test_create_passes_unsaved_product_to_store(self, mock_store):
        """create should hand the store an id-less product and return the stored one."""
        mock_store.add.return_value = Product(id=5, name="Hammer", price=Decimal("16.99"))
        payload = ProductIn(id=123, name="Hammer", price=Decimal("16.99"))

        result = await self.service.create_product(mock_store, payload)

        assert result.id == 5
        sent = mock_store.add.await_args.args[0]
        assert sent.id == 0
        assert sent.name == "Hammer"

    @pytest.mark.asyncio
    async def test_replace_uses_path_id(self, mock_store):
        """The path id wins over the body id."""
        payload = ProductIn(id=8, name="Yo-yo", price=Decimal("4.00"))

        await self.service.replace_product(mock_store, 2, payload)

        mock_store.update.assert_awaited_once_with(
            Product(id=2, name="Yo-yo", price=Decimal("4.00"))
        )

    @pytest.mark.asyncio
    async def test_replace_absent_id_does_not_raise(self, mock_store):
        """Replacing an absent id is a silent no-op."""
        mock_store.update.return_value = None

        await self.service.replace_product(
            mock_store, 404, ProductIn(name="x", price=Decimal("1"))
        )

        mock_store.update.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_forwards_id(self, mock_store):
        """delete_product passes the id straight to the store."""
        await self.service.delete_product(mock_store, 3)

        mock_store.delete.assert_awaited_once_with(3)

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, mock_store):
        """A whitespace-only name is rejected before add."""
        with pytest.raises(ValidationError, match="name"):
            await self.service.create_product(
                mock_store, ProductIn(name="   ", price=Decimal("1"))
            )

        mock_store.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_negative_price_rejected(self, mock_store):
        """A negative price is rejected before update."""
        with pytest.raises(ValidationError) as exc_info:
            await self.service.replace_product(
                mock_store, 1, ProductIn(name="Hammer", price=Decimal("-0.01"))
            )

        assert exc_info.value.field == "price"
        mock_store.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_sub_cent_price_rejected(self, mock_store):
        """Prices finer than a cent are refused instead of silently rounded."""
        with pytest.raises(ValidationError) as exc_info:
            await self.service.create_product(
                mock_store, ProductIn(name="Hammer", price=Decimal("1.999"))
            )

        assert exc_info.value.field == "price"
        assert exc_info.value.context["price"] == "1.999"
        mock_store.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_price_above_column_limit_rejected(self, mock_store):
        """A price with more than ten integer digits is refused."""
        with pytest.raises(ValidationError, match="exceed"):
            await self.service.create_product(
                mock_store, ProductIn(name="Hammer", price=MAX_PRICE + Decimal("0.01"))
            )

        mock_store.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_trailing_zero_and_max_prices_accepted(self, mock_store):
        """1.10 and the largest storable price both pass validation."""
        mock_store.add.return_value = Product(id=1, name="x", price=MAX_PRICE)

        for price in (Decimal("1.10"), Decimal("7"), MAX_PRICE):
            await self.service.create_product(mock_store, ProductIn(name="x", price=price))

        assert mock_store.add.await_count == 3


class TestPriceSerialization:
    """ProductResponse writes prices as JSON numbers."""

    def test_largest_price_survives_float(self):
        """float() of the largest NUMERIC(12, 2) price keeps every cent."""
        response = ProductResponse(id=1, name="x", price=MAX_PRICE)

        dumped = response.model_dump(mode="json")["price"]

        assert dumped == 9999999999.99
        assert Decimal(repr(dumped)) == MAX_PRICE

    def test_cent_values_round_trip(self):
        """Every cent value below one dollar reads back unchanged."""
        for cents in range(100):
            price = Decimal(cents) / 100
            dumped = ProductResponse(id=1, name="x", price=price).model_dump(mode="json")["price"]

            assert Decimal(repr(dumped)) == price
