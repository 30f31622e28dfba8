# Beanie 저장소 테스트 (mongomock-motor로 MongoDB를 대신합니다)
import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest
from beanie import init_beanie
from bson import Decimal128
from mongomock_motor import AsyncMongoMockClient

from ecommerce_common.core.clock import utc_now
from ecommerce_common.core.exceptions import DuplicateResourceError
from product_service.models.product import Product, ProductDocument
from product_service.repositories.product_repository import MongoProductRepository
from user_service.models.user import User, UserDocument
from user_service.repositories.user_repository import MongoUserRepository


async def _init_db():
    client = AsyncMongoMockClient()
    await init_beanie(database=client.get_database("ecommerce_test"), document_models=[UserDocument, ProductDocument])


def _user(**overrides) -> User:
    now = utc_now()
    data = dict(first_name="Ada", last_name="Lovelace", email="ada@x.io", created_at=now, updated_at=now)
    data.update(overrides)
    return User(**data)


def _product(**overrides) -> Product:
    now = utc_now()
    data = dict(sku="LAP-001", name="Laptop", price=Decimal("999.99"), stock=50, category="Electronics",
                created_at=now, updated_at=now)
    data.update(overrides)
    return Product(**data)


def test_user_repository_crud():
    async def scenario():
        await _init_db()
        repo = MongoUserRepository()

        saved = await repo.save(_user())
        assert saved.id
        assert await repo.exists_by_id(saved.id)
        assert await repo.exists_by_email("ada@x.io")
        assert (await repo.find_by_id(saved.id)) == saved
        assert (await repo.find_by_email("ada@x.io")).id == saved.id

        renamed = await repo.save(saved.model_copy(update={"first_name": "Augusta"}))
        assert renamed.id == saved.id
        assert (await repo.find_by_id(saved.id)).first_name == "Augusta"
        assert len(await repo.find_all()) == 1

        await repo.delete_by_id(saved.id)
        assert await repo.find_by_id(saved.id) is None
        assert not await repo.exists_by_id(saved.id)

    asyncio.run(scenario())


def test_user_repository_unique_email():
    async def scenario():
        await _init_db()
        repo = MongoUserRepository()
        await repo.save(_user())
        with pytest.raises(DuplicateResourceError):
            await repo.save(_user(first_name="Other"))

    asyncio.run(scenario())


def test_malformed_ids_find_nothing():
    async def scenario():
        await _init_db()
        users = MongoUserRepository()
        products = MongoProductRepository()
        assert await users.find_by_id("not-an-object-id") is None
        assert not await users.exists_by_id("not-an-object-id")
        await users.delete_by_id("not-an-object-id")
        assert await products.find_by_id("xyz") is None

    asyncio.run(scenario())


def test_product_repository_queries():
    async def scenario():
        await _init_db()
        repo = MongoProductRepository()
        laptop = await repo.save(_product())
        stand = await repo.save(_product(sku="STD-001", name="Laptop (Stand)", price=Decimal("29.50"), stock=0,
                                         category="Accessories"))

        fetched = await repo.find_by_id(laptop.id)
        assert fetched.price == Decimal("999.99")
        assert (await repo.find_by_sku("STD-001")).id == stand.id
        assert await repo.exists_by_sku("LAP-001")

        assert [p.id for p in await repo.find_by_category("Electronics")] == [laptop.id]
        assert await repo.find_by_category("electronics") == []

        assert {p.id for p in await repo.find_by_name_containing_ignore_case("LAPTOP")} == {laptop.id, stand.id}
        # 정규식 메타문자는 리터럴로 검색
        assert [p.id for p in await repo.find_by_name_containing_ignore_case("(stand)")] == [stand.id]
        assert len(await repo.find_by_name_containing_ignore_case("")) == 2

        assert [p.id for p in await repo.find_by_stock_greater_than(0)] == [laptop.id]

        with pytest.raises(DuplicateResourceError):
            await repo.save(_product(name="Clone"))

        await repo.delete_by_id(stand.id)
        assert [p.id for p in await repo.find_all()] == [laptop.id]

    asyncio.run(scenario())


def test_price_range_query_uses_decimal128_bounds():
    async def scenario():
        await _init_db()
        stored = ProductDocument.from_entity(_product(id="65f1c0ffee0000000000abcd"))
        with patch.object(ProductDocument, "find") as mock_find:
            mock_find.return_value.to_list = AsyncMock(return_value=[stored])
            found = await MongoProductRepository().find_by_price_between(Decimal("10"), Decimal("999.99"))

        # 가격은 Decimal128로 비교해야 저장된 값과 자릿수 손실 없이 맞습니다
        mock_find.assert_called_once_with({"price": {"$gte": Decimal128("10"), "$lte": Decimal128("999.99")}})
        assert [p.id for p in found] == ["65f1c0ffee0000000000abcd"]

    asyncio.run(scenario())
