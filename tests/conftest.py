# 테스트 공용 픽스처
# - MongoDB 없이 서비스/라우터를 검증하기 위한 인메모리 저장소
# - unique 키 위반은 실제 저장소처럼 save 시점에 DuplicateResourceError로 막습니다

import itertools
from decimal import Decimal
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from ecommerce_common.core.exceptions import DuplicateResourceError
from product_service.core.config import ProductServiceSettings
from product_service.main import create_app as create_product_app
from product_service.models.product import Product
from user_service.core.config import UserServiceSettings
from user_service.main import create_app as create_user_app
from user_service.models.user import User

_ids = itertools.count(1)


def _next_id() -> str:
    return f"{next(_ids):024x}"


class InMemoryUserRepository:
    def __init__(self):
        self.users: Dict[str, User] = {}

    async def save(self, user: User) -> User:
        for other in self.users.values():
            if other.email == user.email and other.id != user.id:
                raise DuplicateResourceError("User", "email", user.email)
        stored = user if user.id else user.model_copy(update={"id": _next_id()})
        self.users[stored.id] = stored.model_copy()
        return stored.model_copy()

    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self.users.get(user_id)
        return user.model_copy() if user else None

    async def find_by_email(self, email: str) -> Optional[User]:
        return next((u.model_copy() for u in self.users.values() if u.email == email), None)

    async def exists_by_email(self, email: str) -> bool:
        return any(u.email == email for u in self.users.values())

    async def exists_by_id(self, user_id: str) -> bool:
        return user_id in self.users

    async def delete_by_id(self, user_id: str) -> None:
        self.users.pop(user_id, None)

    async def find_all(self) -> List[User]:
        return [u.model_copy() for u in self.users.values()]


class InMemoryProductRepository:
    def __init__(self):
        self.products: Dict[str, Product] = {}

    async def save(self, product: Product) -> Product:
        for other in self.products.values():
            if other.sku == product.sku and other.id != product.id:
                raise DuplicateResourceError("Product", "SKU", product.sku)
        stored = product if product.id else product.model_copy(update={"id": _next_id()})
        self.products[stored.id] = stored.model_copy()
        return stored.model_copy()

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        product = self.products.get(product_id)
        return product.model_copy() if product else None

    async def find_by_sku(self, sku: str) -> Optional[Product]:
        return next((p.model_copy() for p in self.products.values() if p.sku == sku), None)

    async def exists_by_sku(self, sku: str) -> bool:
        return any(p.sku == sku for p in self.products.values())

    async def exists_by_id(self, product_id: str) -> bool:
        return product_id in self.products

    async def delete_by_id(self, product_id: str) -> None:
        self.products.pop(product_id, None)

    async def find_all(self) -> List[Product]:
        return self._where(lambda p: True)

    async def find_by_category(self, category: str) -> List[Product]:
        return self._where(lambda p: p.category == category)

    async def find_by_name_containing_ignore_case(self, query: str) -> List[Product]:
        return self._where(lambda p: query.lower() in p.name.lower())

    async def find_by_price_between(self, min_price: Decimal, max_price: Decimal) -> List[Product]:
        return self._where(lambda p: min_price <= p.price <= max_price)

    async def find_by_stock_greater_than(self, min_stock: int) -> List[Product]:
        return self._where(lambda p: p.stock > min_stock)

    def _where(self, predicate) -> List[Product]:
        return [p.model_copy() for p in self.products.values() if predicate(p)]


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def product_repo():
    return InMemoryProductRepository()


@pytest.fixture
def user_client(user_repo):
    app = create_user_app(UserServiceSettings(), repository=user_repo)
    return TestClient(app)


@pytest.fixture
def product_client(product_repo):
    app = create_product_app(ProductServiceSettings(), repository=product_repo)
    return TestClient(app)
