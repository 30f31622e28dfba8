# 상품 저장소 레이어
# - ProductRepository: 서비스가 의존하는 인터페이스
# - MongoProductRepository: Beanie(MongoDB) 구현
# - 가격 범위/재고 기준 조회는 HTTP로 노출되지 않는 내부용 쿼리입니다

import re
from abc import abstractmethod
from decimal import Decimal
from typing import List, Optional, Protocol

from beanie import PydanticObjectId
from bson import Decimal128
from pymongo.errors import DuplicateKeyError

from ecommerce_common.core.exceptions import DuplicateResourceError
from ..models.product import Product, ProductDocument


class ProductRepository(Protocol):
    @abstractmethod
    async def save(self, product: Product) -> Product:
        """id가 없으면 새로 저장(id 발급), 있으면 id 기준 upsert."""
        ...

    @abstractmethod
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        ...

    @abstractmethod
    async def find_by_sku(self, sku: str) -> Optional[Product]:
        ...

    @abstractmethod
    async def exists_by_sku(self, sku: str) -> bool:
        ...

    @abstractmethod
    async def exists_by_id(self, product_id: str) -> bool:
        ...

    @abstractmethod
    async def delete_by_id(self, product_id: str) -> None:
        ...

    @abstractmethod
    async def find_all(self) -> List[Product]:
        ...

    @abstractmethod
    async def find_by_category(self, category: str) -> List[Product]:
        """카테고리 완전 일치 (대소문자 구분)."""
        ...

    @abstractmethod
    async def find_by_name_containing_ignore_case(self, query: str) -> List[Product]:
        """이름 부분 일치 (대소문자 무시). 빈 문자열이면 전체."""
        ...

    @abstractmethod
    async def find_by_price_between(self, min_price: Decimal, max_price: Decimal) -> List[Product]:
        ...

    @abstractmethod
    async def find_by_stock_greater_than(self, min_stock: int) -> List[Product]:
        ...


def _object_id(product_id: str) -> Optional[PydanticObjectId]:
    if not PydanticObjectId.is_valid(product_id):
        return None
    return PydanticObjectId(product_id)


class MongoProductRepository:
    async def save(self, product: Product) -> Product:
        document = ProductDocument.from_entity(product)
        try:
            if document.id is None:
                await document.insert()
            else:
                await document.save()
        except DuplicateKeyError as exc:
            raise DuplicateResourceError("Product", "SKU", product.sku) from exc
        return document.to_entity()

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        oid = _object_id(product_id)
        if oid is None:
            return None
        document = await ProductDocument.get(oid)
        return document.to_entity() if document else None

    async def find_by_sku(self, sku: str) -> Optional[Product]:
        document = await ProductDocument.find_one({"sku": sku})
        return document.to_entity() if document else None

    async def exists_by_sku(self, sku: str) -> bool:
        return await ProductDocument.find({"sku": sku}).count() > 0

    async def exists_by_id(self, product_id: str) -> bool:
        oid = _object_id(product_id)
        if oid is None:
            return False
        return await ProductDocument.find({"_id": oid}).count() > 0

    async def delete_by_id(self, product_id: str) -> None:
        oid = _object_id(product_id)
        if oid is None:
            return
        await ProductDocument.find({"_id": oid}).delete()

    async def find_all(self) -> List[Product]:
        return await self._find({})

    async def find_by_category(self, category: str) -> List[Product]:
        return await self._find({"category": category})

    async def find_by_name_containing_ignore_case(self, query: str) -> List[Product]:
        # 사용자 입력은 정규식이 아니라 리터럴 문자열로 취급
        return await self._find({"name": {"$regex": re.escape(query), "$options": "i"}})

    async def find_by_price_between(self, min_price: Decimal, max_price: Decimal) -> List[Product]:
        return await self._find({
            "price": {"$gte": Decimal128(str(min_price)), "$lte": Decimal128(str(max_price))},
        })

    async def find_by_stock_greater_than(self, min_stock: int) -> List[Product]:
        return await self._find({"stock": {"$gt": min_stock}})

    async def _find(self, query: dict) -> List[Product]:
        documents = await ProductDocument.find(query).to_list()
        return [d.to_entity() for d in documents]
