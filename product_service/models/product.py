# Product 도메인 모델
# - Product: 서비스 레이어 엔티티
# - ProductDocument: MongoDB "products" 컬렉션 (Beanie Document), sku는 unique 인덱스
# - price는 Decimal128로 저장합니다. float으로 바꾸지 않습니다
# - inStock은 저장하지 않습니다 (응답 매핑에서 계산)

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from beanie import Document, Indexed, PydanticObjectId
from bson import Decimal128
from pydantic import BaseModel, BeforeValidator

from ecommerce_common.core.clock import as_utc


def _from_decimal128(value):
    if isinstance(value, Decimal128):
        return value.to_decimal()
    return value


StoredDecimal = Annotated[Decimal, BeforeValidator(_from_decimal128)]


class Product(BaseModel):
    id: Optional[str] = None
    sku: str
    name: str
    description: Optional[str] = None
    price: Decimal
    stock: int
    category: str
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ProductDocument(Document):
    sku: Indexed(str, unique=True)  # 중복 방지 인덱스
    name: str
    description: Optional[str] = None
    price: StoredDecimal
    stock: int
    category: Indexed(str)
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Settings:
        name = "products"

    @classmethod
    def from_entity(cls, product: Product) -> "ProductDocument":
        return cls(
            id=PydanticObjectId(product.id) if product.id else None,
            **product.model_dump(exclude={"id"}),
        )

    def to_entity(self) -> Product:
        return Product(
            id=str(self.id),
            sku=self.sku,
            name=self.name,
            description=self.description,
            price=self.price,
            stock=self.stock,
            category=self.category,
            image_url=self.image_url,
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )
