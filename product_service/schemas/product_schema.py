# 요청/응답 스키마 정의 (Pydantic 모델)
# - price는 Decimal. JSON 응답에서는 문자열("999.99")로 나가므로 float 반올림이 없습니다

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

_REQUIRED_MESSAGES = {
    "sku": "SKU is required",
    "name": "Product name is required",
    "price": "Price is required",
    "stock": "Stock is required",
    "category": "Category is required",
}

# MongoDB Decimal128은 유효숫자 34자리까지만 표현합니다
PRICE_MAX_DIGITS = 34


class ProductRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # 필수 필드도 None 기본값 + validate_default로 받아서, 누락 시에도 필드별 메시지를 냅니다
    sku: Optional[str] = Field(None, validate_default=True)
    name: Optional[str] = Field(None, validate_default=True)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, max_digits=PRICE_MAX_DIGITS, validate_default=True)
    stock: Optional[int] = Field(None, validate_default=True)
    category: Optional[str] = Field(None, validate_default=True)
    image_url: Optional[str] = None

    @field_validator("sku", "name", "category")
    @classmethod
    def _not_blank(cls, v: Optional[str], info: ValidationInfo) -> str:
        if v is None or not v.strip():
            raise ValueError(_REQUIRED_MESSAGES[info.field_name])
        return v

    @field_validator("price")
    @classmethod
    def _price_positive(cls, v: Optional[Decimal]) -> Decimal:
        if v is None:
            raise ValueError(_REQUIRED_MESSAGES["price"])
        if v <= 0:
            raise ValueError("Price must be greater than 0")
        return v

    @field_validator("stock")
    @classmethod
    def _stock_not_negative(cls, v: Optional[int]) -> int:
        if v is None:
            raise ValueError(_REQUIRED_MESSAGES["stock"])
        if v < 0:
            raise ValueError("Stock cannot be negative")
        return v


class ProductResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    sku: str
    name: str
    description: Optional[str] = None
    price: Decimal
    stock: int
    in_stock: bool
    category: str
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
