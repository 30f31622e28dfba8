# 요청/응답 스키마 정의 (Pydantic 모델)
# - JSON 필드명은 camelCase (firstName, createdAt ...)
# - 요청은 camelCase/snake_case 둘 다 받습니다

import re
from datetime import datetime
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel

PHONE_PATTERN = re.compile(r"[0-9]{10}")


class UserRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # 필수 필드는 None 기본값 + validate_default: 누락도 필드별 메시지로 보고합니다
    first_name: Optional[str] = Field(None, validate_default=True)
    last_name: Optional[str] = Field(None, validate_default=True)
    email: Optional[EmailStr] = Field(None, validate_default=True)
    phone: Optional[str] = None
    address: Optional[str] = None

    @field_validator("first_name")
    @classmethod
    def _first_name_not_blank(cls, v: Optional[str]) -> str:
        if v is None or not v.strip():
            raise ValueError("First name is required")
        return v

    @field_validator("last_name")
    @classmethod
    def _last_name_not_blank(cls, v: Optional[str]) -> str:
        if v is None or not v.strip():
            raise ValueError("Last name is required")
        return v

    @field_validator("email", mode="wrap")
    @classmethod
    def _email_required_and_valid(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> str:
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Email is required")
        try:
            return handler(v)
        except ValidationError:
            raise ValueError("Email must be valid")

    @field_validator("phone")
    @classmethod
    def _phone_ten_digits(cls, v: Optional[str]) -> Optional[str]:
        # 국가 코드나 구분자 없이 숫자 10자리만 허용
        if v is not None and not PHONE_PATTERN.fullmatch(v):
            raise ValueError("Phone must be 10 digits")
        return v


class UserResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime
    updated_at: datetime
