# User 도메인 모델
# - User: 서비스 레이어가 다루는 엔티티 (저장소와 무관)
# - UserDocument: MongoDB "users" 컬렉션에 저장되는 형태 (Beanie Document)
# - email은 unique 인덱스. 중복 방지의 최종 책임은 이 인덱스에 있습니다
# - fullName 같은 파생 값은 저장하지 않습니다 (응답 매핑에서 계산)

from datetime import datetime
from typing import Optional

from beanie import Document, Indexed, PydanticObjectId
from pydantic import BaseModel

from ecommerce_common.core.clock import as_utc


class User(BaseModel):
    id: Optional[str] = None
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class UserDocument(Document):
    first_name: str
    last_name: str
    email: Indexed(str, unique=True)  # 중복 방지 인덱스
    phone: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Settings:
        name = "users"  # 컬렉션명

    @classmethod
    def from_entity(cls, user: User) -> "UserDocument":
        return cls(
            id=PydanticObjectId(user.id) if user.id else None,
            **user.model_dump(exclude={"id"}),
        )

    def to_entity(self) -> User:
        return User(
            id=str(self.id),
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone=self.phone,
            address=self.address,
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )
