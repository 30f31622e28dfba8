# 사용자 저장소 레이어
# - 데이터 접근만 담당 (서비스 로직 분리)
# - UserRepository: 서비스가 의존하는 인터페이스
# - MongoUserRepository: Beanie(MongoDB) 구현

from abc import abstractmethod
from typing import List, Optional, Protocol

from beanie import PydanticObjectId
from pymongo.errors import DuplicateKeyError

from ecommerce_common.core.exceptions import DuplicateResourceError
from ..models.user import User, UserDocument


class UserRepository(Protocol):
    @abstractmethod
    async def save(self, user: User) -> User:
        """id가 없으면 새로 저장(id 발급), 있으면 id 기준 upsert."""
        ...

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        ...

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        ...

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        ...

    @abstractmethod
    async def exists_by_id(self, user_id: str) -> bool:
        ...

    @abstractmethod
    async def delete_by_id(self, user_id: str) -> None:
        ...

    @abstractmethod
    async def find_all(self) -> List[User]:
        ...


def _object_id(user_id: str) -> Optional[PydanticObjectId]:
    # 형식이 맞지 않는 id는 "없는 문서"로 취급합니다
    if not PydanticObjectId.is_valid(user_id):
        return None
    return PydanticObjectId(user_id)


class MongoUserRepository:
    async def save(self, user: User) -> User:
        document = UserDocument.from_entity(user)
        try:
            if document.id is None:
                await document.insert()
            else:
                await document.save()
        except DuplicateKeyError as exc:
            # 동시 생성 경합은 unique 인덱스가 최종 판정합니다
            raise DuplicateResourceError("User", "email", user.email) from exc
        return document.to_entity()

    async def find_by_id(self, user_id: str) -> Optional[User]:
        oid = _object_id(user_id)
        if oid is None:
            return None
        document = await UserDocument.get(oid)
        return document.to_entity() if document else None

    async def find_by_email(self, email: str) -> Optional[User]:
        document = await UserDocument.find_one({"email": email})
        return document.to_entity() if document else None

    async def exists_by_email(self, email: str) -> bool:
        return await UserDocument.find({"email": email}).count() > 0

    async def exists_by_id(self, user_id: str) -> bool:
        oid = _object_id(user_id)
        if oid is None:
            return False
        return await UserDocument.find({"_id": oid}).count() > 0

    async def delete_by_id(self, user_id: str) -> None:
        oid = _object_id(user_id)
        if oid is None:
            return
        await UserDocument.find({"_id": oid}).delete()

    async def find_all(self) -> List[User]:
        documents = await UserDocument.find_all().to_list()
        return [d.to_entity() for d in documents]
