# 사용자 서비스 레이어
# - 이메일 중복 체크 후 생성/수정
# - id/이메일 조회, 전체 목록, 삭제
# - 엔티티 → 응답 DTO 변환 (fullName은 여기서 계산)

import logging
from typing import List

from ecommerce_common.core.clock import utc_now
from ecommerce_common.core.exceptions import DuplicateResourceError, ResourceNotFoundError
from ..models.user import User
from ..repositories.user_repository import UserRepository
from ..schemas.user_schema import UserRequest, UserResponse

logger = logging.getLogger(__name__)


def to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        full_name=f"{user.first_name} {user.last_name}",
        email=user.email,
        phone=user.phone,
        address=user.address,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


class UserService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def create_user(self, request: UserRequest) -> UserResponse:
        logger.info(f"[UserService] Creating user with email: {request.email}")

        # 사전 체크는 친절한 409 응답용입니다. 동시 요청은 저장소의 unique 인덱스가 막습니다.
        if await self.repo.exists_by_email(request.email):
            raise DuplicateResourceError("User", "email", request.email)

        now = utc_now()
        user = User(**request.model_dump(), created_at=now, updated_at=now)
        saved = await self.repo.save(user)
        logger.info(f"[UserService] User created successfully with ID: {saved.id}")
        return to_response(saved)

    async def get_user(self, user_id: str) -> UserResponse:
        logger.info(f"[UserService] Fetching user with ID: {user_id}")
        return to_response(await self._get_or_raise(user_id))

    async def get_user_by_email(self, email: str) -> UserResponse:
        logger.info(f"[UserService] Fetching user with email: {email}")
        user = await self.repo.find_by_email(email)
        if user is None:
            raise ResourceNotFoundError("User", "email", email)
        return to_response(user)

    async def list_users(self) -> List[UserResponse]:
        logger.info("[UserService] Fetching all users")
        return [to_response(u) for u in await self.repo.find_all()]

    async def update_user(self, user_id: str, request: UserRequest) -> UserResponse:
        logger.info(f"[UserService] Updating user with ID: {user_id}")
        existing = await self._get_or_raise(user_id)

        # 이메일이 바뀌는 경우에만 중복 체크
        if existing.email != request.email and await self.repo.exists_by_email(request.email):
            raise DuplicateResourceError("User", "email", request.email)

        updated = existing.model_copy(update={
            **request.model_dump(),
            "updated_at": max(utc_now(), existing.updated_at),
        })
        saved = await self.repo.save(updated)
        logger.info(f"[UserService] User updated successfully: {user_id}")
        return to_response(saved)

    async def delete_user(self, user_id: str) -> None:
        logger.info(f"[UserService] Deleting user with ID: {user_id}")
        if not await self.repo.exists_by_id(user_id):
            raise ResourceNotFoundError("User", "ID", user_id)
        await self.repo.delete_by_id(user_id)
        logger.info(f"[UserService] User deleted successfully: {user_id}")

    async def _get_or_raise(self, user_id: str) -> User:
        user = await self.repo.find_by_id(user_id)
        if user is None:
            raise ResourceNotFoundError("User", "ID", user_id)
        return user
