# 사용자 라우터 (base path: /api/users)
# - POST   /api/users              : 생성 (201)
# - GET    /api/users/{id}         : id로 조회
# - GET    /api/users              : 전체 목록
# - GET    /api/users/email/{email}: 이메일로 조회
# - PUT    /api/users/{id}         : 수정
# - DELETE /api/users/{id}         : 삭제 (204)

from typing import List

from fastapi import APIRouter, Response, status

from ecommerce_common.core.error_handlers import ERROR_RESPONSES
from ..schemas.user_schema import UserRequest, UserResponse
from ..services.user_service import UserService


def create_router(service: UserService) -> APIRouter:
    router = APIRouter(prefix="/api/users", tags=["User Management"])

    # "/api/users/"도 리다이렉트(307) 없이 같은 핸들러로 받습니다
    @router.post("/", status_code=status.HTTP_201_CREATED, response_model=UserResponse, include_in_schema=False)
    @router.post(
        "",
        response_model=UserResponse,
        status_code=status.HTTP_201_CREATED,
        summary="Create a new user",
        responses={k: ERROR_RESPONSES[k] for k in (400, 409)},
    )
    async def create_user(payload: UserRequest):
        return await service.create_user(payload)

    @router.get(
        "/{user_id}",
        response_model=UserResponse,
        summary="Get user by ID",
        responses={404: ERROR_RESPONSES[404]},
    )
    async def get_user(user_id: str):
        return await service.get_user(user_id)

    @router.get("/", response_model=List[UserResponse], include_in_schema=False)
    @router.get("", response_model=List[UserResponse], summary="Get all users")
    async def list_users():
        return await service.list_users()

    @router.get(
        "/email/{email}",
        response_model=UserResponse,
        summary="Get user by email",
        responses={404: ERROR_RESPONSES[404]},
    )
    async def get_user_by_email(email: str):
        return await service.get_user_by_email(email)

    @router.put(
        "/{user_id}",
        response_model=UserResponse,
        summary="Update user",
        responses=ERROR_RESPONSES,
    )
    async def update_user(user_id: str, payload: UserRequest):
        return await service.update_user(user_id, payload)

    @router.delete(
        "/{user_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary="Delete user",
        responses={404: ERROR_RESPONSES[404]},
    )
    async def delete_user(user_id: str):
        await service.delete_user(user_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
