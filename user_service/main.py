# User 서비스 FastAPI 진입점 (컴포지션 루트)
# - 설정 → 로깅 → 저장소 → 서비스 → 라우터 순서로 직접 조립합니다
# - 저장소를 주입하지 않으면 MongoDB(Beanie) 저장소를 쓰고, 시작 시 DB에 연결합니다
# 실행: python -m user_service.main  또는  uvicorn user_service.main:app --port 8081

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecommerce_common.core.database import init_database
from ecommerce_common.core.error_handlers import register_exception_handlers
from ecommerce_common.core.logging_config import setup_logging
from .api.users import create_router
from .core.config import UserServiceSettings, get_settings
from .models.user import UserDocument
from .repositories.user_repository import MongoUserRepository, UserRepository
from .services.user_service import UserService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[UserServiceSettings] = None, repository: Optional[UserRepository] = None) -> FastAPI:
    cfg = settings or get_settings()
    setup_logging(cfg.LOG_LEVEL)

    app = FastAPI(
        title="User Service API",
        description="RESTful API for managing user accounts",
        version=cfg.VERSION,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if repository is None:
        repository = MongoUserRepository()

        @app.on_event("startup")
        async def app_init():
            app.state.mongo_client = await init_database(cfg, [UserDocument])

        @app.on_event("shutdown")
        async def app_shutdown():
            client = getattr(app.state, "mongo_client", None)
            if client is not None:
                client.close()

    service = UserService(repository)
    app.include_router(create_router(service))
    register_exception_handlers(app)

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "app": cfg.APP_NAME, "version": cfg.VERSION}

    logger.info(f"[UserService] Application created ({cfg.APP_NAME} v{cfg.VERSION})")
    return app


app = create_app()


def run() -> None:
    cfg = get_settings()
    uvicorn.run(app, host=cfg.HOST, port=cfg.PORT)


if __name__ == "__main__":
    run()
