# Product 서비스 FastAPI 진입점 (컴포지션 루트)
# - 설정 → 로깅 → 저장소 → 서비스 → 라우터 순서로 직접 조립합니다
# - 저장소를 주입하지 않으면 MongoDB(Beanie) 저장소를 쓰고, 시작 시 DB에 연결합니다
# 실행: python -m product_service.main  또는  uvicorn product_service.main:app --port 8082

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecommerce_common.core.database import init_database
from ecommerce_common.core.error_handlers import register_exception_handlers
from ecommerce_common.core.logging_config import setup_logging
from .api.products import create_router
from .core.config import ProductServiceSettings, get_settings
from .models.product import ProductDocument
from .repositories.product_repository import MongoProductRepository, ProductRepository
from .services.product_service import ProductService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[ProductServiceSettings] = None, repository: Optional[ProductRepository] = None) -> FastAPI:
    cfg = settings or get_settings()
    setup_logging(cfg.LOG_LEVEL)

    app = FastAPI(
        title="Product Service API",
        description="RESTful API for managing product catalog and inventory",
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
        repository = MongoProductRepository()

        @app.on_event("startup")
        async def app_init():
            app.state.mongo_client = await init_database(cfg, [ProductDocument])

        @app.on_event("shutdown")
        async def app_shutdown():
            client = getattr(app.state, "mongo_client", None)
            if client is not None:
                client.close()

    service = ProductService(repository)
    app.include_router(create_router(service))
    register_exception_handlers(app)

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "app": cfg.APP_NAME, "version": cfg.VERSION}

    logger.info(f"[ProductService] Application created ({cfg.APP_NAME} v{cfg.VERSION})")
    return app


app = create_app()


def run() -> None:
    cfg = get_settings()
    uvicorn.run(app, host=cfg.HOST, port=cfg.PORT)


if __name__ == "__main__":
    run()
