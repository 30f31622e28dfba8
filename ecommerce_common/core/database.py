# MongoDB / Beanie 초기화
# - Motor 클라이언트 생성, ping으로 연결 확인 (tenacity 재시도)
# - init_beanie로 Document 등록 + 고유 인덱스 생성

import logging
from typing import List, Type

from beanie import Document, init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from .config import ServiceSettings
from .retry import create_startup_retry_decorator

logger = logging.getLogger(__name__)


async def init_database(settings: ServiceSettings, document_models: List[Type[Document]]) -> AsyncIOMotorClient:
    # tz_aware=True: 저장된 datetime을 UTC aware 값으로 돌려받습니다
    client = AsyncIOMotorClient(
        settings.MONGODB_URI,
        serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
        tz_aware=True,
    )

    @create_startup_retry_decorator(max_attempts=settings.MONGODB_CONNECT_ATTEMPTS)
    async def _ping():
        await client.admin.command("ping")

    try:
        await _ping()
    except Exception:
        logger.error(f"[Database] MongoDB unreachable: {settings.MONGODB_URI}", exc_info=True)
        client.close()
        raise

    db = client.get_default_database()
    await init_beanie(database=db, document_models=document_models)
    logger.info(f"[Database] Connected to MongoDB: {db.name} ({', '.join(m.__name__ for m in document_models)})")
    return client
