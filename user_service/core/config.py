# User 서비스 설정
# - 환경변수 접두사: USER_SERVICE_ (예: USER_SERVICE_MONGODB_URI)
# - .env 파일 값도 읽습니다

from functools import lru_cache

from pydantic_settings import SettingsConfigDict

from ecommerce_common.core.config import ServiceSettings


class UserServiceSettings(ServiceSettings):
    APP_NAME: str = "user-service"
    PORT: int = 8081
    MONGODB_URI: str = "mongodb://localhost:27017/user_db"

    model_config = SettingsConfigDict(
        env_prefix="USER_SERVICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> UserServiceSettings:
    return UserServiceSettings()
