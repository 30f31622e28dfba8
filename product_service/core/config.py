# Product 서비스 설정
# - 환경변수 접두사: PRODUCT_SERVICE_ (예: PRODUCT_SERVICE_PORT)

from functools import lru_cache

from pydantic_settings import SettingsConfigDict

from ecommerce_common.core.config import ServiceSettings


class ProductServiceSettings(ServiceSettings):
    APP_NAME: str = "product-service"
    PORT: int = 8082
    MONGODB_URI: str = "mongodb://localhost:27017/product_db"

    model_config = SettingsConfigDict(
        env_prefix="PRODUCT_SERVICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> ProductServiceSettings:
    return ProductServiceSettings()
