# 공통 설정 모듈
# - 두 서비스(user/product)가 공유하는 설정 항목
# - 서비스별 기본값/환경변수 접두사는 각 서비스의 core/config.py에서 지정

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    APP_NAME: str = "ecommerce-service"
    VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    MONGODB_URI: str = "mongodb://localhost:27017/ecommerce"
    # 서버 선택 타임아웃(밀리초). 이 시간 안에 MongoDB를 찾지 못하면 요청이 실패합니다.
    MONGODB_TIMEOUT_MS: int = 5000
    # 시작 시 ping 재시도 횟수
    MONGODB_CONNECT_ATTEMPTS: int = 5

    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGINS: str = "*"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]
