# 재시도 로직 유틸리티
# 주니어 개발자님께: 서비스가 시작될 때 MongoDB가 아직 준비되지 않았을 수 있습니다
# (docker-compose로 함께 띄우는 경우 등). 시작 시 연결 확인만 몇 번 재시도합니다.
# 요청 처리 중의 저장소 호출은 재시도하지 않습니다. 재시도 여부는 클라이언트가 결정합니다.

from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)
import logging
from typing import Type, Tuple

from pymongo.errors import ConnectionFailure

logger = logging.getLogger(__name__)


def create_startup_retry_decorator(
    max_attempts: int = 5,
    initial_wait: float = 1.0,
    max_wait: float = 10.0,
    exceptions: Tuple[Type[Exception], ...] = (ConnectionFailure,),
):
    """
    시작 시 저장소 연결용 재시도 데코레이터를 생성하는 팩토리 함수입니다.

    지수 백오프: 1초 → 2초 → 4초 ... 최대 max_wait초.
    모든 시도가 실패하면 마지막 예외를 그대로 다시 던집니다 (reraise=True).
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=2, min=initial_wait, max=max_wait),
        retry=retry_if_exception_type(exceptions),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
