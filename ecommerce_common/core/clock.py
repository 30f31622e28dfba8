# 시간 유틸리티
# - 모든 타임스탬프는 UTC, 밀리초 단위로 자릅니다
# - MongoDB는 밀리초까지만 저장하므로, 저장 직후 응답과 재조회 결과가 같아집니다

from datetime import datetime, timezone


def utc_now() -> datetime:
    now = datetime.now(tz=timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def as_utc(value: datetime) -> datetime:
    # tz 정보 없이 읽힌 값은 UTC로 간주
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
