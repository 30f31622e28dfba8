# 에러 응답 스키마 (OpenAPI 문서화 + 응답 형태 고정용)

from datetime import datetime
from typing import Dict

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    timestamp: datetime
    status: int
    error: str
    message: str
    path: str


class ValidationErrorResponse(BaseModel):
    timestamp: datetime
    status: int
    error: str
    errors: Dict[str, str]
    path: str
