# 도메인 예외 정의
# - 서비스 레이어는 HTTP를 모릅니다. 여기 정의된 예외만 던집니다.
# - HTTP 상태 코드로의 변환은 core/error_handlers.py 한 곳에서만 합니다.


class ResourceError(Exception):
    """리소스 관련 도메인 예외의 기본 클래스

    주니어 개발자님께: 이 계층은 닫혀 있습니다. 새 종류가 필요하면
    error_handlers.py의 상태 코드 매핑도 같이 추가해야 합니다.

    Attributes:
        resource: 리소스 이름 (예: "User", "Product")
        field: 조회/검증에 사용된 필드 라벨 (예: "ID", "email", "SKU")
        value: 해당 필드 값
    """
    def __init__(self, resource: str, field: str, value, message: str):
        self.resource = resource
        self.field = field
        self.value = value
        self.message = message
        super().__init__(message)


class ResourceNotFoundError(ResourceError):
    """id 또는 고유 키로 찾은 결과가 없을 때"""
    def __init__(self, resource: str, field: str, value):
        super().__init__(resource, field, value, f"{resource} not found with {field}: {value}")


class DuplicateResourceError(ResourceError):
    """고유 키(email, sku)가 이미 다른 엔티티에 쓰이고 있을 때"""
    def __init__(self, resource: str, field: str, value):
        super().__init__(resource, field, value, f"{resource} with {field} already exists: {value}")
