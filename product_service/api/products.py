# 상품 라우터 (base path: /api/products)
# - POST   /api/products                    : 생성 (201)
# - GET    /api/products/{id}               : id로 조회
# - GET    /api/products/sku/{sku}          : SKU로 조회
# - GET    /api/products                    : 전체 목록
# - GET    /api/products/category/{category}: 카테고리 목록
# - GET    /api/products/search?query=...   : 이름 검색
# - PUT    /api/products/{id}               : 수정
# - DELETE /api/products/{id}               : 삭제 (204)
# - PATCH  /api/products/{id}/stock?quantity=...: 재고 변경 (200, 빈 본문)
#
# 주의: /search는 /{product_id}보다 먼저 등록해야 "search"가 id로 잡히지 않습니다.

from typing import List

from fastapi import APIRouter, Query, Response, status

from ecommerce_common.core.error_handlers import ERROR_RESPONSES
from ..schemas.product_schema import ProductRequest, ProductResponse
from ..services.product_service import ProductService


def create_router(service: ProductService) -> APIRouter:
    router = APIRouter(prefix="/api/products", tags=["Product Management"])

    # "/api/products/"도 리다이렉트(307) 없이 같은 핸들러로 받습니다
    @router.post("/", status_code=status.HTTP_201_CREATED, response_model=ProductResponse, include_in_schema=False)
    @router.post(
        "",
        response_model=ProductResponse,
        status_code=status.HTTP_201_CREATED,
        summary="Create a new product",
        responses={k: ERROR_RESPONSES[k] for k in (400, 409)},
    )
    async def create_product(payload: ProductRequest):
        return await service.create_product(payload)

    @router.get("/search", response_model=List[ProductResponse], summary="Search products by name")
    async def search_products(query: str = Query("", description="Search query")):
        return await service.search_products(query)

    @router.get(
        "/sku/{sku}",
        response_model=ProductResponse,
        summary="Get product by SKU",
        responses={404: ERROR_RESPONSES[404]},
    )
    async def get_product_by_sku(sku: str):
        return await service.get_product_by_sku(sku)

    @router.get(
        "/category/{category}",
        response_model=List[ProductResponse],
        summary="Get products by category",
    )
    async def list_products_by_category(category: str):
        return await service.list_products_by_category(category)

    @router.get("/", response_model=List[ProductResponse], include_in_schema=False)
    @router.get("", response_model=List[ProductResponse], summary="Get all products")
    async def list_products():
        return await service.list_products()

    @router.get(
        "/{product_id}",
        response_model=ProductResponse,
        summary="Get product by ID",
        responses={404: ERROR_RESPONSES[404]},
    )
    async def get_product(product_id: str):
        return await service.get_product(product_id)

    @router.put(
        "/{product_id}",
        response_model=ProductResponse,
        summary="Update product",
        responses=ERROR_RESPONSES,
    )
    async def update_product(product_id: str, payload: ProductRequest):
        return await service.update_product(product_id, payload)

    @router.delete(
        "/{product_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary="Delete product",
        responses={404: ERROR_RESPONSES[404]},
    )
    async def delete_product(product_id: str):
        await service.delete_product(product_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.patch(
        "/{product_id}/stock",
        response_class=Response,
        summary="Update product stock",
        responses={k: ERROR_RESPONSES[k] for k in (400, 404)},
    )
    async def update_stock(product_id: str, quantity: int = Query(..., ge=0, description="New stock quantity")):
        await service.update_stock(product_id, quantity)
        return Response(status_code=status.HTTP_200_OK)

    return router
