# 상품 서비스 레이어
# - SKU 중복 체크 후 생성/수정
# - id/SKU 조회, 전체/카테고리 목록, 이름 검색, 재고 변경, 삭제
# - 엔티티 → 응답 DTO 변환 (inStock은 여기서 계산)

import logging
from decimal import Decimal
from typing import List

from ecommerce_common.core.clock import utc_now
from ecommerce_common.core.exceptions import DuplicateResourceError, ResourceNotFoundError
from ..models.product import Product
from ..repositories.product_repository import ProductRepository
from ..schemas.product_schema import ProductRequest, ProductResponse

logger = logging.getLogger(__name__)


def to_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        sku=product.sku,
        name=product.name,
        description=product.description,
        price=product.price,
        stock=product.stock,
        in_stock=product.stock > 0,
        category=product.category,
        image_url=product.image_url,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def to_responses(products: List[Product]) -> List[ProductResponse]:
    return [to_response(p) for p in products]


class ProductService:
    def __init__(self, repo: ProductRepository):
        self.repo = repo

    async def create_product(self, request: ProductRequest) -> ProductResponse:
        logger.info(f"[ProductService] Creating product with SKU: {request.sku}")

        if await self.repo.exists_by_sku(request.sku):
            raise DuplicateResourceError("Product", "SKU", request.sku)

        now = utc_now()
        product = Product(**request.model_dump(), created_at=now, updated_at=now)
        saved = await self.repo.save(product)
        logger.info(f"[ProductService] Product created successfully with ID: {saved.id}")
        return to_response(saved)

    async def get_product(self, product_id: str) -> ProductResponse:
        logger.info(f"[ProductService] Fetching product with ID: {product_id}")
        return to_response(await self._get_or_raise(product_id))

    async def get_product_by_sku(self, sku: str) -> ProductResponse:
        logger.info(f"[ProductService] Fetching product with SKU: {sku}")
        product = await self.repo.find_by_sku(sku)
        if product is None:
            raise ResourceNotFoundError("Product", "SKU", sku)
        return to_response(product)

    async def list_products(self) -> List[ProductResponse]:
        logger.info("[ProductService] Fetching all products")
        return to_responses(await self.repo.find_all())

    async def list_products_by_category(self, category: str) -> List[ProductResponse]:
        logger.info(f"[ProductService] Fetching products in category: {category}")
        return to_responses(await self.repo.find_by_category(category))

    async def search_products(self, query: str) -> List[ProductResponse]:
        logger.info(f"[ProductService] Searching products with name containing: {query}")
        return to_responses(await self.repo.find_by_name_containing_ignore_case(query))

    async def update_product(self, product_id: str, request: ProductRequest) -> ProductResponse:
        logger.info(f"[ProductService] Updating product with ID: {product_id}")
        existing = await self._get_or_raise(product_id)

        # SKU가 바뀌는 경우에만 중복 체크
        if existing.sku != request.sku and await self.repo.exists_by_sku(request.sku):
            raise DuplicateResourceError("Product", "SKU", request.sku)

        updated = existing.model_copy(update={
            **request.model_dump(),
            "updated_at": max(utc_now(), existing.updated_at),
        })
        saved = await self.repo.save(updated)
        logger.info(f"[ProductService] Product updated successfully: {product_id}")
        return to_response(saved)

    async def delete_product(self, product_id: str) -> None:
        logger.info(f"[ProductService] Deleting product with ID: {product_id}")
        if not await self.repo.exists_by_id(product_id):
            raise ResourceNotFoundError("Product", "ID", product_id)
        await self.repo.delete_by_id(product_id)
        logger.info(f"[ProductService] Product deleted successfully: {product_id}")

    async def update_stock(self, product_id: str, quantity: int) -> None:
        # quantity >= 0 검증은 HTTP 레이어(Query ge=0)에서 합니다
        logger.info(f"[ProductService] Updating stock for product ID: {product_id} to quantity: {quantity}")
        product = await self._get_or_raise(product_id)
        updated = product.model_copy(update={
            "stock": quantity,
            "updated_at": max(utc_now(), product.updated_at),
        })
        await self.repo.save(updated)

    # ---- 내부용 조회 (HTTP 미노출) ----

    async def find_products_in_price_range(self, min_price: Decimal, max_price: Decimal) -> List[ProductResponse]:
        logger.info(f"[ProductService] Fetching products priced between {min_price} and {max_price}")
        return to_responses(await self.repo.find_by_price_between(min_price, max_price))

    async def find_products_in_stock_above(self, min_stock: int) -> List[ProductResponse]:
        logger.info(f"[ProductService] Fetching products with stock greater than {min_stock}")
        return to_responses(await self.repo.find_by_stock_greater_than(min_stock))

    async def _get_or_raise(self, product_id: str) -> Product:
        product = await self.repo.find_by_id(product_id)
        if product is None:
            raise ResourceNotFoundError("Product", "ID", product_id)
        return product
