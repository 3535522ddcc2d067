"""
商品相关API接口模块

提供商品的增删改查接口，每个接口只做请求到数据访问调用的转换。
接口使用普通函数定义，由服务器线程池并发执行。
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends

from product_api.api.dependencies import (
    clamp_count,
    clamp_start,
    get_product_service,
    get_settings,
    product_id_path,
    product_payload,
)
from product_api.core.config import Settings
from product_api.infrastructure.exceptions import StoreError
from product_api.infrastructure.response import respond_with_json, success_response
from product_api.schemas.product import ProductPayload
from product_api.services import ProductService

# 配置日志记录器
logger = logging.getLogger(__name__)

# 创建API路由实例
router = APIRouter()


# 获取商品列表接口
@router.get("")
def get_products(
        count: Optional[str] = None,  # 返回条数，限制在 1~10，默认10
        start: Optional[str] = None,  # 跳过条数，不小于0，默认0
        service: ProductService = Depends(get_product_service),
):
    """
    按 id 升序返回商品列表

    count/start 无法解析或超出范围时使用默认值，而不是返回400
    """
    products = service.list(clamp_start(start), clamp_count(count))
    return respond_with_json([p.to_dict() for p in products])


# 获取商品详情接口
@router.get("/{product_id}")
def get_product(
        product_id: int = Depends(product_id_path),
        service: ProductService = Depends(get_product_service),
):
    product = service.fetch(product_id)
    return respond_with_json(product.to_dict())


# 创建商品接口
@router.post("")
def create_product(
        payload: ProductPayload = Depends(product_payload),
        service: ProductService = Depends(get_product_service),
):
    """
    创建商品，请求体中的 id 被忽略，返回201和数据库分配的 id
    """
    product = service.create(payload.to_model())
    return respond_with_json(product.to_dict(), status_code=201)


# 更新商品接口
@router.put("/{product_id}")
def update_product(
        product_id: int = Depends(product_id_path),
        payload: ProductPayload = Depends(product_payload),
        service: ProductService = Depends(get_product_service),
        settings: Settings = Depends(get_settings),
):
    """
    用请求体覆盖商品的 name/quantity/price，id 以URL为准

    id 不存在时不报错。STRICT_UPDATE_ERRORS 关闭时，数据库错误只记录日志，
    仍返回200和请求体
    """
    product = payload.to_model(product_id)
    try:
        service.update(product)
    except StoreError:
        if settings.STRICT_UPDATE_ERRORS:
            raise
        logger.warning(f"更新商品失败，按兼容模式返回请求体: id={product_id}")
    return respond_with_json(product.to_dict())


# 删除商品接口
@router.delete("/{product_id}")
def delete_product(
        product_id: int = Depends(product_id_path),
        service: ProductService = Depends(get_product_service),
):
    service.delete(product_id)
    return respond_with_json(success_response())
