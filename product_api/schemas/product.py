from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from product_api.models.product import Product


class ProductPayload(BaseModel):
    """
    商品请求体模型

    用于 POST /products 和 PUT /products/{id} 的请求数据，
    id 由数据库或URL决定，请求体中的 id 不做校验并被忽略
    """
    model_config = ConfigDict(extra="ignore")

    id: Any = None
    name: StrictStr = Field(min_length=1)
    quantity: StrictInt = Field(ge=0)
    price: Decimal = Field(ge=0, allow_inf_nan=False)

    @field_validator("price", mode="before")
    @classmethod
    def price_must_be_number(cls, v: Any) -> Any:
        # 只接受JSON数字，不把字符串转换为数字
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("price must be a JSON number")
        return v

    def to_model(self, product_id: Optional[int] = None) -> Product:
        """转换为数据库模型，product_id 为 None 时由数据库分配"""
        return Product(
            id=product_id,
            name=self.name,
            quantity=self.quantity,
            price=self.price,
        )
