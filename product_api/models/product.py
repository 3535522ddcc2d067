from typing import Dict, Any

from sqlalchemy import Column, Integer, Text, Numeric

from product_api.db.base import Base


class Product(Base):
    """
    商品数据库模型

    id 由数据库分配，分配后不再改变
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text)
    quantity = Column(Integer)
    price = Column(Numeric)

    def to_dict(self) -> Dict[str, Any]:
        """将商品转换为字典表示形式，price 以数字输出"""
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "price": float(self.price) if self.price is not None else None,
        }

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"
