from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session

from product_api.db.base import Database


def get_database(request: Request) -> Database:
    """返回应用启动时创建的数据库上下文"""
    return request.app.state.db


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    获取数据库会话的依赖函数

    用于FastAPI依赖注入系统，每个请求一个会话
    """
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()
