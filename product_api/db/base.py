import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from product_api.core.config import Settings

logger = logging.getLogger(__name__)

# 创建基本模型类
Base = declarative_base()


def create_db_engine(database_uri: str) -> Engine:
    """
    根据连接串创建数据库引擎

    SQLite 内存库需要所有线程共用同一个连接，其它数据库使用连接池
    """
    if database_uri.startswith("sqlite"):
        return create_engine(
            database_uri,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False
        )

    return create_engine(
        database_uri,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
        pool_recycle=3600,
        # 启用回显SQL语句，便于调试
        echo=False
    )


class Database:
    """
    数据库上下文

    在应用启动时创建，持有引擎和会话工厂，挂在 app.state 上供请求使用
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.engine = create_db_engine(settings.SQLALCHEMY_DATABASE_URI)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )

    def session(self) -> Session:
        return self.SessionLocal()

    def init_db(self) -> None:
        """
        初始化数据库，如果表不存在则创建
        """
        if not self.settings.CREATE_TABLES:
            logger.info("自动创建表功能已禁用")
            return

        # 注册模型到 Base.metadata
        from product_api.models import product  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("所有表已创建或已存在")

    def dispose(self) -> None:
        self.engine.dispose()
