import os
import json
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pydantic import field_validator

from product_api import __version__

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
env_path = os.path.join(project_root, '.env')
load_dotenv(env_path)


class Settings(BaseSettings):
    # 基本设置
    API_PREFIX: str = ""
    PROJECT_NAME: str = "Product API"
    VERSION: str = __version__

    # CORS 设置
    CORS_ORIGINS: List[str] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            # JSON数组或逗号分隔的字符串
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [i.strip() for i in v.split(",") if i.strip()]

        if isinstance(v, list):
            return v

        return []

    # 数据库设置
    DB_HOST: str = "localhost"
    DB_PORT: str = "5432"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "products"

    # 完整连接串，设置后覆盖上面的各项
    DATABASE_URI: Optional[str] = None

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """
        获取数据库URI
        """
        if self.DATABASE_URI:
            return self.DATABASE_URI

        return (
            f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?sslmode=disable"
        )

    # 是否自动创建数据库表结构
    CREATE_TABLES: bool = True

    # 错误处理
    # 为True时把数据库错误原文返回给客户端
    EXPOSE_ERROR_DETAILS: bool = False
    # 为True时PUT更新失败返回500，否则记录日志后仍返回200和请求体
    STRICT_UPDATE_ERRORS: bool = False

    # 日志
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # 服务器启动配置
    HOST: str = "0.0.0.0"
    PORT: int = 8010
    RELOAD: bool = False

    class Config:
        case_sensitive = True
        env_file = ".env"


# 创建设置实例
settings = Settings()
