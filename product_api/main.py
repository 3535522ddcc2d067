from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from typing import Optional

from product_api.api.v1.api import api_router
from product_api.core.config import Settings, settings as default_settings
from product_api.db.base import Database
from product_api.infrastructure.exceptions import (
    ErrorKind,
    INTERNAL_ERROR_MESSAGE,
    ProductAPIError,
)
from product_api.infrastructure.response import respond_with_error

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """所有错误统一输出为 {"error": msg}"""

    @app.exception_handler(ProductAPIError)
    async def product_api_error_handler(request: Request, exc: ProductAPIError) -> JSONResponse:
        message = exc.message
        if exc.kind is ErrorKind.INTERNAL:
            logger.error(f"{request.method} {request.url.path} 处理失败: {exc.message}")
            if not app.state.settings.EXPOSE_ERROR_DETAILS:
                message = INTERNAL_ERROR_MESSAGE
        return respond_with_error(message, status_code=exc.kind.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        response = respond_with_error(str(exc.detail), status_code=exc.status_code)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"{request.method} {request.url.path} 未处理的异常: {exc}")
        return respond_with_error(INTERNAL_ERROR_MESSAGE, status_code=500)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    创建应用

    数据库上下文在这里创建并挂到 app.state，请求通过依赖注入取用
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="商品增删改查API"
    )
    app.state.settings = settings
    app.state.db = Database(settings)

    # 配置CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # 包含API路由
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.on_event("startup")
    def startup_db_client():
        """
        应用启动时初始化数据库
        """
        logger.info("正在初始化数据库...")
        try:
            app.state.db.init_db()
            logger.info("数据库初始化成功")
        except Exception as e:
            logger.exception(f"数据库初始化失败: {str(e)}")
            logger.warning("应用将继续启动，但数据库功能可能不可用")

    @app.on_event("shutdown")
    def shutdown_db_client():
        app.state.db.dispose()

    @app.get("/health")
    async def health():
        """健康检查接口"""
        return {"status": "online", "version": settings.VERSION}

    return app


app = create_app()
