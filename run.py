#!/usr/bin/env python3
import uvicorn
import logging
import os
from datetime import datetime

from product_api.core.config import settings


def setup_logging() -> str:
    """
    配置根日志记录器：控制台 + 按启动时间命名的日志文件

    返回日志文件路径
    """
    # 创建logs目录（如果不存在）
    os.makedirs(settings.LOG_DIR, exist_ok=True)

    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    logger = logging.getLogger()
    logger.setLevel(level)

    # 创建控制台处理器
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    # 创建文件处理器，按日期生成日志文件
    log_filename = os.path.join(settings.LOG_DIR, f"app_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")
    file_handler = logging.FileHandler(log_filename, encoding='utf-8')
    file_handler.setLevel(level)

    # 创建格式器
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)
    file_handler.setFormatter(formatter)

    # 清除可能已存在的处理器，然后添加新的处理器
    logger.handlers = []
    logger.addHandler(console_handler)
    logger.addHandler(file_handler)
    return log_filename


def main() -> None:
    log_filename = setup_logging()
    logger = logging.getLogger(__name__)
    logger.info(f"启动API服务 - 监听 {settings.HOST}:{settings.PORT}")
    logger.info(f"日志文件路径: {log_filename}")
    # log_config=None 保留上面配置的处理器
    uvicorn.run(
        "product_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_config=None,
    )


if __name__ == "__main__":
    main()
