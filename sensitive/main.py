# 【入口】服务启动点
import sys

from fastapi import FastAPI
from loguru import logger

from sensitive.api.v1.router import api_router
from sensitive.censor import models  # noqa: F401  注册表结构
from sensitive.censor.routers.censor import service
from sensitive.core.config import settings
from sensitive.core.database import Base, SessionLocal, engine


# ========================================
# Loguru 日志配置
# ========================================
def setup_logger():
    """配置 loguru 日志系统"""
    # 移除默认的 handler
    logger.remove()

    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=settings.LOG_LEVEL,
        colorize=True,
    )

    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            rotation="100 MB",
            retention="10 days",
            compression="zip",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=settings.LOG_LEVEL,
        )

    logger.info("Loguru 日志系统初始化完成")


setup_logger()


app = FastAPI(
    title=settings.APP_NAME,
    description="基于前缀树的敏感词检测、过滤与替换服务",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    """建表并加载词库"""
    logger.info("=" * 60)
    logger.info(f"{settings.APP_NAME} 正在启动...")
    logger.info(f"调试模式: {settings.DEBUG}")
    logger.info(f"日志级别: {settings.LOG_LEVEL}")
    logger.info("=" * 60)

    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        if settings.WORD_DICT_PATH:
            service.import_word_dict(db, settings.WORD_DICT_PATH, updated_by="startup")
        service.reload(db)
    finally:
        db.close()


@app.on_event("shutdown")
async def shutdown_event():
    logger.info(f"{settings.APP_NAME} 正在关闭...")


@app.get("/")
def health_check():
    """健康检查端点"""
    return {
        "status": "ok",
        "message": "Sensitive Filter Service is running!",
        "version": "1.0.0",
    }
