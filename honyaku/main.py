#!/usr/bin/env python3
"""
日语英译练习服务 - FastAPI 主应用入口
Description: 随机出题、判定译文、记录答错历史、举报句子
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from honyaku.config.settings import settings
from honyaku.utils.logger import setup_logging
from honyaku.utils.database import init_db
from honyaku.api.routes import sentences, answers, health

logger = logging.getLogger(__name__)

CORS_ALLOW_METHODS = ["GET", "POST", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Content-Type"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    应用生命周期管理
    - 启动时配置日志、初始化数据库
    """
    setup_logging()
    logger.info("初始化练习服务...")

    try:
        init_db()
        logger.info("数据库初始化完成")
    except Exception as e:
        logger.error(f"应用启动失败: {e}")
        raise

    yield

    logger.info("练习服务已关闭")


def _cors_headers() -> dict:
    return {
        "Access-Control-Allow-Origin": ", ".join(settings.CORS_ALLOW_ORIGINS),
        "Access-Control-Allow-Methods": ", ".join(CORS_ALLOW_METHODS),
        "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
    }


def create_application() -> FastAPI:
    """创建并配置FastAPI应用实例"""

    app = FastAPI(
        title=settings.APP_NAME,
        description="日语句子英译练习接口",
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    # 配置CORS中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )

    # 任意路径的OPTIONS预检请求直接返回204
    @app.middleware("http")
    async def preflight_middleware(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_204_NO_CONTENT, headers=_cors_headers())
        return await call_next(request)

    # 全局异常处理
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request, exc):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request, exc):
        logger.info(f"请求体无效: {request.url.path} {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "请求体无效"}
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request, exc):
        logger.error(f"未处理的异常: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "内部服务器错误"}
        )

    # 注册API路由
    app.include_router(sentences.router, prefix="/api/sentence", tags=["句子"])
    app.include_router(answers.router, prefix="/api/answer", tags=["答题"])
    app.include_router(health.router, prefix="/api", tags=["健康检查"])

    return app

# 创建应用实例
app = create_application()
