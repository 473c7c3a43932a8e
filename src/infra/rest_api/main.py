import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from src.infra.config import Settings
from src.infra.logging_config import LoggingMiddleware, configure_loggers, get_logger
from src.domain.exception.user_exceptions import (
    MalformedUserRequestError,
    UserNotFoundError,
    UserValidationError
)

from .routers.users import router as users_router
from .schemas import HealthResponse
from .error_handlers import (
    handle_generic_error,
    handle_malformed_request_error,
    handle_request_validation_exception,
    handle_user_not_found_error,
    handle_user_validation_error
)

APP_VERSION = "0.1.0"

settings = Settings()
# 本番環境では適切なログレベルを設定する
log_level = logging.INFO if settings.environment == "production" else logging.DEBUG
logger = get_logger("app")
get_logger("api.access")
get_logger("usecase.users")
# インポート時に生成済みのロガーも含めて設定を反映
configure_loggers(log_level, settings.log_file)

app = FastAPI(
    title="Users Service API",
    version=APP_VERSION
)

app.add_middleware(LoggingMiddleware)

# CORS 設定（環境設定に基づく）
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Pagination", "Location"],
)

app.include_router(users_router, prefix=settings.api_prefix)

@app.on_event("startup")
async def startup_event():
    """アプリケーション起動時の初期化処理"""
    logger.info(
        "Application starting up",
        extra={"environment": settings.environment, "backend": settings.repository_backend}
    )
    
    if settings.repository_backend != "tortoise":
        return
    
    from tortoise import Tortoise
    from src.infra.tortoise_client.config import get_tortoise_config
    
    await Tortoise.init(config=get_tortoise_config(settings))
    if settings.generate_schemas:
        await Tortoise.generate_schemas(safe=True)
    logger.info("Tortoise ORM initialized")

@app.on_event("shutdown")
async def shutdown_event():
    """アプリケーション終了時のクリーンアップ"""
    if settings.repository_backend == "tortoise":
        from tortoise import Tortoise
        await Tortoise.close_connections()
    logger.info("Application shutdown complete")

@app.get(f"{settings.api_prefix}/health", response_model=HealthResponse)
async def health_check():
    """ヘルスチェックエンドポイント"""
    return HealthResponse(status="healthy", version=APP_VERSION)

# エラーハンドラーの登録
app.add_exception_handler(UserNotFoundError, handle_user_not_found_error)
app.add_exception_handler(MalformedUserRequestError, handle_malformed_request_error)
app.add_exception_handler(UserValidationError, handle_user_validation_error)
app.add_exception_handler(RequestValidationError, handle_request_validation_exception)
app.add_exception_handler(Exception, handle_generic_error)


#uvicorn src.infra.rest_api.main:app --reload
