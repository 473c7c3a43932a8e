from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from typing import Dict, Any
from src.infra.logging_config import get_logger
from ...domain.exception.user_exceptions import (
    MalformedUserRequestError,
    UserNotFoundError,
    UserValidationError
)

logger = get_logger("api.errors")


def create_error_response(
    error_type: str,
    user_message: str,
    detail: Any = None,
    status_code: int = 500,
    retry_available: bool = False,
    additional_data: Dict[str, Any] = None
) -> JSONResponse:
    """統一されたエラーレスポンスを作成"""
    content = {
        "error_type": error_type,
        "user_message": user_message,
        "retry_available": retry_available
    }
    
    if detail:
        content["detail"] = detail
    
    if additional_data:
        content.update(additional_data)
    
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(content)
    )


async def handle_user_not_found_error(request: Request, exc: UserNotFoundError):
    """ユーザーが見つからない場合: 本文なしの404"""
    logger.warning(
        "User not found",
        extra={
            "path": request.url.path,
            "method": request.method,
            "user_id": str(exc.user_id)
        }
    )
    
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def handle_malformed_request_error(request: Request, exc: MalformedUserRequestError):
    """本文なし・空のID等: 本文なしの400"""
    logger.warning(
        "Malformed request",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error": exc.message
        }
    )
    
    return Response(status_code=status.HTTP_400_BAD_REQUEST)


async def handle_user_validation_error(request: Request, exc: UserValidationError):
    """フィールド単位のバリデーションエラー: 422とエラー一覧"""
    logger.warning(
        "User validation error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "errors": exc.errors
        }
    )
    
    return create_error_response(
        error_type="validation_error",
        user_message="入力内容に問題があります。内容を確認してください。",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        retry_available=False,
        additional_data={"errors": exc.errors}
    )


async def handle_request_validation_exception(request: Request, exc: RequestValidationError):
    """FastAPIのリクエスト解析エラー（JSON不正、型不一致、不正なUUID等）: 400"""
    logger.warning(
        "FastAPI validation error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "errors": exc.errors()
        }
    )
    
    return create_error_response(
        error_type="bad_request",
        user_message="リクエストの形式が正しくありません",
        detail=exc.errors(),
        status_code=status.HTTP_400_BAD_REQUEST,
        retry_available=False
    )


async def handle_generic_error(request: Request, exc: Exception):
    """その他のエラーのハンドリング"""
    logger.error(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error": str(exc),
            "error_type": type(exc).__name__
        },
        exc_info=True
    )
    
    return create_error_response(
        error_type="internal_error",
        user_message="予期しないエラーが発生しました。問題が続く場合はサポートにお問い合わせください。",
        detail=str(exc) if request.app.debug else None,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        retry_available=True
    )
