import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

# starlette 기본 문구("Method Not Allowed" 등) 대신 내려줄 메시지
_STATUS_MESSAGES = {
    404: "Not found",
    405: "Method not allowed",
}


def validation_message(exc: RequestValidationError) -> str:
    """
    검증 오류 목록 → 사람이 읽을 메시지 1개
    - 스키마 validator 가 던진 ValueError 는 메시지 원문 그대로
    - 필드 누락은 "<field> is required"
    """
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    err = errors[0]
    if err.get("type") == "value_error":
        ctx_error = (err.get("ctx") or {}).get("error")
        if ctx_error is not None:
            return str(ctx_error)
        return str(err.get("msg", "")).removeprefix("Value error, ")
    if err.get("type") == "missing":
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        return f"{loc[-1] if loc else 'body'} is required"
    if err.get("type") == "json_invalid":
        return "Invalid JSON body"
    return err.get("msg", "Invalid request")


def add_error_handlers(app: FastAPI):
    # ✅ 요청 검증 실패 → 400 {"error": ...}
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=validation_message(exc)).to_content(),
        )

    # ✅ HTTPException (404/405 포함) → {"error": detail}
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = str(exc.detail)
        if message == HTTPStatus(exc.status_code).phrase:
            message = _STATUS_MESSAGES.get(exc.status_code, message)
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=message).to_content(),
            headers=exc.headers,
        )

    # ✅ 그 밖의 예외 → 500
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Internal server error").to_content(),
        )
