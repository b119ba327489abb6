"""
FastAPI exception handlers

Every error body is {"detail": ...}, except the token check endpoint, whose
clients read a {"valid": false, "message": ...} verdict instead.
"""

from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError, TokenValidationError
from src.platform.logging.loguru_io import Logger

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc))
    if error.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        Logger.base.error(f'❌ {type(error).__name__} on {request.url.path}: {error.message}')
    return JSONResponse(status_code=error.status_code, content={'detail': error.message})


async def token_validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    message = exc.message if isinstance(exc, TokenValidationError) else str(exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'valid': False, 'message': message},
    )


async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Entity invariants (attrs validators) surface as ValueError
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'detail': str(exc)})


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'detail': jsonable_encoder(error.errors())},
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.error(f'❌ Unhandled {type(exc).__name__} on {request.url.path}: {exc}')
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'detail': 'Internal server error'},
    )


EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    TokenValidationError: token_validation_error_handler,
    CustomBaseError: custom_error_handler,
    ValueError: value_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
