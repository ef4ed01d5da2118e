import logging
import os
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.domain.errors import (
    IdentificadorInvalidoError,
    TareaNoEncontradaError,
    ValidacionError,
)

logger = logging.getLogger(__name__)


def _es_desarrollo() -> bool:
    return os.getenv("APP_ENV", "production").lower() == "development"


def validacion_handler(request: Request, exc: ValidacionError) -> JSONResponse:
    logger.warning(f"Validación fallida en {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": "Validation failed",
            "errors": [e.to_dict() for e in exc.errores],
        },
    )


def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Traduce los errores de FastAPI (JSON mal formado, tipos incorrectos) al
    mismo formato 400 que los errores de validación de dominio.
    """

    def campo(loc: tuple[Any, ...]) -> str:
        partes = [str(p) for p in loc if p not in ("body", "query", "path")]
        return ".".join(partes) or "body"

    errores = [
        {"field": campo(tuple(error.get("loc", ()))), "message": error.get("msg", "")}
        for error in exc.errors()
    ]
    logger.warning(f"Petición inválida en {request.url.path}: {errores}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": "Validation failed", "errors": errores},
    )


def tarea_no_encontrada_handler(
    request: Request, exc: TareaNoEncontradaError
) -> JSONResponse:
    logger.info(exc)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"success": False, "message": "Task not found"},
    )


def identificador_invalido_handler(
    request: Request, exc: IdentificadorInvalidoError
) -> JSONResponse:
    logger.info(exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": "Invalid task ID format"},
    )


async def ruta_no_encontrada_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": "Route not found", "path": request.url.path},
        )
    return await http_exception_handler(request, exc)


def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Error no controlado en {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "message": "Something went wrong!",
            "error": str(exc) if _es_desarrollo() else "Internal server error",
        },
    )


def registrar_handlers(app: FastAPI) -> None:
    app.exception_handler(ValidacionError)(validacion_handler)
    app.exception_handler(RequestValidationError)(request_validation_handler)
    app.exception_handler(TareaNoEncontradaError)(tarea_no_encontrada_handler)
    app.exception_handler(IdentificadorInvalidoError)(identificador_invalido_handler)
    app.exception_handler(StarletteHTTPException)(ruta_no_encontrada_handler)
    app.exception_handler(Exception)(unexpected_exception_handler)
