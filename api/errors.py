"""Exception handlers that turn failures into ``{"error": ...}`` responses."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_board.task_store import TaskNotFoundError, TaskValidationError

logger = logging.getLogger(__name__)

TASK_NOT_FOUND_MESSAGE = "Tarea no encontrada"
MISSING_FIELDS_MESSAGE = "Faltan campos requeridos: titulo, categoria, prioridad"
ROUTE_NOT_FOUND_MESSAGE = "Ruta no encontrada"
INVALID_BODY_MESSAGE = "Cuerpo de la petición inválido"


async def task_not_found_handler(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: task {exc.task_id!r} not found")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": TASK_NOT_FOUND_MESSAGE},
    )


async def task_validation_handler(request: Request, exc: TaskValidationError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: rejected, missing {', '.join(exc.missing)}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": MISSING_FIELDS_MESSAGE},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {
            "campo": ".".join(str(part) for part in error.get("loc", ())),
            "mensaje": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    logger.warning(f"{request.method} {request.url.path}: invalid request body {details}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": INVALID_BODY_MESSAGE, "detalles": details},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths and known paths with an unsupported method are both "no route".
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": ROUTE_NOT_FOUND_MESSAGE},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskNotFoundError, task_not_found_handler)
    app.add_exception_handler(TaskValidationError, task_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
