"""
➡️ But : Définir les erreurs métier et les traduire en réponses HTTP.

ValidationError → 400, NotFoundError → 404, tout le reste → 500.

Toutes les réponses d'erreur ont la même forme : {"error": "<message>"}.

🔹 Avantages :

Les services ne connaissent pas HTTP (pas de HTTPException dans le métier).

Un seul filet de sécurité pour les exceptions inattendues.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class TodoError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TodoError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(TodoError):
    status_code = status.HTTP_404_NOT_FOUND


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "Invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


async def todo_error_handler(request: Request, exc: TodoError) -> JSONResponse:
    logger.info("%s %s -> %s (%s)", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # un id non entier ne peut correspondre à aucun todo
    if any(err.get("loc", ("",))[0] == "path" for err in exc.errors()):
        return error_response(status.HTTP_404_NOT_FOUND, "Todo not found")
    return error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_errors(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


async def catch_unhandled_exceptions(request: Request, call_next):
    """
    Middleware placé sous CORSMiddleware : le 500 repasse par CORS et garde
    ses en-têtes Access-Control-*. Le handler `Exception` seul tourne dans
    ServerErrorMiddleware, au-dessus de CORS : un navigateur n'y verrait
    qu'une erreur réseau opaque.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return await unhandled_exception_handler(request, exc)


def install_exception_handlers(app: FastAPI) -> None:
    """À appeler avant d'ajouter CORSMiddleware (le dernier middleware ajouté est le plus externe)."""
    app.add_exception_handler(TodoError, todo_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.middleware("http")(catch_unhandled_exceptions)
