"""
➡️ But : Convertir toutes les erreurs (persistance, validation, tâche de fond) en une seule forme de réponse.

Chaque erreur métier hérite de TodoAppError et porte son code HTTP.

error_to_status(exc) : unique fonction de correspondance exception -> (status, message).

register_exception_handlers(app) : branche les handlers FastAPI qui renvoient {"message": "..."}.

🔹 Avantages :

Aucun formatage ad hoc dans les routes.

Une erreur de persistance ne fait jamais planter le handler ni le process.
"""

import logging
from typing import Tuple

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class TodoAppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(TodoAppError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidPayloadError(TodoAppError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(TodoAppError):
    status_code = status.HTTP_409_CONFLICT


class InternalError(TodoAppError):
    """Store indisponible, requête en échec..."""


class InvariantViolationError(InternalError):
    """Plus d'une ligne affectée pour un id unique : données corrompues."""


class FileReadError(InternalError):
    """Le fichier n'a pas pu être lu (OSError dans le worker)."""


class TaskFailureError(InternalError):
    """Le worker de fond n'a pas terminé (échec autre qu'une erreur d'I/O)."""


def error_to_status(exc: Exception) -> Tuple[int, str]:
    if isinstance(exc, TodoAppError):
        return exc.status_code, exc.message
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        # loc = ("body", "title") / ("path", "todo_id")...
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "Invalid request: " + "; ".join(parts)


def error_response(exc: Exception) -> JSONResponse:
    status_code, message = error_to_status(exc)
    return JSONResponse(status_code=status_code, content={"message": message})


async def todo_app_error_handler(request: Request, exc: TodoAppError) -> JSONResponse:
    # les InternalError sont déjà loggées (avec traceback) là où elles sont levées
    if exc.status_code >= 500 and not isinstance(exc, InternalError):
        logger.error("%s %s -> %s: %s", request.method, request.url.path, type(exc).__name__, exc.message)
    return error_response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(InvalidPayloadError(_format_validation_errors(exc)))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # 404 route inconnue, 405 méthode... : même forme {"message"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TodoAppError, todo_app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
