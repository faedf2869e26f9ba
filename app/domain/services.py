"""
➡️ But : Contenir la logique métier : orchestrer le repo, appliquer des règles, gérer les erreurs.

TodoService : traduit les résultats du repository (entité absente, nombre de lignes affectées)
et les erreurs SQLAlchemy en erreurs métier (app.core.errors).

0 ligne affectée → NotFoundError ; plus d'une → InvariantViolationError (jamais un simple 404).

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.errors import ConflictError, InternalError, InvariantViolationError, NotFoundError
from app.domain.models import Todo
from app.domain.repositories import TodoRepository

logger = logging.getLogger(__name__)


class TodoService:
    def __init__(self, repo: TodoRepository):
        self.repo = repo

    def list(self) -> List[Todo]:
        try:
            return list(self.repo.list())
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch todos")
            raise InternalError("Failed to fetch todos") from e

    def get(self, todo_id: int) -> Todo:
        try:
            todo = self.repo.get(todo_id)
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch todo %s", todo_id)
            raise InternalError(f"Failed to fetch the todo with id {todo_id}") from e
        if todo is None:
            raise NotFoundError(f"Todo {todo_id} not found")
        return todo

    def create(self, *, title: str, done: bool) -> Todo:
        try:
            todo = self.repo.create(title=title, done=done)
        except IntegrityError as e:
            logger.warning("Todo creation rejected by the store: %s", e.orig)
            raise ConflictError(f"Failed to create todo: {e.orig}") from e
        except SQLAlchemyError as e:
            logger.exception("Failed to create todo")
            raise InternalError("Failed to create todo") from e
        logger.info("Created todo %s", todo.id)
        return todo

    def update(self, todo_id: int, *, title: str, done: bool) -> None:
        try:
            affected = self.repo.update(todo_id, title=title, done=done)
        except IntegrityError as e:
            logger.warning("Update of todo %s rejected by the store: %s", todo_id, e.orig)
            raise ConflictError(f"Failed to update todo {todo_id}: {e.orig}") from e
        except SQLAlchemyError as e:
            logger.exception("Failed to update todo %s", todo_id)
            raise InternalError(f"Failed to update todo {todo_id}") from e
        self._check_single_row("update", todo_id, affected)
        logger.info("Updated todo %s", todo_id)

    def delete(self, todo_id: int) -> None:
        try:
            affected = self.repo.delete(todo_id)
        except SQLAlchemyError as e:
            logger.exception("Failed to delete todo %s", todo_id)
            raise InternalError(f"Failed to delete todo {todo_id}") from e
        self._check_single_row("delete", todo_id, affected)
        logger.info("Deleted todo %s", todo_id)

    def _check_single_row(self, operation: str, todo_id: int, affected: int) -> None:
        if affected == 0:
            logger.warning("Cannot %s todo %s: not found", operation, todo_id)
            raise NotFoundError(f"Todo {todo_id} not found")
        if affected > 1:
            logger.critical(
                "Invariant violated: %s of todo %s affected %s rows", operation, todo_id, affected
            )
            raise InvariantViolationError(
                f"Failed to {operation} todo {todo_id}: {affected} rows affected"
            )
