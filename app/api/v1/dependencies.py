"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_todo_service() : crée un TodoService à partir d’une session DB.

get_settings() : configuration chargée au démarrage, en lecture seule.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à surcharger dans les tests (app.dependency_overrides).
"""

from fastapi import Depends
from sqlmodel import Session

from app.core.config import get_settings  # noqa: F401
from app.db.session import get_session
from app.domain.repositories import TodoRepository
from app.domain.services import TodoService


def get_todo_repository(session: Session = Depends(get_session)) -> TodoRepository:
    return TodoRepository(session)


def get_todo_service(repo: TodoRepository = Depends(get_todo_repository)) -> TodoService:
    return TodoService(repo)
