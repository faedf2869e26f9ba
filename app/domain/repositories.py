"""
➡️ But : Encapsuler toutes les opérations de base de données.

TodoRepository : CRUD (create, read, update, delete) sur la table todos.

Ne contient aucune logique métier, juste de la persistance.

Chaque méthode ouvre sa propre transaction courte (session.begin()) : la connexion
est rendue au pool dès la fin de l'opération, pas à la fin de la requête.

🔹 Avantages :

Réutilisable (les services n’ont pas à savoir comment la DB fonctionne).

Testable indépendamment (mock du repo sans base réelle).
"""

from typing import Sequence
from sqlalchemy import delete, insert, update
from sqlmodel import Session, select, func
from app.domain.models import Todo

class TodoRepository:
    def __init__(self, session: Session):
        self.session = session

    def list(self) -> Sequence[Todo]:
        with self.session.begin():
            statement = select(Todo).order_by(Todo.id).execution_options(populate_existing=True)
            return self.session.exec(statement).all()

    def count(self) -> int:
        with self.session.begin():
            return self.session.exec(select(func.count(Todo.id))).one()

    def get(self, todo_id: int) -> Todo | None:
        # populate_existing : toujours relire la ligne, jamais l'identity map
        with self.session.begin():
            return self.session.get(Todo, todo_id, populate_existing=True)

    def create(self, *, title: str, done: bool) -> Todo:
        # INSERT sans id ni created_at : les deux sont attribués par la base
        statement = insert(Todo).values(title=title, done=done)
        with self.session.begin():
            todo_id = self.session.connection().execute(statement).inserted_primary_key[0]
            return self.session.get(Todo, todo_id, populate_existing=True)

    def update(self, todo_id: int, *, title: str, done: bool) -> int:
        """Retourne le nombre de lignes modifiées (id et created_at jamais touchés)."""
        statement = update(Todo).where(Todo.id == todo_id).values(title=title, done=done)
        with self.session.begin():
            return self.session.connection().execute(statement).rowcount

    def delete(self, todo_id: int) -> int:
        """Retourne le nombre de lignes supprimées."""
        statement = delete(Todo).where(Todo.id == todo_id)
        with self.session.begin():
            return self.session.connection().execute(statement).rowcount
