"""
➡️ But : Définir la structure des tables de la base (ORM).

Contient les classes héritant de SQLModel (ou Base de SQLAlchemy).

Représente les objets persistés (ici : Todo, table "todos").

Chaque champ = une colonne SQL (avec type, index, clé primaire...).

🔹 Avantages :

Tu manipules des objets Python, pas du SQL brut.

Facile à migrer vers PostgreSQL ou MySQL plus tard.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, func
from sqlmodel import SQLModel, Field


class Todo(SQLModel, table=True):
    __tablename__ = "todos"

    # id et created_at : attribués par le store, jamais réécrits
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    done: bool = False
    created_at: Optional[datetime] = Field(
        default=None,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"server_default": func.now()},
        nullable=False,
    )
