"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

Contient les modèles Pydantic utilisés par FastAPI :

TodoIn → corps de requête POST / PUT

TodoOut → réponse de l’API

MessageOut → corps de toute réponse d'erreur

Sépare les modèles "de stockage" (ORM) de ceux "de transfert" (I/O API).

🔹 Avantages :

Validation automatique.

Documente les champs dans Swagger (types, exemples...).
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class TodoIn(BaseModel):
    # id / created_at peuvent être envoyés par le client : acceptés puis ignorés
    id: Optional[int] = Field(None, description="Ignoré : attribué par le store")
    title: str = Field(..., examples=["Acheter du lait"])
    done: bool = Field(False, examples=[False])
    created_at: Optional[datetime] = Field(None, description="Ignoré : attribué par le store")

    model_config = {"extra": "ignore"}


class TodoOut(BaseModel):
    id: int
    title: str
    done: bool
    created_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        # SQLite ne conserve pas le fuseau : une date naïve est en UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class MessageOut(BaseModel):
    message: str = Field(..., examples=["Todo 42 not found"])
