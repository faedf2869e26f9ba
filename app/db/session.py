"""
➡️ But : Configurer la base et gérer les sessions de base de données.

engine : connexion poolée à la base (SQLite par défaut, Postgres via DATABASE_URL).

init_db() : crée les tables à partir des modèles SQLModel.

get_session() : dépendance FastAPI qui ouvre une session, la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

Un seul endroit pour gérer les connexions DB et la taille du pool.

Réutilisable par injection (Depends(get_session)).
"""

import logging
from typing import Dict, Any, Iterator

from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine

# Import all models for creating all tables
from app.domain.models import Todo  # noqa: F401

from app.core.config import Settings, settings

logger = logging.getLogger(__name__)


def build_engine(cfg: Settings = settings) -> Engine:
    url = cfg.DATABASE_URL
    assert url, "DATABASE_URL must be set"

    is_sqlite = url.startswith("sqlite:")

    kwargs: Dict[str, Any] = {}
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        # pool borné : DB_POOL_SIZE connexions + DB_MAX_OVERFLOW en pointe
        kwargs.update(
            pool_size=cfg.DB_POOL_SIZE,
            max_overflow=cfg.DB_MAX_OVERFLOW,
            pool_timeout=cfg.DB_POOL_TIMEOUT,
            pool_pre_ping=True,
        )

    # echo seulement en dev pour ne pas polluer les logs en prod
    engine = create_engine(url, echo=(cfg.ENV == "dev"), **kwargs)
    logger.info("Database engine ready (%s)", engine.url.render_as_string(hide_password=True))
    return engine

engine: Engine = build_engine()

def init_db(bind: Engine = engine) -> None:
    """
    Crée les tables si elles n'existent pas (usage dev/demo).
    En prod, préfère des migrations.
    """
    SQLModel.metadata.create_all(bind)


def get_session() -> Iterator[Session]:
    """
    Dépendance FastAPI : fournit une session par requête.
    expire_on_commit=False : les entités restent lisibles après la fin de la
    transaction, sans reprendre de connexion au pool pour la sérialisation.
    """
    with Session(engine, expire_on_commit=False) as session:
        yield session
