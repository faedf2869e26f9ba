from pathlib import Path
from typing import Any, Dict, List

import yaml
from sqlmodel import Session

from app.domain.models import Todo
from app.domain.repositories import TodoRepository


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Todos
# -----------------------------
def seed_todos(session: Session, data: Dict[str, Any]) -> List[Todo]:
    """
    Insère les todos du YAML (clé "todos") si la table est vide.
    Retourne les todos créés ([] si la table contenait déjà des lignes).
    """
    entries = data.get("todos") or []
    if not isinstance(entries, list):
        raise ValueError("La clé 'todos' doit être une liste.")
    for entry in entries:
        if not isinstance(entry, dict) or "title" not in entry:
            raise ValueError(f"Entrée de seed invalide: {entry!r}")

    repo = TodoRepository(session)
    if repo.count():
        return []

    return [
        repo.create(title=str(entry["title"]), done=bool(entry.get("done", False)))
        for entry in entries
    ]
