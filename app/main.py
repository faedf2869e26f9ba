"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Configure :

logs (niveau LOG_LEVEL)

CORS (autorisations de qui peut appeler ces API)

handlers d'erreurs (toute erreur → {"message": ...})

schéma OpenAPI personnalisé

Inclut les routers (/todos et les endpoints annexes /world, /delay, /blocking_task, /config).

Initialise la base au démarrage (@app.on_event("startup")).

🔹 Avantages :

Point unique d’exécution : uvicorn app.main:app --reload.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging
from app.core.openapi import custom_openapi
from app.db.session import init_db

from app.api.v1.routers import todos, demo

import uvicorn

configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    openapi_tags=[
        {"name": "todos", "description": "CRUD sur les todos"},
        {"name": "demo", "description": "Attente non bloquante, lecture bloquante déportée, écho de config"},
    ],
)

# CORS (ajustez selon vos besoins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

register_exception_handlers(app)

# Routers
app.include_router(demo.router)
app.include_router(todos.router)

# Génération du schéma OpenAPI custom (facultatif, mais propre)
app.openapi = lambda: custom_openapi(app)

# Démarrage
@app.on_event("startup")
def on_startup():
    init_db()

if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=(settings.ENV == "dev"))
