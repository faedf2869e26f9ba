"""
➡️ But : Définir les endpoints annexes de l’API (hors CRUD).

/world : salutation fixe

/delay/{seconds} : attente non bloquante, sans connexion DB

/blocking_task : lecture de data.txt déportée dans un thread worker

/config : écho de la configuration chargée au démarrage

🔹 Avantages :

Aucune logique dans les routes : tout passe par app.features.demo.services.

Les erreurs (FileReadError, TaskFailureError) sont converties en {"message": ...} par app.core.errors.
"""

from fastapi import APIRouter, Depends, Path
from fastapi.responses import PlainTextResponse, Response

from app.api.v1.dependencies import get_settings
from app.core.config import Settings
from app.domain.schemas import MessageOut
from app.features.demo import services

router = APIRouter(tags=["demo"])

@router.get("/world", summary="Salutation fixe", response_class=PlainTextResponse)
def world():
    return services.GREETING

@router.get(
    "/delay/{seconds}",
    summary="Attendre sans bloquer les autres requêtes",
    response_class=PlainTextResponse,
)
async def delay(seconds: int = Path(..., ge=0, description="Durée d'attente en secondes")):
    # aucune dépendance DB ici : rien n'est tenu pendant l'attente
    return await services.wait(seconds)

@router.get(
    "/blocking_task",
    summary="Lire data.txt dans un thread worker",
    response_class=Response,
    responses={
        200: {"content": {"application/octet-stream": {}}},
        500: {"model": MessageOut, "description": "File unreadable or task failure"},
    },
)
async def blocking_task(cfg: Settings = Depends(get_settings)):
    content = await services.read_blocking_file(cfg.DATA_FILE)
    return Response(content=content, media_type="application/octet-stream")

@router.get("/config", summary="Écho de la configuration", response_class=PlainTextResponse)
def get_config(cfg: Settings = Depends(get_settings)):
    return services.config_greeting(cfg)
