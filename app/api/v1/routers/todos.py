"""
➡️ But : Définir les endpoints de l’API.

C’est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, DELETE)

Appelle le service correspondant

Retourne les schémas de sortie (response_model)

Les erreurs métier (NotFoundError, ConflictError...) remontent telles quelles :
les handlers de app.core.errors les convertissent en {"message": ...}.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Response, status
from app.api.v1.dependencies import get_todo_service
from app.domain.schemas import MessageOut, TodoIn, TodoOut
from app.domain.services import TodoService

# id SERIAL / INTEGER : un id hors de cette plage est refusé (400) avant le store
TodoId = Annotated[int, Path(ge=-2**31, le=2**31 - 1, description="Identifiant du todo")]

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={
        400: {"model": MessageOut, "description": "Invalid request"},
        500: {"model": MessageOut, "description": "Internal error"},
    },
)

@router.get(
    "/",
    summary="Lister les todos",
    description="Retourne toutes les tâches, dans l'ordre du store (par id).",
    response_model=List[TodoOut],
)
def list_todos(svc: TodoService = Depends(get_todo_service)):
    return svc.list()

@router.get(
    "/{todo_id}",
    summary="Récupérer un todo",
    response_model=TodoOut,
    responses={404: {"model": MessageOut, "description": "Not Found"}},
)
def get_todo(todo_id: TodoId, svc: TodoService = Depends(get_todo_service)):
    return svc.get(todo_id)

@router.post(
    "/",
    summary="Créer un todo",
    description="id et created_at éventuellement fournis sont ignorés : le store attribue les siens.",
    response_model=TodoOut,
    responses={409: {"model": MessageOut, "description": "Conflict"}},
)
def create_todo(payload: TodoIn, svc: TodoService = Depends(get_todo_service)):
    return svc.create(title=payload.title, done=payload.done)

@router.put(
    "/{todo_id}",
    summary="Mettre à jour un todo",
    description="Seuls title et done sont appliqués.",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        404: {"model": MessageOut, "description": "Not Found"},
        409: {"model": MessageOut, "description": "Conflict"},
    },
)
def update_todo(todo_id: TodoId, payload: TodoIn, svc: TodoService = Depends(get_todo_service)):
    svc.update(todo_id, title=payload.title, done=payload.done)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete(
    "/{todo_id}",
    summary="Supprimer un todo",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": MessageOut, "description": "Not Found"}},
)
def delete_todo(todo_id: TodoId, svc: TodoService = Depends(get_todo_service)):
    svc.delete(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
