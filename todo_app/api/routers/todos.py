"""
➡️ But : Définir les endpoints de l’API todos.

Réceptionne les requêtes HTTP (GET, POST, PUT, PATCH, DELETE)

Appelle le service correspondant

Retourne les schémas de sortie (response_model)

Les erreurs métier remontent telles quelles : les handlers globaux
(todo_app.core.errors) les transforment en 400 / 404.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from todo_app.api.dependencies import get_todo_service
from todo_app.domain.schemas import ErrorOut, MessageOut, TodoCreate, TodoOut, TodoUpdate
from todo_app.domain.services import TodoService

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={404: {"description": "Not Found", "model": ErrorOut}},
)


@router.get(
    "",
    summary="Lister les todos",
    description="Retourne tous les todos, dans l'ordre de création.",
    response_model=List[TodoOut],
    responses={
        200: {
            "description": "Liste complète (éventuellement vide)",
            "content": {
                "application/json": {
                    "example": [{"id": 1, "title": "Buy milk", "completed": False,
                                 "createdAt": "2025-01-01T10:00:00Z"}]
                }
            },
        }
    },
)
def list_todos(svc: TodoService = Depends(get_todo_service)):
    return svc.list()


@router.post(
    "",
    summary="Créer un todo",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoOut,
    responses={400: {"description": "Titre manquant ou vide", "model": ErrorOut}},
)
def create_todo(payload: Optional[TodoCreate] = None, svc: TodoService = Depends(get_todo_service)):
    return svc.create(payload.title if payload else None)


@router.put(
    "/{todo_id}",
    summary="Modifier le titre d'un todo",
    response_model=TodoOut,
    responses={400: {"description": "Titre vide", "model": ErrorOut}},
)
def update_todo(
    todo_id: int,
    payload: Optional[TodoUpdate] = None,
    svc: TodoService = Depends(get_todo_service),
):
    return svc.update_title(todo_id, payload.title if payload else None)


@router.patch(
    "/{todo_id}/toggle",
    summary="Basculer l'état terminé d'un todo",
    response_model=TodoOut,
)
def toggle_todo(todo_id: int, svc: TodoService = Depends(get_todo_service)):
    return svc.toggle(todo_id)


@router.delete(
    "/{todo_id}",
    summary="Supprimer un todo",
    response_model=MessageOut,
)
def delete_todo(todo_id: int, svc: TodoService = Depends(get_todo_service)):
    return svc.delete(todo_id)
