"""
➡️ But : Centraliser les dépendances réutilisables des routes.

get_todo_repository() : le store attaché à l'application (app.state).

get_todo_service() : crée un TodoService à partir de ce store.

🔹 Avantages :

Routes plus propres (pas de variable globale).

Chaque application (et donc chaque test) a son propre store.
"""

from fastapi import Depends, Request

from todo_app.domain.repositories import TodoRepository
from todo_app.domain.services import TodoService


def get_todo_repository(request: Request) -> TodoRepository:
    return request.app.state.todo_repository


def get_todo_service(repo: TodoRepository = Depends(get_todo_repository)) -> TodoService:
    return TodoService(repo)
