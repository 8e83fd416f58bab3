"""
➡️ But : Contenir la logique métier : orchestrer le repo, appliquer les règles, gérer les erreurs.

TodoService : valide les titres, vérifie l'existence avant modification / suppression,
bascule l'état `completed`.

Lève des erreurs métier (ValidationError, NotFoundError), traduites en HTTP par
les handlers de todo_app.core.errors.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

from typing import Any, Dict, List

from todo_app.core.errors import NotFoundError, ValidationError
from todo_app.domain.models import Todo
from todo_app.domain.repositories import TodoRepository


def clean_title(title: Any) -> str:
    """Refuse un titre absent, non textuel ou vide après trim."""
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Title is required")
    return title


class TodoService:
    def __init__(self, repo: TodoRepository):
        self.repo = repo

    def list(self) -> List[Todo]:
        return self.repo.list()

    def get(self, todo_id: int) -> Todo:
        todo = self.repo.get(todo_id)
        if not todo:
            raise NotFoundError("Todo not found")
        return todo

    def create(self, title: Any) -> Todo:
        return self.repo.create(title=clean_title(title))

    def update_title(self, todo_id: int, title: Any = None) -> Todo:
        with self.repo.transaction():
            todo = self.get(todo_id)
            if title is None:
                return todo
            return self.repo.update(todo, title=clean_title(title))

    def toggle(self, todo_id: int) -> Todo:
        # lecture + écriture sous le même verrou
        with self.repo.transaction():
            todo = self.get(todo_id)
            return self.repo.update(todo, completed=not todo.completed)

    def delete(self, todo_id: int) -> Dict[str, str]:
        with self.repo.transaction():
            todo = self.get(todo_id)
            self.repo.delete(todo)
        return {"message": "Todo deleted"}
