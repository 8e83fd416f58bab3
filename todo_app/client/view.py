"""
➡️ But : L'état d'affichage de la liste côté client.

Machine à états par chargement : idle → loading → success | error.

Les compteurs ("items left" / "completed") sont recalculés à chaque accès
depuis la dernière liste reçue, jamais stockés à part.

Chaque mutation (ajout, bascule, suppression, renommage) appelle l'API puis
recharge toute la liste : pas de mise à jour optimiste, le serveur fait foi.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional

from todo_app.client.api import TodoApiClient, TodoApiError, TodoItem

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No todos yet. Add one above!"
LOADING_MESSAGE = "Loading..."


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class TodoListView:
    def __init__(self, api: TodoApiClient):
        self.api = api
        self.status = LoadStatus.IDLE
        self.todos: List[TodoItem] = []
        self.error: Optional[str] = None
        self.mutation_error: Optional[str] = None
        self.new_title = ""
        self._loaded_once = False

    # -------- dérivés --------

    @property
    def is_loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    @property
    def items_left(self) -> int:
        return sum(1 for t in self.todos if not t.completed)

    @property
    def completed_count(self) -> int:
        return sum(1 for t in self.todos if t.completed)

    @property
    def is_empty(self) -> bool:
        return self.status is LoadStatus.SUCCESS and not self.todos

    # -------- chargement --------

    def load(self) -> LoadStatus:
        self.status = LoadStatus.LOADING
        try:
            todos = self.api.list_todos()
        except TodoApiError as exc:
            logger.warning("Failed to load todos: %s", exc.message)
            self.error = exc.message
            self.status = LoadStatus.ERROR
            return self.status
        else:
            self.todos = todos
            self.error = None
            self.status = LoadStatus.SUCCESS
            self._loaded_once = True
            return self.status
        finally:
            # jamais bloqué en LOADING, même sur une erreur inattendue (propagée)
            if self.status is LoadStatus.LOADING:
                self.error = "Unexpected error while loading todos"
                self.status = LoadStatus.ERROR

    refetch = load

    def _mutate(self, call: Callable[[], object]) -> bool:
        try:
            call()
        except TodoApiError as exc:
            logger.warning("Mutation failed: %s", exc.message)
            self.mutation_error = exc.message
            return False
        self.mutation_error = None
        self.refetch()
        return True

    # -------- mutations --------

    def add(self, title: Optional[str] = None) -> bool:
        if title is not None:
            self.new_title = title
        if not self.new_title.strip():
            return False
        ok = self._mutate(lambda: self.api.create_todo(self.new_title))
        if ok:
            self.new_title = ""
        return ok

    def toggle(self, todo_id: int) -> bool:
        return self._mutate(lambda: self.api.toggle_todo(todo_id))

    def remove(self, todo_id: int) -> bool:
        return self._mutate(lambda: self.api.delete_todo(todo_id))

    def rename(self, todo_id: int, title: str) -> bool:
        if not title.strip():
            return False
        return self._mutate(lambda: self.api.update_todo(todo_id, title))

    # -------- rendu --------

    def counters(self) -> List[str]:
        return [f"{self.items_left} items left", f"{self.completed_count} completed"]

    def render(self) -> List[str]:
        lines: List[str] = []
        if self.is_loading:
            lines.append(LOADING_MESSAGE)
        if self.status is LoadStatus.ERROR:
            lines.append(f"Error: {self.error}")
        if self.mutation_error:
            lines.append(f"Error: {self.mutation_error}")
        if self.is_empty:
            lines.append(EMPTY_MESSAGE)
        for todo in self.todos:
            mark = "x" if todo.completed else " "
            lines.append(f"[{mark}] {todo.id}. {todo.title}")
        # compteurs seulement après un premier chargement réussi
        if self._loaded_once:
            lines.extend(self.counters())
        return lines
