"""
➡️ But : Encapsuler le stockage des todos.

TodoRepository : CRUD (create, read, update, delete) sur une liste en mémoire.

Ne contient aucune logique métier, juste le stockage et l'attribution des ids.

🔹 Avantages :

Réutilisable (les services n’ont pas à savoir où vivent les données).

Testable indépendamment, une instance par application / par test.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from todo_app.domain.models import Todo

logger = logging.getLogger(__name__)


class TodoRepository:
    """
    Store en mémoire, ordre d'insertion conservé.

    👉 Les ids viennent d'un compteur qui ne recule jamais : un id supprimé
       n'est jamais réattribué.
    👉 Toute écriture passe par le verrou ; `transaction()` permet au service
       de grouper lecture + écriture (ex : toggle) de façon atomique.
    """

    def __init__(self, start_id: int = 1):
        if start_id < 1:
            raise ValueError("start_id must be >= 1")
        self._todos: List[Todo] = []
        self._next_id = start_id
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator["TodoRepository"]:
        with self._lock:
            yield self

    # ---------- READ ----------

    def list(self) -> List[Todo]:
        """Retourne une copie de la liste (jamais None)."""
        with self._lock:
            return list(self._todos)

    def get(self, todo_id: int) -> Optional[Todo]:
        with self._lock:
            return next((t for t in self._todos if t.id == todo_id), None)

    # ---------- CREATE ----------

    def _allocate_id(self) -> int:
        todo_id = self._next_id
        self._next_id += 1
        return todo_id

    def create(self, *, title: str) -> Todo:
        with self._lock:
            todo = Todo(id=self._allocate_id(), title=title)
            self._todos.append(todo)
        logger.info("Created todo %s", todo.id)
        return todo

    # ---------- UPDATE ----------

    def update(self, todo: Todo, **changes) -> Todo:
        with self._lock:
            for key, value in changes.items():
                setattr(todo, key, value)
        logger.info("Updated todo %s (%s)", todo.id, ", ".join(sorted(changes)))
        return todo

    # ---------- DELETE ----------

    def delete(self, todo: Todo) -> None:
        with self._lock:
            self._todos = [t for t in self._todos if t.id != todo.id]
        logger.info("Deleted todo %s", todo.id)
