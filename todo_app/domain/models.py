"""
➡️ But : Définir la structure d'un todo (l'objet détenu par le store).

Classe SQLModel sans table : pas de base de données, tout reste en mémoire,
mais le jour où il faut persister, il suffit de passer table=True et de
brancher un repository SQL derrière la même interface.

🔹 Avantages :

Tu manipules des objets Python typés et validés.

Facile à migrer vers SQLite / PostgreSQL plus tard.
"""

from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Todo(SQLModel):
    id: int = Field(gt=0)
    title: str
    completed: bool = False
    created_at: datetime = Field(default_factory=utcnow)
