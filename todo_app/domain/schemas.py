"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

Contient les modèles Pydantic utilisés par FastAPI :

TodoCreate → corps de requête POST

TodoUpdate → corps PUT

TodoOut → réponse de l’API (clé JSON `createdAt`)

Sépare le modèle "de stockage" de ceux "de transfert" (I/O API).

Le titre est volontairement Optional ici : la règle "titre non vide" est
appliquée par le service pour renvoyer un 400 {"error": ...} uniforme.
"""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class TodoCreate(BaseModel):
    title: Optional[str] = Field(None, examples=["Buy milk"])


class TodoUpdate(BaseModel):
    title: Optional[str] = Field(None, examples=["Buy oat milk"])


class TodoOut(BaseModel):
    id: int
    title: str
    completed: bool
    created_at: datetime = Field(
        validation_alias=AliasChoices("createdAt", "created_at"),
        serialization_alias="createdAt",
    )

    model_config = {"from_attributes": True}


class MessageOut(BaseModel):
    message: str


class HealthOut(BaseModel):
    status: str = "ok"


class ErrorOut(BaseModel):
    error: str
