"""
➡️ But : Appeler l'API todos depuis Python (client HTTP).

TodoApiClient encapsule un httpx.Client :

chaque méthode = une route de l'API,

toute erreur réseau ou réponse non-2xx devient une TodoApiError.

Le httpx.Client peut être injecté : un vrai serveur (base_url=http://...)
ou directement l'application ASGI via fastapi.testclient.TestClient.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional

import httpx
from pydantic import AliasChoices, BaseModel, Field, ValidationError

from todo_app.core.config import settings

logger = logging.getLogger(__name__)

TODOS_PATH = "/api/todos"


class TodoItem(BaseModel):
    """Vue client d'un todo (tolérante : seuls id et completed sont indispensables)."""

    id: int
    title: str = ""
    completed: bool = False
    created_at: Optional[datetime] = Field(
        None, validation_alias=AliasChoices("createdAt", "created_at")
    )


class TodoApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TodoApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        http: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ):
        self._owns_http = http is None
        self.http = http or httpx.Client(
            base_url=base_url or settings.API_URL,
            timeout=timeout if timeout is not None else settings.CLIENT_TIMEOUT,
        )

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "TodoApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -------- transport --------

    def _request(self, method: str, url: str, **kwargs) -> Any:
        try:
            response = self.http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TodoApiError(f"Network error: {exc}") from exc

        if response.is_error:
            raise TodoApiError(self._error_message(response), status_code=response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            raise TodoApiError("Invalid JSON response", status_code=response.status_code) from exc

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return f"HTTP {response.status_code}"

    @staticmethod
    def _to_item(data: Any) -> TodoItem:
        try:
            return TodoItem.model_validate(data)
        except ValidationError as exc:
            raise TodoApiError(f"Invalid response: {exc.error_count()} invalid field(s) in todo") from exc

    # -------- routes --------

    def health(self) -> dict:
        return self._request("GET", "/health")

    def list_todos(self) -> List[TodoItem]:
        data = self._request("GET", TODOS_PATH)
        if not isinstance(data, list):
            raise TodoApiError("Expected a list of todos")
        return [self._to_item(item) for item in data]

    def create_todo(self, title: str) -> TodoItem:
        return self._to_item(self._request("POST", TODOS_PATH, json={"title": title}))

    def update_todo(self, todo_id: int, title: Optional[str] = None) -> TodoItem:
        body = {} if title is None else {"title": title}
        return self._to_item(self._request("PUT", f"{TODOS_PATH}/{todo_id}", json=body))

    def toggle_todo(self, todo_id: int) -> TodoItem:
        return self._to_item(self._request("PATCH", f"{TODOS_PATH}/{todo_id}/toggle"))

    def delete_todo(self, todo_id: int) -> dict:
        return self._request("DELETE", f"{TODOS_PATH}/{todo_id}")
