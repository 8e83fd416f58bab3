"""
➡️ But : assembler toutes les pièces du puzzle.

create_app() crée l’instance FastAPI et configure :

CORS (autorisations de qui peut appeler ces API)

titre, version, tags

schéma OpenAPI personnalisé

handlers d'erreurs (400 / 404 / 500 au format {"error": ...})

le store en mémoire, attaché à app.state (injectable, un par application)

Inclut les routers (/health, /api/todos).

🔹 Avantages :

Centralise la configuration du serveur HTTP.

Point unique d’exécution : uvicorn todo_app.main:app --reload
ou python -m todo_app.main.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_app.api.routers import health, todos
from todo_app.core.config import settings
from todo_app.core.errors import install_exception_handlers
from todo_app.core.logging import configure_logging
from todo_app.core.openapi import custom_openapi
from todo_app.domain.repositories import TodoRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s (%s)", settings.APP_NAME, settings.ENV)
    yield
    logger.info("Shutting down %s, %d todo(s) dropped",
                settings.APP_NAME, len(app.state.todo_repository.list()))


def create_app(repository: Optional[TodoRepository] = None) -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        openapi_tags=[
            {"name": "todos", "description": "Opérations sur les todos"},
            {"name": "health", "description": "Sonde de vie"},
        ],
        lifespan=lifespan,
    )

    app.state.todo_repository = repository if repository is not None else TodoRepository()

    # Handlers d'erreurs d'abord : leur middleware reste sous CORS
    install_exception_handlers(app)

    # CORS (ajustez selon vos besoins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS, allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )

    # Routers
    app.include_router(health.router)
    app.include_router(todos.router, prefix="/api")

    # Génération du schéma OpenAPI custom
    app.openapi = lambda: custom_openapi(app)
    return app


configure_logging()
app = create_app()


def run() -> None:
    try:
        uvicorn.run(
            "todo_app.main:app",
            host=settings.HOST,
            port=settings.PORT,
            reload=(settings.ENV == "dev"),
            log_level=settings.LOG_LEVEL.lower(),
        )
    except (OSError, SystemExit) as exc:
        logger.error("Server failed to start on %s:%s: %s", settings.HOST, settings.PORT, exc)
        raise


if __name__ == "__main__":
    run() # http://localhost:3001
