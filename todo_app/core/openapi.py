"""Schéma OpenAPI : description des conventions de l'API todos (format des erreurs, dates)."""

from fastapi.openapi.utils import get_openapi

API_DESCRIPTION = """\
Liste de todos gardée en mémoire : tout est perdu au redémarrage.

### Conventions
- `createdAt` : date ISO-8601 en UTC, fixée à la création.
- Erreurs : toujours `{"error": "..."}`.
- 400 : titre manquant, vide ou mal typé ; 404 : todo inconnu (id non entier compris).
"""


def custom_openapi(app):
    # schéma calculé une fois puis mis en cache sur l'app
    if not app.openapi_schema:
        app.openapi_schema = get_openapi(
            title=app.title,
            version=app.version,
            description=API_DESCRIPTION,
            routes=app.routes,
            tags=app.openapi_tags,
        )
    return app.openapi_schema
