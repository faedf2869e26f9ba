"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter une description détaillée,

documenter les conventions communes (erreurs, dates, codes HTTP).

🔹 Avantages :

La doc est toujours complète et cohérente.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de démonstration FastAPI + SQLModel : CRUD sur les todos.\n\n"
            "### Conventions\n"
            "- Toutes les heures sont en UTC (ISO-8601).\n"
            "- Toute erreur renvoie `{\"message\": \"...\"}`.\n"
            "- 400 requête invalide, 404 todo introuvable, 409 conflit, 500 erreur interne.\n"
            "- PUT et DELETE renvoient 204 sans contenu.\n"
        ),
        routes=app.routes,
        tags=app.openapi_tags,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
