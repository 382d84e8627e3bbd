from fastapi import APIRouter

from contact_api.core.config import get_settings

router = APIRouter()


@router.get("/health")
def health_check():
    """
    Health check endpoint.

    Reports whether the required settings are present, never their values.
    """
    settings = get_settings()
    return {
        "status": "ok",
        "env_vars": {
            "mongodb_url": bool(settings.mongodb_url or settings.mongo_uri),
            "email_user": bool(settings.email_user),
        },
    }
