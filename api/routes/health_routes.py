"""
Unauthenticated liveness and configuration endpoints.
"""

from fastapi import APIRouter, Depends

from api.config import Settings, get_repository, get_settings
from api.storage import Repository
from api.utils.common import iso_now

API_VERSION = "1.0.0"

health_routes = APIRouter()


@health_routes.get("/health")
def health(settings: Settings = Depends(get_settings)) -> dict:
    return {
        "status": "OK",
        "message": "ApeX Server is running",
        "timestamp": iso_now(),
        "llm": {
            "provider": settings.llm_provider,
            "configured": settings.gemini_configured if settings.llm_provider == "gemini" else True,
        },
    }


@health_routes.get("/api")
def api_info() -> dict:
    return {
        "message": "ApeX API Server",
        "version": API_VERSION,
        "endpoints": ["/health", "/api/auth", "/api/courses", "/api/generate-course"],
    }


@health_routes.get("/api/ping")
def ping() -> dict:
    return {"message": "pong", "timestamp": iso_now()}


@health_routes.get("/api/status")
def api_status(
    settings: Settings = Depends(get_settings),
    repo: Repository = Depends(get_repository),
) -> dict:
    configured = settings.gemini_configured if settings.llm_provider == "gemini" else True
    return {
        "server": "running",
        "environment": settings.node_env,
        "llm": {
            "provider": settings.llm_provider,
            "models": settings.model_names,
            "configured": configured,
            "status": "ready" if configured else "needs_api_key",
            "message": (
                "Course generation is configured and ready"
                if configured
                else "Add GEMINI_API_KEY to .env; courses are served from the built-in library until then"
            ),
        },
        "data": repo.stats(),
        "endpoints": {
            "courses": "/api/courses",
            "generateCourse": "/api/generate-course",
            "health": "/health",
        },
    }
