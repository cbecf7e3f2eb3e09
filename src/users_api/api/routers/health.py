"""Health and readiness endpoints."""

from fastapi import APIRouter, Request

router = APIRouter(tags=["diagnostics"])


@router.get("/health", summary="Liveness probe")
async def health_check(request: Request) -> dict[str, str]:
    """Signal that the API process is running and which storage it uses."""

    settings = request.app.state.settings
    return {
        "status": "ok",
        "service": settings.app_name,
        "backend": request.app.state.user_repository.name,
    }


@router.get("/readiness", summary="Readiness probe")
async def readiness_check() -> dict[str, str]:
    return {"status": "ready"}
