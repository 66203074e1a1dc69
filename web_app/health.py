"""Health check route shared by both services."""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get("/health", summary="Health check")
async def health_check(request: Request):
    """Report whether the store answers PING."""
    service = request.app.state.service

    health = await service.health_check()
    label = "healthy" if health["overall"] else "unhealthy"

    return JSONResponse(
        {
            "status": label,
            "store": "healthy" if health["store"] else "unhealthy",
        },
        status_code=status.HTTP_200_OK if health["overall"] else status.HTTP_503_SERVICE_UNAVAILABLE,
    )
