from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.api.responses import ALL_METHODS


router = APIRouter()


@router.api_route("/health", methods=ALL_METHODS, response_class=PlainTextResponse)
def health() -> PlainTextResponse:
    """Liveness probe - always returns 200 if app is running."""
    return PlainTextResponse("ok\n")
