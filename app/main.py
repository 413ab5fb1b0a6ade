"""
Main FastAPI application for the paywall origin simulator.
Serves the content origin, the paywall decision origin, health and metrics.
"""
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.middleware import RequestLoggingMiddleware
from app.api.responses import not_found
from app.api.routes import articles, health, paywall
from app.core.config import settings
from app.core.logging import configure_logging
from app.utils.metrics import router as metrics_router


configure_logging()

app = FastAPI(
    title=settings.app_title,
    description="Content origin and paywall decision origin behind an edge layer",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
)

app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(StarletteHTTPException)
async def plain_not_found(request: Request, exc: StarletteHTTPException):
    """Unknown paths (and unknown methods on known ones) answer a plain-text 404."""
    if exc.status_code in (404, 405):
        return not_found()
    return await http_exception_handler(request, exc)


# Routers
app.include_router(health.router, tags=["health"])
app.include_router(articles.router)
app.include_router(paywall.router)
app.include_router(metrics_router)
