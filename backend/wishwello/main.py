# main.py
"""
WishWello Pulse API entry point.
Registers every module through its router.

Architecture: vertical modules (router / service / repository) + pure engine.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wishwello.core.config import settings
from wishwello.core.exceptions import StoreError
from wishwello.core.logging import configure_logging

from wishwello.modules.catalog.router   import router as catalog_router
from wishwello.modules.catalog.router   import template_router
from wishwello.modules.feedback.router  import router as feedback_router
from wishwello.modules.analytics.router import router as analytics_router
from wishwello.modules.dashboard.router import router as dashboard_router
from wishwello.modules.pulse.router     import router as pulse_router

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    docs_url="/docs" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(catalog_router)
app.include_router(template_router)
app.include_router(feedback_router)
app.include_router(analytics_router)
app.include_router(dashboard_router)
app.include_router(pulse_router)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error("Store unavailable on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service temporarily unavailable"},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.get("/health")
async def health():
    return {"status": "ok", "version": "1.0.0"}
