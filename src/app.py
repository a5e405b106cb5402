"""Smart Logistics FastAPI application.

Multi-domain web server: shipping (orders and tracking), impact analysis
and customer notifications.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from uuid import uuid4

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.api import register_exception_handlers
from shared.config import get_settings
from shared.logging import add_context, clear_context, configure_logging

configure_logging()
logger = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Smart Logistics API",
    description="Autonomous logistics decision engine: orders, tracking, impact analysis and notifications",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Bind a request id to every log line emitted while handling the request."""
    request_id = request.headers.get("X-Request-ID") or uuid4().hex
    add_context(request_id=request_id, path=request.url.path, method=request.method)
    try:
        response = await call_next(request)
    finally:
        clear_context()
    response.headers["X-Request-ID"] = request_id
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from impact.api.routes import router as impact_router  # noqa: E402
from notifications.api.routes import router as notifications_router  # noqa: E402
from shipping.api.routes import router as shipping_router  # noqa: E402

app.include_router(shipping_router)
app.include_router(impact_router)
app.include_router(notifications_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    settings = get_settings()
    return JSONResponse(
        content={
            "status": "OK",
            "environment": settings.APP_ENV,
            "adapters": {
                "storage": settings.STORAGE_BACKEND,
                "signals": settings.SIGNAL_SOURCE,
            },
        }
    )
