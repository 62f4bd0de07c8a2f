# app/main.py
"""
FastAPI application entry point.
Includes security middleware, domain error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from app.routers import (
    security_officers, vehicles, drivers, assignments, locations, routes, dashboard, health,
)
from app.database import create_tables, engine
from app.config import settings
from app.utils.errors import FleetError, InvalidInput
from app.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Fleet Tracker API",
    description="GPS tracking of security officers and corporate vehicles, "
                "driver assignments, routes, and supervisor dashboard.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (allow the admin console to call the API) ──────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── API Key Middleware ───────────────────────────────────────────────────────
class APIKeyMiddleware(BaseHTTPMiddleware):
    """
    Optional lightweight API key auth.
    Set API_KEY in .env. Leave empty to disable auth.
    """
    open_paths = {"/api/v1/health", "/docs", "/redoc", "/openapi.json"}

    async def dispatch(self, request: Request, call_next):
        if request.url.path in self.open_paths or not settings.API_KEY:
            return await call_next(request)

        api_key = request.headers.get("X-API-Key") or request.query_params.get("api_key")
        if api_key != settings.API_KEY:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Invalid or missing API key"},
            )
        return await call_next(request)


if settings.API_KEY:
    app.add_middleware(APIKeyMiddleware)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Domain Error Handlers ────────────────────────────────────────────────────
def _error_response(exc: FleetError, detail=None) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder({"error": type(exc).__name__, "detail": detail or exc.detail}),
    )


@app.exception_handler(FleetError)
async def fleet_error_handler(request: Request, exc: FleetError):
    logger.warning(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.detail}")
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"InvalidInput on {request.method} {request.url.path}: {exc.errors()}")
    return _error_response(InvalidInput("Request validation failed"), detail=exc.errors())


# ── Global Exception Handler ─────────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(security_officers.router, prefix="/api/v1", tags=["👮 Security Officers"])
app.include_router(vehicles.router,          prefix="/api/v1", tags=["🚗 Corporate Vehicles"])
app.include_router(drivers.router,           prefix="/api/v1", tags=["🪪 Drivers"])
app.include_router(assignments.router,       prefix="/api/v1", tags=["🔗 Assignments"])
app.include_router(locations.router,         prefix="/api/v1", tags=["📍 Locations"])
app.include_router(routes.router,            prefix="/api/v1", tags=["🛣️  Routes"])
app.include_router(dashboard.router,         prefix="/api/v1", tags=["📊 Dashboard"])
app.include_router(health.router,            prefix="/api/v1", tags=["💚 Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚀 Fleet Tracker backend starting up...")
    create_tables()
    logger.info("✅ Database tables ready")
    logger.info(f"🌐 Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 Fleet Tracker backend shutting down...")
    engine.dispose()
