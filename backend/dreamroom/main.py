"""
DreamRoom API v1.0

FastAPI application for AI room redesigns.

Features:
- Room photo upload with aspect-ratio detection
- Full-room redesigns in eight design styles
- Wallpaper and flooring reference swatches
- Conversational editing and design advice
- LangSmith tracing for observability
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dreamroom.config import get_settings, setup_langsmith
from dreamroom.models.schemas import HealthResponse
from dreamroom.routes import chat, design, sessions
from dreamroom.core.exceptions import (
    DreamRoomError,
    InvalidImageError,
    SessionBusyError,
    SessionNotFoundError,
)


# Get settings
settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Setup LangSmith tracing
langsmith_enabled = setup_langsmith()

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    **DreamRoom API** - Redesign your space architecturally.

    ## Workflow
    1. Start a session → `POST /api/v1/sessions`
    2. Upload a room photo → `POST /api/v1/sessions/{id}/room`
    3. Pick a style → `POST /api/v1/sessions/{id}/style`
    4. Optionally add wallpaper/floor swatches → `PUT /api/v1/sessions/{id}/materials/{slot}`
    5. Chat to refine → `POST /api/v1/sessions/{id}/chat`

    The room's camera angle, walls, windows and doors are preserved in every result.
    """,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(sessions.router, prefix=settings.api_prefix)
app.include_router(design.router, prefix=settings.api_prefix)
app.include_router(chat.router, prefix=settings.api_prefix)


# ============ Exception Handlers ============

# Most specific class first; anything else in the taxonomy is a server error.
ERROR_STATUS = (
    (InvalidImageError, 400),
    (SessionNotFoundError, 404),
    (SessionBusyError, 409),
)


def status_for(exc: DreamRoomError) -> int:
    for error_class, status_code in ERROR_STATUS:
        if isinstance(exc, error_class):
            return status_code
    return 500


@app.exception_handler(DreamRoomError)
async def dreamroom_error_handler(request: Request, exc: DreamRoomError):
    """Map DreamRoom errors to a JSON body with a stable error code."""
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s -> %d %s", request.method, request.url.path, status_code, exc.error_code)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error_code": exc.error_code},
    )


# ============ Health Check ============

@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    """Root endpoint - health check."""
    return HealthResponse(
        status="ok",
        version=settings.app_version,
        message=f"{settings.app_name} is running. Tracing is {'on' if langsmith_enabled else 'off'}. See /docs.",
    )


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="ok",
        version=settings.app_version
    )


# ============ Run with Uvicorn ============

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "dreamroom.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
