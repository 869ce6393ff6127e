from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.schemas import MessageResponse
from src.api.routes import router
from src.core.config import get_settings
from src.core.constants import Messages

import logging

# Basic console logging configuration
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-7s  %(name)-20s │ %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
# httpx logs request URLs at INFO and the Gemini URL carries the API key
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    settings = get_settings()

    logger.info(
        "Starting | env=%s | model=%s | gemini=%s | api_key=%s",
        settings.ENVIRONMENT,
        settings.GEMINI_MODEL.value,
        settings.GEMINI_BASE_URL,
        "set" if settings.has_api_key else "MISSING",
    )

    try:
        yield
    finally:
        logger.info("Shutting down")


# Create app with conditional docs
settings = get_settings()

app = FastAPI(
    title="K Solver API",
    description="Forwards math problems to Gemini and returns LaTeX solutions",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "client_ip": request.client.host if request.client else "unknown",
        }
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=MessageResponse(message=Messages.INTERNAL_ERROR).model_dump(),
    )


@app.get("/health", include_in_schema=False)
async def health_check():
    return {"status": "healthy"}
