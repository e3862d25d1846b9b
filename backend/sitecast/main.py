"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sitecast.api.routes import audio, batch, content, scrape, segments
from sitecast.config import get_settings
from sitecast.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    configure_logging(settings)
    logger.info(f"Starting {settings.app_name} ({settings.environment}, provider={settings.llm_provider})")
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Generate SEO copy and accessible audio podcasts from organization websites",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests as 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]


# Include routers
app.include_router(content.router, prefix="/api", tags=["content"])
app.include_router(audio.router, prefix="/api", tags=["audio"])
app.include_router(scrape.router, prefix="/api", tags=["scrape"])
app.include_router(batch.router, prefix="/api", tags=["batch"])
app.include_router(segments.router, prefix="/api", tags=["segments"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs",
    }
