"""
Smart Interview Coach service.

Scores typed and recorded interview answers and compiles readiness reports.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from interview_coach.config.settings import get_settings
from interview_coach.api.router import api_router
from interview_coach.api.dependencies import cleanup

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    mode = "offline" if settings.use_offline_voice_evaluator else settings.completion_model
    logger.info(f"Starting {settings.app_name} {settings.app_version} (voice evaluator: {mode})")
    yield
    await cleanup()
    logger.info("Evaluation clients closed")


app = FastAPI(
    title=settings.app_name,
    description="Interview answer evaluation and readiness reports",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Liveness probe; reports whether a default API key is configured."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "default_credential": bool(settings.openai_api_key),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)
