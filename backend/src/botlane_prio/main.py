"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from botlane_prio.config import settings
from botlane_prio.api.routes.champions import router as champions_router
from botlane_prio.api.routes.drafts import router as drafts_router
from botlane_prio.api.routes.recommendations import router as recommendations_router
from botlane_prio.repositories.draft_repository import DraftRepository
from botlane_prio.services.pick_recommendation_engine import PickRecommendationEngine

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: matchup data is loaded once and shared read-only by every request
    if not hasattr(app.state, "engine"):
        app.state.engine = PickRecommendationEngine.from_knowledge_dir(
            settings.resolve_knowledge_dir()
        )
    if not hasattr(app.state, "draft_repository"):
        app.state.draft_repository = DraftRepository(settings.resolve_database_path())
    yield
    # Shutdown: Clean up resources
    app.state.draft_repository.close()


app = FastAPI(
    title="Bot Lane Prio",
    description="Bot lane pick advisor - ADC and support recommendations from matchup data",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "botlane-prio"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Bot Lane Prio API",
        "version": "0.1.0",
        "docs": "/docs",
    }


# Register routers
app.include_router(champions_router)
app.include_router(recommendations_router)
app.include_router(drafts_router)
