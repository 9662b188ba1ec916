"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fairwayfinder.api.routes import golf_courses, health, tee_times
from fairwayfinder.config import settings
from fairwayfinder.database import AsyncSessionLocal, engine
from fairwayfinder.services.course_catalog import SqlCourseCatalog
from fairwayfinder.services.dispatcher import TeeTimeDispatcher
from fairwayfinder.tasks.job_store import JobStore
from fairwayfinder.tasks.scrape_job import ScrapeJobRunner

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: wire the engine components onto the app state
    catalog = SqlCourseCatalog(AsyncSessionLocal)
    dispatcher = TeeTimeDispatcher(catalog)
    runner = ScrapeJobRunner(dispatcher, JobStore())

    app.state.catalog = catalog
    app.state.dispatcher = dispatcher
    app.state.job_runner = runner
    logger.info("Tee-time engine ready")

    yield

    # Shutdown: let in-flight scrape jobs finish before closing the pool
    if runner.pending_count:
        logger.info(f"Waiting for {runner.pending_count} scrape jobs to finish")
    await runner.drain()
    await engine.dispose()
    logger.info("Tee-time engine shut down")


# Create FastAPI app
app = FastAPI(
    title="FairwayFinder API",
    description="Available tee times from golf course booking platforms",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(golf_courses.router, prefix="/api", tags=["golf-courses"])
app.include_router(tee_times.router, prefix="/api", tags=["tee-times"])


if __name__ == "__main__":
    uvicorn.run("fairwayfinder.main:app", host=settings.api_host, port=settings.api_port)
