import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from loguru import logger

from ironplan.api.dashboard.dashboard import router as dashboard_router
from ironplan.api.onboarding.onboarding import router as onboarding_router
from ironplan.config.settings import settings
from ironplan.core.logger import setup_logger
from ironplan.db.session import init_db
from ironplan.workouts.routes import router as workouts_router

setup_logger(level=settings.log_level, log_file=settings.log_file)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Create database tables on startup.

    Note: FastAPI requires async for lifespan context manager,
    even if no await operations are used.
    """
    init_db()
    await asyncio.sleep(0)
    yield
    logger.info("Ironplan API shutting down")


app = FastAPI(title="Ironplan", lifespan=lifespan)

app.include_router(onboarding_router)
app.include_router(workouts_router)
app.include_router(dashboard_router)

logger.info("FastAPI application initialized")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests."""
    logger.debug(f"Request: {request.method} {request.url.path}")
    response = await call_next(request)
    logger.debug(f"Response: {response.status_code} for {request.method} {request.url.path}")
    return response
