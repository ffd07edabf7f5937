from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
from shipapi.config import settings
from shipapi.services.ship import initialize_ship_store, close_ship_store
from shipapi.routes import health, ships, stat

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the configured ship store for the lifetime of the app"""
    logger.info(f"Starting Ship API with {settings.ship_store} store...")

    try:
        await initialize_ship_store(settings.ship_store)
    except Exception as e:
        logger.error(f"Failed to open {settings.ship_store} ship store: {e}")
        raise

    yield

    logger.info("Shutting down Ship API...")
    try:
        await close_ship_store()
    except Exception as e:
        logger.error(f"Error closing ship store: {e}")


def create_app() -> FastAPI:
    """Create FastAPI application"""
    app = FastAPI(
        title="Ship API",
        description="Ship position and details service",
        version=stat.get_version(),
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(ships.router, tags=["ships"])
    app.include_router(stat.router, tags=["stat"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "shipapi.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info",
    )
