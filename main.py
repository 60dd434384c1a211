from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.controllers.v1.auth.auth import router as auth_router
from app.controllers.v1.project_management.project import router as project_router
from app.database.conn import mongo_client
from app.database.schema import ensure_collections_and_indexes
from app.utils.exceptions import register_exception_handlers
from app.utils.logger_utils import logger
from config import CORS_ORIGINS

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""

    # Startup
    logger.info("Starting up the application...")
    await mongo_client.connect()
    # Ensure DB collections, validators and indexes
    try:
        await ensure_collections_and_indexes()
        logger.info("Ensured DB schema (collections, validators, indexes)")
    except Exception as e:
        logger.warning(f"Failed to ensure DB schema: {e}")

    yield

    # Shutdown
    logger.info("Shutting down the application...")
    if mongo_client.is_connected:
        await mongo_client.close()

# Create FastAPI application
app = FastAPI(title="Portfolio Projects API", lifespan=lifespan)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Routers
app.include_router(auth_router, tags=["Auth"])
app.include_router(project_router, tags=["Project"])
