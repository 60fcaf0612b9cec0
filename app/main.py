import logging
from typing import AsyncIterator
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from .config import settings
from .db import init_db, close_client
from .routers.admin import router as admin_router
from .routers.tests import router as tests_router

logger = logging.getLogger(__name__)


# Lifespan context manager for startup and shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Initializing database connection...")
    try:
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        # Endpoints retry initialization through their auth dependency
        logger.warning(f"Database initialization warning: {str(e)}")

    yield  # App runs here

    close_client()
    logger.info("Database connection closed")


app = FastAPI(
    title="IELTS Test Admin API",
    description="Authoring and delivery API for IELTS tests",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(admin_router)
app.include_router(tests_router)


# Health check endpoints
@app.get("/")
async def root():
    return {"message": "IELTS Test Admin API is running!", "status": "healthy"}


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "ielts-test-admin"}


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
