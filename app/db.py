# app/db.py
import asyncio
import logging
from urllib.parse import urlparse
from typing import Optional

import motor.motor_asyncio
from beanie import init_beanie

from .config import settings
from .models.user import User
from .models.test import Test
from .models.admin_action import AdminAction

logger = logging.getLogger(__name__)

# Globals (one client + one beanie-init flag per process)
_global_client: Optional[motor.motor_asyncio.AsyncIOMotorClient] = None
_beanie_initialized = False
_beanie_lock = asyncio.Lock()

DEFAULT_DB_NAME = "ielts_admin"


def get_db_name() -> str:
    parsed = urlparse(settings.MONGO_URI)
    return parsed.path.lstrip("/") or DEFAULT_DB_NAME


def _make_client() -> motor.motor_asyncio.AsyncIOMotorClient:
    return motor.motor_asyncio.AsyncIOMotorClient(
        settings.MONGO_URI,
        serverSelectionTimeoutMS=5000,
        connectTimeoutMS=5000,
        tls=settings.MONGO_TLS,
        appname="ielts-test-admin",
        retryWrites=True,
        retryReads=True,
    )


async def get_db_client() -> motor.motor_asyncio.AsyncIOMotorClient:
    """
    Get the process-wide MongoDB client, creating it on first use.
    """
    global _global_client

    if _global_client is None:
        _global_client = _make_client()
        await _global_client.admin.command("ping")
        logger.info("New DB connection established")

    return _global_client


async def get_database() -> motor.motor_asyncio.AsyncIOMotorDatabase:
    client = await get_db_client()
    return client.get_database(get_db_name())


async def init_beanie_if_needed() -> None:
    """
    Initialize Beanie only if needed, with proper locking.
    """
    global _beanie_initialized

    # Fast path - already initialized
    if _beanie_initialized:
        return

    async with _beanie_lock:
        # Double-check after acquiring lock
        if _beanie_initialized:
            return

        try:
            db = await get_database()
            await init_beanie(
                database=db,
                document_models=[User, Test, AdminAction],
                allow_index_dropping=False,
            )
            _beanie_initialized = True
            logger.info("Beanie models initialized")
        except Exception as e:
            logger.error(f"Beanie initialization failed: {str(e)}")
            raise


async def init_db() -> None:
    await init_beanie_if_needed()


def close_client() -> None:
    """
    Close and drop the process-global client (useful during cleanup/tests).
    """
    global _global_client, _beanie_initialized
    if _global_client is not None:
        _global_client.close()
    _global_client = None
    _beanie_initialized = False
