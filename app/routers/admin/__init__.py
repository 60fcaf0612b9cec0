"""
Admin router module
"""

from fastapi import APIRouter
from .tests import router as tests_router

# Create main admin router
router = APIRouter(prefix="/api/v1/admin", tags=["Admin"])

# Include all sub-routers
router.include_router(tests_router)
