from fastapi import APIRouter

from .weekly_data import router as weekly_data_router
from .summary import router as summary_router

# Create main API router
api_router = APIRouter()

# Include all routers
api_router.include_router(weekly_data_router, tags=["Weekly Data"])
api_router.include_router(summary_router, tags=["Summary"])
