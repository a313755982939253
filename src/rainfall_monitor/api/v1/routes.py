from fastapi import APIRouter
from rainfall_monitor.api.v1.endpoints import data, hazard

api_router = APIRouter()
api_router.include_router(data.router, prefix="", tags=["data"])
api_router.include_router(hazard.router, prefix="", tags=["hazard"])
