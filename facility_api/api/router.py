from fastapi import APIRouter
from facility_api.api.endpoints import seat, electricity, work, aps

api_router = APIRouter()

# Combine all sub-routers into one
api_router.include_router(seat.router)
api_router.include_router(electricity.router)
api_router.include_router(work.router)
api_router.include_router(aps.router)
