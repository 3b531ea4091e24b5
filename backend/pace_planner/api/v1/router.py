"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from pace_planner.api.v1.routes import pacing

api_router = APIRouter()

api_router.include_router(pacing.router, prefix="/pacing", tags=["Pacing"])
