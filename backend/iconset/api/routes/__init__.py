"""API route registrations."""
from fastapi import APIRouter

from iconset.api.routes import icons


api_router = APIRouter()
api_router.include_router(icons.router)

__all__ = ["api_router"]
