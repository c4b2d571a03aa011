"""API routes for alignkit."""

from fastapi import APIRouter

from alignkit.api.routes.align import router as align_router

# Main API router
api_router = APIRouter()

api_router.include_router(align_router, tags=["Alignment"])

__all__ = ["api_router"]
