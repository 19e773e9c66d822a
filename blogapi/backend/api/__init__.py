"""
API Router.

Aggregates all endpoint routers under /api.
"""

from fastapi import APIRouter

from blogapi.backend.api.endpoints import blogs

router = APIRouter()

# Blog endpoints
router.include_router(blogs.router, prefix="/blogs", tags=["blogs"])
