"""
Top‑level router.

Aggregates the domain routers.  When new endpoints are added, include
their routers here.
"""

from fastapi import APIRouter

from .endpoints import root, users

router = APIRouter()

router.include_router(root.router, tags=["root"])
router.include_router(users.router, prefix="/users", tags=["users"])
