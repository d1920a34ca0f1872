"""
Top‑level API router.

Aggregates the domain routers under a common prefix.  When new
endpoints are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
