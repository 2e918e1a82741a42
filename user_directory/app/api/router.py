"""
Top-level API router.

Greetings are served from the root; user routes live under ``/users``.
"""

from fastapi import APIRouter

from .endpoints import greetings, users

router = APIRouter()

router.include_router(greetings.router, tags=["greetings"])
router.include_router(users.router, prefix="/users", tags=["users"])
