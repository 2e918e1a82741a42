"""
FastAPI dependencies shared by the endpoint modules.
"""

from fastapi import Request

from user_directory.app.services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    """Return the store attached to the running application."""
    return request.app.state.user_store
