"""
User endpoints.

Add, list and delete directory entries.  The handlers are thin: every
state change goes through :class:`UserStore`, and the only business
error, deleting an unknown id, is turned into a 404 response here
rather than raised.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse, PlainTextResponse

from user_directory.app.api.deps import get_user_store
from user_directory.app.schemas.user import ErrorResponse, UserCreate, UserRead
from user_directory.app.services.user_store import UserStore

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("", response_model=UserRead, status_code=status.HTTP_200_OK)
async def add_user(
    payload: UserCreate,
    store: UserStore = Depends(get_user_store),
) -> UserRead:
    """Add a user and return it with its server-assigned id.

    An ``id`` in the request body is ignored; ``UserCreate`` does not
    declare it, so it never reaches the store.
    """
    user = store.create(payload.name, payload.age)
    return UserRead.model_validate(user)


@router.get("", response_model=List[UserRead])
async def list_users(store: UserStore = Depends(get_user_store)) -> List[UserRead]:
    """Return every user in creation order."""
    return [UserRead.model_validate(user) for user in store.list_users()]


@router.delete(
    "/{user_id}",
    response_class=PlainTextResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def delete_user(
    user_id: int = Path(..., ge=0),
    store: UserStore = Depends(get_user_store),
):
    """Delete a user by id.

    Responds with a plain-text confirmation, or with a 404 and a JSON
    ``{"error": ...}`` body when no user has that id.
    """
    if store.delete(user_id):
        logger.info("Deleted user %s", user_id)
        return PlainTextResponse(f"User with ID {user_id} successfully deleted.")
    logger.info("Delete requested for unknown user %s", user_id)
    error = ErrorResponse(error=f"User with ID {user_id} not found.")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=error.model_dump())
