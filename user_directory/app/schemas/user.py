"""
Pydantic models for user data.

``UserCreate`` describes the body accepted when adding a user.  Only
``name`` and ``age`` are declared; any other field a client sends,
``id`` included, is dropped during validation because identifiers are
assigned by the server.  Both fields are strict: ``"30"``, ``true`` or
``30.0`` are not an age.
"""

from pydantic import BaseModel, Field, StrictInt, StrictStr


class UserCreate(BaseModel):
    """Schema for adding a user."""

    name: StrictStr = Field(..., examples=["Alice"])
    age: StrictInt = Field(..., ge=0, examples=[30])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int = Field(..., examples=[0])
    name: str
    age: int

    # Allows building the schema straight from a store ``User`` record.
    model_config = {
        "from_attributes": True,
    }


class ErrorResponse(BaseModel):
    """Body returned with 404 responses."""

    error: str
