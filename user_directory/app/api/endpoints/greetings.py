"""
Greeting endpoints.

Neither route touches the user store.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def hello_world() -> str:
    """Return the fixed root greeting."""
    return "Hello, world!"


@router.get("/greet/{name}", response_class=PlainTextResponse)
async def greet_person(name: str) -> str:
    """Greet ``name``; the path segment is echoed verbatim."""
    return f"Hello, {name}!"
