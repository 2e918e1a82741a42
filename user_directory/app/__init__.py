"""
Application package initializer.

The API is split into ``core`` (settings, logging), ``schemas``
(request and response models), ``services`` (the user store) and
``api`` (routers and handlers).
"""

from .main import app, create_app  # noqa: F401
