"""
Top-level package for the User Directory API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
