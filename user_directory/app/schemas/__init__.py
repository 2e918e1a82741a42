"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the store records so the API
representation can change without touching the service layer.
"""
