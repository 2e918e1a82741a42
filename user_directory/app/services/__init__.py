"""
Service layer abstraction.

The store encapsulates all state changes for the directory.  Route
handlers only translate HTTP requests into calls on it, so the
in-memory structure could be swapped for a database without touching
the API layer.
"""
