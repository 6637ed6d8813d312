"""Users API: CRUD over user records kept in a JSON file.

The FastAPI application is ``users_api.app.main:app``.
"""

__all__ = []
