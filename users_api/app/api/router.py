"""
Aggregate router for the API.

Endpoint routers are included here with their resource prefix; the
application mounts the result under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["Users"])
