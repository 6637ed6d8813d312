"""
User endpoints.

Route table for the user collection:

* ``GET    /api/users``       – list all users
* ``POST   /api/users``       – create a user
* ``GET    /api/users/{id}``  – fetch one user
* ``PUT    /api/users/{id}``  – partially update a user
* ``DELETE /api/users/{id}``  – delete a user

The ``{id}`` segment takes everything after ``/api/users/`` and is
checked by :func:`valid_user_id` before anything else happens, so a
malformed ID yields 400 for every method without touching storage.
Request bodies are read as raw JSON and validated against the schemas
here; a body that is not JSON at all falls through to the generic 500
handler.
"""

import json
import re
from typing import Any, List

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError

from users_api.app.core.errors import invalid_input, invalid_user_id, method_not_allowed, user_not_found
from users_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from users_api.app.services.user_service import UserService

router = APIRouter()

# Canonical UUID text form (versions 1-5) or the nil UUID.
UUID_RE = re.compile(
    r"(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
    r"|00000000-0000-0000-0000-000000000000)",
    re.IGNORECASE,
)


def valid_user_id(user_id: str) -> str:
    """Path dependency rejecting empty or non‑UUID identifiers."""
    if not user_id or not UUID_RE.fullmatch(user_id):
        raise invalid_user_id()
    return user_id


async def read_json_body(request: Request) -> Any:
    # Malformed JSON propagates and is reported as 500.
    return json.loads(await request.body())


@router.get("", response_model=List[UserRead])
async def list_users() -> List[UserRead]:
    """Return all users, possibly an empty list."""
    return await UserService.list_users()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(request: Request) -> UserRead:
    """Create a user from ``{username, age, hobbies}``.

    All three fields are required; a missing or wrongly typed field
    yields 400 ``Invalid input``.
    """
    payload = await read_json_body(request)
    try:
        data = UserCreate.model_validate(payload)
    except ValidationError:
        raise invalid_input()
    return await UserService.create_user(data)


@router.get("/{user_id:path}", response_model=UserRead)
async def get_user(user_id: str = Depends(valid_user_id)) -> UserRead:
    """Retrieve a single user by ID."""
    user = await UserService.get_user(user_id)
    if user is None:
        raise user_not_found()
    return user


@router.put("/{user_id:path}", response_model=UserRead)
async def update_user(request: Request, user_id: str = Depends(valid_user_id)) -> UserRead:
    """Update any of ``username``, ``age`` and ``hobbies``.

    The body must carry at least one of them; otherwise 400 is returned
    before the user is looked up.  Omitted fields keep their values.
    """
    payload = await read_json_body(request)
    try:
        data = UserUpdate.model_validate(payload)
    except ValidationError:
        raise invalid_input()
    if not data.changes():
        raise invalid_input()
    user = await UserService.update_user(user_id, data)
    if user is None:
        raise user_not_found()
    return user


@router.delete("/{user_id:path}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str = Depends(valid_user_id)) -> Response:
    """Delete a user by ID.  Answers 204 with an empty body."""
    deleted = await UserService.delete_user(user_id)
    if not deleted:
        raise user_not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def user_method_not_allowed(request: Request) -> Response:
    valid_user_id(request.path_params["user_id"])
    raise method_not_allowed()


# Plain route without a method list: it matches every method the routes
# above do not handle, so the ID is checked before the 405.
router.add_route("/{user_id:path}", user_method_not_allowed, include_in_schema=False)
