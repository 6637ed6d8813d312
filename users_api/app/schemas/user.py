"""
Pydantic models for user data.

``UserCreate`` and ``UserUpdate`` validate request bodies; ``UserRead``
is both the record stored in the backing file and the response body.
Validation is by presence and type, never by truthiness: ``age: 0`` is
a valid age, an empty username is not.  Unknown keys are ignored.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr


class UserCreate(BaseModel):
    """Schema for creating a user.  All three fields are required."""

    username: StrictStr = Field(..., min_length=1, examples=["testuser"])
    age: StrictInt = Field(..., ge=0, examples=[30])
    hobbies: List[StrictStr] = Field(..., examples=[["reading", "gaming"]])


class UserUpdate(BaseModel):
    """Schema for a partial update.

    Every field is optional.  A field is applied only when it appears in
    the body with a non‑null value; each field is checked on its own.
    """

    username: Optional[StrictStr] = Field(None, min_length=1, examples=["updateduser"])
    age: Optional[StrictInt] = Field(None, ge=0, examples=[35])
    hobbies: Optional[List[StrictStr]] = Field(None, examples=[["traveling"]])

    def changes(self) -> dict:
        """Return the fields supplied by the client, skipping explicit nulls."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str = Field(..., examples=["0b6f1c7e-3c43-4c36-9a3e-2f4a5d4b7f10"])
    username: str
    age: int
    hobbies: List[str]
