# File: users_api/schemas/user.py

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class UserPayload(BaseModel):
    """
    Fields accepted on create and update.

    Every field is optional here: a missing value reaches the store as NULL
    and is rejected by the column constraint there.
    """

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None

    @field_validator("name", "email", "address", mode="before")
    @classmethod
    def scalars_as_text(cls, v):
        # Stored in TEXT columns either way
        if isinstance(v, (bool, int, float)):
            return str(v)
        return v


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    address: str

    model_config = ConfigDict(from_attributes=True)


class UserCreated(BaseModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None


class UserEnvelope(BaseModel):
    user: UserRead


class UserList(BaseModel):
    users: List[UserRead]


class Message(BaseModel):
    message: str


class ErrorBody(BaseModel):
    error: str
