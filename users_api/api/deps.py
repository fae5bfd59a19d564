# File: users_api/api/deps.py

import re
from json import JSONDecodeError

from fastapi import Request
from pydantic import ValidationError

from users_api.core.errors import MalformedBody, UserNotFound
from users_api.schemas.user import UserPayload
from users_api.services.user_store import UserStore

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

# ASCII digits only; int() would also take "1_0", " 1" and non-ASCII digits
_PLAIN_INT = re.compile(r"-?[0-9]+")
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


def get_store(request: Request) -> UserStore:
    """
    FastAPI dependency returning the store built by ``create_application``.

    Usage in route functions:
        store: UserStore = Depends(get_store)
    """
    return request.app.state.user_store


def get_user_id(user_id: str) -> int:
    """Path ids that are not plain integers in SQLite's range cannot match any row."""
    if not _PLAIN_INT.fullmatch(user_id):
        raise UserNotFound()
    value = int(user_id)
    if not SQLITE_INT_MIN <= value <= SQLITE_INT_MAX:
        raise UserNotFound()
    return value


async def read_user_payload(request: Request) -> UserPayload:
    """
    Decode name, email and address from a JSON or form-encoded body.

    An empty body yields a payload with every field unset.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        data = {key: value for key, value in form.items() if isinstance(value, str)}
    else:
        raw = await request.body()
        if not raw.strip():
            data = {}
        else:
            try:
                data = await request.json()
            except (JSONDecodeError, UnicodeDecodeError) as exc:
                raise MalformedBody(str(exc)) from exc

    if not isinstance(data, dict):
        raise MalformedBody("body must be an object")

    try:
        return UserPayload.model_validate(data)
    except ValidationError as exc:
        raise MalformedBody(str(exc)) from exc
