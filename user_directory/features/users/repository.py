"""Load user records from a JSON file.

The file holds a JSON array of user objects. Records are returned sorted
ascending by id, which is the ordering the paginator relies on.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter

from user_directory.features.users.schemas import UserResponse

logger = logging.getLogger(__name__)

_users_adapter = TypeAdapter(list[UserResponse])


def load_users(path: str | Path) -> list[UserResponse]:
    """Read and validate users from ``path``.

    Raises:
        OSError: If the file cannot be read
        pydantic.ValidationError: If the content is not a list of users
        ValueError: If two records share an id
    """
    path = Path(path)
    users = _users_adapter.validate_python(json.loads(path.read_text(encoding="utf-8")))
    users.sort(key=lambda user: user.id)

    ids = [user.id for user in users]
    if len(set(ids)) != len(ids):
        raise ValueError(f"Duplicate user ids in {path}")

    logger.info("Loaded users", extra={"path": str(path), "count": len(users)})
    return users
