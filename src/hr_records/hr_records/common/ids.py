from __future__ import annotations

import uuid
from typing import Callable

IdFactory = Callable[[], str]


def new_id() -> str:
    """Random UUID4 hex used for every new record."""
    return uuid.uuid4().hex
