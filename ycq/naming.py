"""Type naming and identifier helpers shared across the package."""

from __future__ import annotations

import uuid
from typing import Any


def type_name(obj: Any) -> str:
    """Return the bare name of an object's type, or of the class itself.

    The name is the key under which handlers, factories and stream name
    delegates are registered and looked up.
    """
    if isinstance(obj, type):
        return obj.__name__
    return type(obj).__name__


def new_uuid() -> str:
    """Return a new random (version 4) UUID in canonical string form."""
    return str(uuid.uuid4())