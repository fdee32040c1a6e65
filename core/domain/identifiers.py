from __future__ import annotations

from uuid import uuid4


def generate_id() -> str:
    """Row identifiers are UUID4 strings, matching the row store's primary keys."""
    return str(uuid4())


__all__ = ["generate_id"]
