"""Identifier generation for new records."""
import uuid


def generate_id() -> uuid.UUID:
    """Return a fresh random identifier for a record about to be inserted."""
    return uuid.uuid4()
