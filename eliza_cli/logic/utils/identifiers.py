"""Deterministic identifiers."""

import uuid

# Fixed namespace so the same name always maps to the same agent id
ELIZA_NAMESPACE = uuid.UUID("6f9a2b1e-4c3d-5e8f-9a0b-1c2d3e4f5a6b")


def string_to_uuid(value: str) -> str:
    """Map a string to a stable UUID (v5) string."""
    return str(uuid.uuid5(ELIZA_NAMESPACE, value))
