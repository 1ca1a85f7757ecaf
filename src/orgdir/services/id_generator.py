"""Prefixed ID generation utility."""

import uuid

ORGANIZATION_PREFIX = "org_"
USER_PREFIX = "usr_"


def generate_id(prefix: str) -> str:
    """Generate a prefixed, globally unique opaque ID.

    Args:
        prefix: The prefix (e.g., "org_", "usr_").

    Returns:
        A string like "org_1f0c6d1e9a7b4c2d8e3f5a6b7c8d9e0f".
    """
    return f"{prefix}{uuid.uuid4().hex}"
