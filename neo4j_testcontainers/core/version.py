"""Version literal validation.

Only ``MAJOR[.MINOR[.PATCH]]`` is accepted. Pre-release and build metadata
segments are rejected because the edition suffix (``-enterprise``) is
appended to the tag by this library and must never collide with user text.
"""

import re

from ..exceptions import InvalidVersion


_VERSION_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+){0,2}")


def is_valid_version(literal: str) -> bool:
    """Check whether a literal is a plain MAJOR[.MINOR[.PATCH]] version."""
    return _VERSION_PATTERN.fullmatch(literal) is not None


def validate_version(literal: str) -> str:
    """Return the literal unchanged, or raise InvalidVersion.

    Args:
        literal: Version string such as ``"5"``, ``"5.13"`` or ``"4.4.27"``

    Returns:
        The same literal, without normalization

    Raises:
        InvalidVersion: If the literal has pre-release or build metadata,
            more than three components, or is not numeric
    """
    if not isinstance(literal, str) or not is_valid_version(literal):
        raise InvalidVersion(str(literal))
    return literal
