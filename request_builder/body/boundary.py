"""Random boundary tokens for multipart bodies."""

import secrets

from request_builder.core.logger import LogIcon, logger
from request_builder.models.core import Boundary, RandomSource

BOUNDARY_PREFIX = b"snap-boundary-"
BOUNDARY_RANDOM_BYTES = 10
BOUNDARY_LENGTH = len(BOUNDARY_PREFIX) + 2 * BOUNDARY_RANDOM_BYTES


class BoundaryError(Exception):
    """Raised when the random source cannot produce a boundary."""


def new_boundary(random_source: RandomSource = secrets.token_bytes) -> Boundary:
    """Draw random bytes and hex-encode them behind the fixed prefix."""
    try:
        raw = random_source(BOUNDARY_RANDOM_BYTES)
    except Exception as ex:
        raise BoundaryError(f"Random source failed: {ex}") from ex

    if not isinstance(raw, (bytes, bytearray)) or len(raw) != BOUNDARY_RANDOM_BYTES:
        raise BoundaryError(f"Random source must return {BOUNDARY_RANDOM_BYTES} bytes, got {raw!r}")

    boundary = BOUNDARY_PREFIX + bytes(raw).hex().encode("ascii")
    logger.debug("Generated multipart boundary", icon=LogIcon.RANDOM, boundary=boundary)
    return boundary
