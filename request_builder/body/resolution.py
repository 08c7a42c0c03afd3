"""Pick and run the body encoding for a finished draft."""

import secrets
from typing import NamedTuple

from request_builder.body.boundary import new_boundary
from request_builder.body.multipart import encode_multipart
from request_builder.body.query import encode_query
from request_builder.core.logger import LogIcon, logger
from request_builder.models.core import BodyKind, Boundary, ContentType, Method, RandomSource
from request_builder.models.request import Draft


class ResolvedBody(NamedTuple):
    """Encoded body plus the metadata the assembler needs."""

    body: bytes
    content_length: int | None
    boundary: Boundary | None
    kind: BodyKind


def resolve_body(draft: Draft, random_source: RandomSource = secrets.token_bytes) -> ResolvedBody:
    """Resolve (method, content type) to a body encoding; the first matching branch wins.

    Combinations without an encoding resolve to an empty body with no
    content length. Whatever params, files or raw body they carried are
    dropped from the body, never rejected.
    """
    match draft.method, draft.content_type:
        case Method.POST, ContentType.URLENCODED:
            body = encode_query(draft.params)
            resolved = ResolvedBody(body, len(body), None, BodyKind.URLENCODED)

        case Method.POST, ContentType.MULTIPART:
            boundary = new_boundary(random_source)
            file_boundary = new_boundary(random_source)
            body = encode_multipart(boundary, file_boundary, draft.params, draft.file_params)
            resolved = ResolvedBody(body, len(body), boundary, BodyKind.MULTIPART)

        case Method.PUT, _:
            # No body set is distinct from an empty body
            if draft.body is None:
                resolved = ResolvedBody(b"", None, None, BodyKind.EMPTY)
            else:
                resolved = ResolvedBody(draft.body, len(draft.body), None, BodyKind.RAW)

        case _:
            resolved = ResolvedBody(b"", None, None, BodyKind.EMPTY)

    _warn_discarded(draft, resolved.kind)
    logger.debug(
        "Resolved request body",
        icon=LogIcon.ENCODER,
        method=str(draft.method),
        content_type=str(draft.content_type),
        kind=resolved.kind.value,
        content_length=resolved.content_length,
    )
    return resolved


def _warn_discarded(draft: Draft, kind: BodyKind) -> None:
    """Log configuration that the chosen encoding leaves out of the body."""
    if draft.body is not None and kind is not BodyKind.RAW:
        logger.warning(
            "Raw body discarded",
            icon=LogIcon.DISCARD,
            method=str(draft.method),
            size=len(draft.body),
        )
    if draft.file_params and kind is not BodyKind.MULTIPART:
        logger.warning(
            "File params discarded",
            icon=LogIcon.DISCARD,
            method=str(draft.method),
            content_type=str(draft.content_type),
            fields=len(draft.file_params),
        )
