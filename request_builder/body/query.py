"""Query string encoding for multi-valued parameter maps."""

from urllib.parse import quote_from_bytes

from beartype import beartype

from request_builder.models.core import Params


@beartype
def url_encode(value: bytes) -> bytes:
    """Percent-encode everything except alphanumerics and ``-_.~``; space becomes ``%20``."""
    return quote_from_bytes(value, safe="").encode("ascii")


@beartype
def encode_query(params: Params) -> bytes:
    """Encode params as ``name=value`` pairs joined by ``&``.

    Pairs follow the map's key order, then each name's value order.
    """
    return b"&".join(
        url_encode(name) + b"=" + url_encode(value)
        for name, values in params.items()
        for value in values
    )
