"""Core enums and type aliases shared by the builder and the body encoders."""

from collections.abc import Callable, Mapping
from enum import StrEnum

Params = dict[bytes, list[bytes]]
FrozenParams = Mapping[bytes, tuple[bytes, ...]]
FileParams = dict[bytes, list[tuple[bytes, bytes]]]
Boundary = bytes
RandomSource = Callable[[int], bytes]


class Method(StrEnum):
    """HTTP request methods understood by the builder."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    TRACE = "TRACE"
    OPTIONS = "OPTIONS"
    CONNECT = "CONNECT"
    PATCH = "PATCH"


class ContentType(StrEnum):
    """Content-Type tags that select a body encoding."""

    URLENCODED = "x-www-form-urlencoded"
    MULTIPART = "multipart/form-data"


class BodyKind(StrEnum):
    """Body encoding picked during resolution."""

    EMPTY = "empty"
    URLENCODED = "urlencoded"
    MULTIPART = "multipart"
    RAW = "raw"
