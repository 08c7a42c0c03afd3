"""Assemble the final request from a finished draft and its resolved body."""

from request_builder.body.query import encode_query
from request_builder.body.resolution import ResolvedBody
from request_builder.models.core import Boundary, ContentType, Method, Params
from request_builder.models.headers import Headers
from request_builder.models.request import Draft, Request


def request_query_string(method: Method | str, params: Params) -> bytes:
    """Query string exposed on the request; only GET carries one."""
    return encode_query(params) if method == Method.GET else b""


def request_uri(draft: Draft) -> bytes:
    """Draft URI, with the query string folded in for GET requests with params."""
    if draft.method == Method.GET and draft.params:
        return draft.uri + b"?" + encode_query(draft.params)
    return draft.uri


def request_headers(boundary: Boundary | None, draft: Draft) -> Headers:
    """Copy the draft headers, adding the boundary to a multipart Content-Type."""
    headers = draft.headers.copy()
    if boundary is not None and draft.content_type == ContentType.MULTIPART:
        headers.set("Content-Type", f"{ContentType.MULTIPART}; boundary={boundary.decode('ascii')}")
    return headers


def assemble_request(draft: Draft, resolved: ResolvedBody) -> Request:
    return Request(
        method=draft.method,
        uri=request_uri(draft),
        query_string=request_query_string(draft.method, draft.params),
        headers=request_headers(resolved.boundary, draft),
        body=resolved.body,
        content_length=resolved.content_length,
        params=draft.params,
        is_secure=draft.is_secure,
    )
