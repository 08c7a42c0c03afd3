"""Chainable builder for in-memory HTTP requests used to drive handler tests.

Usage::

    request = build_request(lambda rb: rb.get(b"/posts", [(b"ordered", b"1")]).set_header("Accept", "application/json"))

    request = (
        RequestBuilder()
        .post_multipart(b"/picture/upload", [], [(b"photo", (b"photo.jpg", photo_bytes))])
        .build()
    )
"""

import secrets
from collections.abc import Callable, Iterable
from typing import Any

from request_builder.assembler import assemble_request
from request_builder.body.resolution import resolve_body
from request_builder.core.logger import LogIcon, logger
from request_builder.models.core import ContentType, Method, RandomSource
from request_builder.models.request import Draft, Request

ParamPairs = Iterable[tuple[bytes, bytes]]
FilePairs = Iterable[tuple[bytes, tuple[bytes, bytes]]]


class RequestBuilder:
    """Accumulates request configuration in place. Later calls win."""

    def __init__(self) -> None:
        self._draft = Draft()

    @property
    def draft(self) -> Draft:
        return self._draft

    def set_method(self, method: Method | str) -> "RequestBuilder":
        self._draft.method = method
        return self

    def add_param(self, name: bytes, value: bytes) -> "RequestBuilder":
        """Add a value to a parameter without replacing existing ones; newest first."""
        self._draft.params.setdefault(name, []).insert(0, value)
        return self

    def set_params(self, params: ParamPairs) -> "RequestBuilder":
        """Replace all parameters, one value per name."""
        self._draft.params = {name: [value] for name, value in params}
        return self

    def add_file_param(self, name: bytes, filename: bytes, content: bytes) -> "RequestBuilder":
        """Add a file under a field; two or more files make it a multipart/mixed field."""
        self._draft.file_params.setdefault(name, []).insert(0, (filename, content))
        return self

    def set_file_params(self, file_params: FilePairs) -> "RequestBuilder":
        """Replace all file params, one (filename, content) per field."""
        self._draft.file_params = {name: [upload] for name, upload in file_params}
        return self

    def set_request_body(self, body: bytes) -> "RequestBuilder":
        """Set a raw body. Only PUT requests send it; POST bodies are built from params."""
        self._draft.body = body
        return self

    def set_header(self, name: str, value: str) -> "RequestBuilder":
        self._draft.headers.set(name, value)
        return self

    def add_header(self, name: str, value: str) -> "RequestBuilder":
        self._draft.headers.add(name, value)
        return self

    def set_content_type(self, content_type: ContentType | str) -> "RequestBuilder":
        self.set_header("Content-Type", str(content_type))
        self._draft.content_type = content_type
        return self

    def form_url_encoded(self) -> "RequestBuilder":
        """Use x-www-form-urlencoded, the default."""
        return self.set_content_type(ContentType.URLENCODED)

    def multipart_encoded(self) -> "RequestBuilder":
        """Use multipart/form-data, needed to submit files."""
        return self.set_content_type(ContentType.MULTIPART)

    def use_https(self) -> "RequestBuilder":
        self._draft.is_secure = True
        return self

    def set_uri(self, uri: bytes) -> "RequestBuilder":
        self._draft.uri = uri
        return self

    def get(self, uri: bytes, params: ParamPairs) -> "RequestBuilder":
        """GET request with params sent in the query string."""
        return self.form_url_encoded().set_method(Method.GET).set_uri(uri).set_params(params)

    def post_url_encoded(self, uri: bytes, params: ParamPairs) -> "RequestBuilder":
        """POST request with an x-www-form-urlencoded body."""
        return self.form_url_encoded().set_method(Method.POST).set_uri(uri).set_params(params)

    def post_multipart(self, uri: bytes, params: ParamPairs, file_params: FilePairs) -> "RequestBuilder":
        """POST request with a multipart/form-data body holding params and files."""
        return (
            self.multipart_encoded()
            .set_method(Method.POST)
            .set_uri(uri)
            .set_params(params)
            .set_file_params(file_params)
        )

    def put(self, uri: bytes, body: bytes) -> "RequestBuilder":
        """PUT request sending a raw body."""
        return self.set_method(Method.PUT).set_uri(uri).set_request_body(body)

    def build(self, random_source: RandomSource | None = None) -> Request:
        """Resolve a snapshot of the draft into a request; the builder stays usable."""
        draft = self._draft.snapshot()
        resolved = resolve_body(draft, random_source or secrets.token_bytes)
        request = assemble_request(draft, resolved)
        logger.debug(
            "Request built",
            icon=LogIcon.BUILDER,
            method=str(request.method),
            uri=request.uri,
            content_length=request.content_length,
        )
        return request


def build_request(
    configure: Callable[[RequestBuilder], Any],
    *,
    random_source: RandomSource | None = None,
) -> Request:
    """Run configuration steps against a fresh builder and return the built request."""
    builder = RequestBuilder()
    configure(builder)
    return builder.build(random_source)
