"""Draft and final request models."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

import orjson
from pydantic import BaseModel, ConfigDict, Field, field_validator

from request_builder.core.settings import settings as st
from request_builder.models.core import ContentType, FileParams, FrozenParams, Method, Params
from request_builder.models.headers import FrozenHeaders, Headers


@dataclass(slots=True)
class Draft:
    """Mutable request configuration owned by a single builder."""

    method: Method | str = Method.GET
    params: Params = field(default_factory=dict)
    file_params: FileParams = field(default_factory=dict)
    body: bytes | None = None
    headers: Headers = field(default_factory=Headers)
    content_type: ContentType | str = ContentType.URLENCODED
    is_secure: bool = False
    uri: bytes = b""

    def snapshot(self) -> "Draft":
        """Return an independent copy, safe to resolve while the original keeps changing."""
        return Draft(
            method=self.method,
            params={name: list(values) for name, values in self.params.items()},
            file_params={name: list(files) for name, files in self.file_params.items()},
            body=self.body,
            headers=self.headers.copy(),
            content_type=self.content_type,
            is_secure=self.is_secure,
            uri=self.uri,
        )


class Request(BaseModel):
    """Immutable in-memory HTTP request handed to the handler under test."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    method: Method | str
    uri: bytes
    query_string: bytes = b""
    headers: Headers = Field(default_factory=FrozenHeaders)
    body: bytes = b""
    content_length: int | None = None
    params: FrozenParams = Field(default_factory=lambda: MappingProxyType({}))
    is_secure: bool = False

    server_name: str = Field(default_factory=lambda: st.SERVER_NAME)
    server_port: int = Field(default_factory=lambda: st.SERVER_PORT)
    remote_addr: str = Field(default_factory=lambda: st.REMOTE_ADDR)
    remote_port: int = Field(default_factory=lambda: st.REMOTE_PORT)
    local_addr: str = Field(default_factory=lambda: st.LOCAL_ADDR)
    local_port: int = Field(default_factory=lambda: st.LOCAL_PORT)
    local_hostname: str = Field(default_factory=lambda: st.LOCAL_HOSTNAME)
    version: tuple[int, int] = (1, 1)
    cookies: tuple[str, ...] = ()
    context_path: bytes = b""
    path_info: bytes = b""

    @field_validator("headers", mode="after")
    @classmethod
    def freeze_headers(cls, headers: Headers) -> FrozenHeaders:
        return headers if isinstance(headers, FrozenHeaders) else headers.freeze()

    @field_validator("params", mode="after")
    @classmethod
    def freeze_params(cls, params: FrozenParams) -> FrozenParams:
        """Expose params as a read-only mapping of value tuples."""
        return MappingProxyType({name: tuple(values) for name, values in params.items()})

    def header(self, name: str) -> str | None:
        return self.headers.get(name)

    def json(self) -> Any:  # type: ignore[override]
        """Decode the body as JSON."""
        return orjson.loads(self.body)


def get_body(request: Request) -> bytes:
    """Get the request body bytes."""
    return request.body
