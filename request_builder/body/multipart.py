"""multipart/form-data body encoding, with nested multipart/mixed for multi-file fields."""

import mimetypes
from collections.abc import Callable

from beartype import beartype

from request_builder.core.settings import settings as st
from request_builder.models.core import Boundary, FileParams, Params

CRLF = b"\r\n"

ContentTypeLookup = Callable[[bytes], bytes]

COMPRESSED_MIME_TYPES = {
    "gzip": "application/gzip",
    "bzip2": "application/x-bzip2",
    "xz": "application/x-xz",
    "compress": "application/x-compress",
    "br": "application/x-brotli",
}


def guess_content_type(filename: bytes) -> bytes:
    """Resolve a MIME type from the filename extension.

    A compression suffix wins over the type of the file inside it, so
    ``notes.txt.gz`` is ``application/gzip``.
    """
    mime, encoding = mimetypes.guess_type(filename.decode("utf-8", errors="replace"), strict=False)
    if encoding is not None:
        mime = COMPRESSED_MIME_TYPES.get(encoding)
    return (mime or st.DEFAULT_MIME_TYPE).encode("ascii")


def encode_param_part(boundary: Boundary, name: bytes, value: bytes) -> bytes:
    return b"".join([
        b"--", boundary, CRLF,
        b'Content-Disposition: form-data; name="', name, b'"', CRLF,
        CRLF,
        value, CRLF,
    ])


def encode_file_part(boundary: Boundary, name: bytes, filename: bytes, content: bytes, mime: bytes) -> bytes:
    return b"".join([
        b"--", boundary, CRLF,
        b'Content-Disposition: form-data; name="', name, b'"; filename="', filename, b'"', CRLF,
        b"Content-Type: ", mime, CRLF,
        CRLF,
        content, CRLF,
    ])


def encode_mixed_files(
    boundary: Boundary,
    file_boundary: Boundary,
    name: bytes,
    files: list[tuple[bytes, bytes]],
    content_type_for: ContentTypeLookup,
) -> bytes:
    """Encode several files under one field as a nested multipart/mixed part."""
    # Inner parts carry the bare field name, without the form-data prefix
    inner = b"".join(
        b"".join([
            b"--", file_boundary, CRLF,
            b"Content-Disposition: ", name, b'; filename="', filename, b'"', CRLF,
            b"Content-Type: ", content_type_for(filename), CRLF,
            CRLF,
            content, CRLF,
        ])
        for filename, content in files
    )
    return b"".join([
        b"--", boundary, CRLF,
        b'Content-Disposition: form-data; name="', name, b'"', CRLF,
        b"Content-Type: multipart/mixed; boundary=", file_boundary, CRLF,
        CRLF,
        inner,
        b"--", file_boundary, b"--", CRLF,
    ])


@beartype
def encode_multipart(
    boundary: Boundary,
    file_boundary: Boundary,
    params: Params,
    file_params: FileParams,
    content_type_for: ContentTypeLookup = guess_content_type,
) -> bytes:
    """Build a complete multipart/form-data body.

    Parameter parts come first, one per value, then file parts, then the
    closing ``--{boundary}--`` marker. A field holding exactly one file is a
    plain file part; any other count is wrapped in multipart/mixed using
    ``file_boundary``.
    """
    chunks: list[bytes] = [
        encode_param_part(boundary, name, value)
        for name, values in params.items()
        for value in values
    ]

    for name, files in file_params.items():
        match files:
            case [(filename, content)]:
                chunks.append(encode_file_part(boundary, name, filename, content, content_type_for(filename)))
            case _:
                chunks.append(encode_mixed_files(boundary, file_boundary, name, files, content_type_for))

    chunks.append(b"--" + boundary + b"--")
    return b"".join(chunks)
