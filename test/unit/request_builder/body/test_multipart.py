"""Tests for multipart/form-data body encoding."""

import pytest

from request_builder.body.multipart import encode_multipart, guess_content_type

BOUNDARY = b"snap-boundary-aaaaaaaaaaaaaaaaaaaa"
FILE_BOUNDARY = b"snap-boundary-bbbbbbbbbbbbbbbbbbbb"


def fixed_mime(filename: bytes) -> bytes:
    return b"application/x-test"


# -----------------------------------------------------------------------------
# guess_content_type Tests
# -----------------------------------------------------------------------------


class TestGuessContentType:
    """Tests for guess_content_type function."""

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            (b"notes.txt", b"text/plain"),
            (b"photo.png", b"image/png"),
            (b"page.html", b"text/html"),
            (b"notes.txt.gz", b"application/gzip"),
            (b"backup.tar.gz", b"application/gzip"),
            (b"dump.sql.bz2", b"application/x-bzip2"),
            (b"image.raw.xz", b"application/x-xz"),
        ],
    )
    def test_known_extensions(self, filename: bytes, expected: bytes) -> None:
        """Verify common extensions resolve to their MIME type."""
        assert guess_content_type(filename) == expected

    @pytest.mark.parametrize("filename", [b"blob.unknownext", b"README", b""])
    def test_unknown_falls_back(self, filename: bytes) -> None:
        """Verify unknown extensions fall back to octet-stream."""
        assert guess_content_type(filename) == b"application/octet-stream"


# -----------------------------------------------------------------------------
# encode_multipart Tests
# -----------------------------------------------------------------------------


class TestEncodeMultipart:
    """Tests for encode_multipart function."""

    def test_empty_body_is_terminator_only(self) -> None:
        """Verify no params and no files yield only the closing marker."""
        body = encode_multipart(BOUNDARY, FILE_BOUNDARY, {}, {})
        assert body == b"--" + BOUNDARY + b"--"

    def test_single_param(self) -> None:
        """Verify a parameter part layout."""
        body = encode_multipart(BOUNDARY, FILE_BOUNDARY, {b"name": [b"value"]}, {})

        assert body == (
            b"--" + BOUNDARY + b"\r\n"
            b'Content-Disposition: form-data; name="name"\r\n'
            b"\r\n"
            b"value\r\n"
            b"--" + BOUNDARY + b"--"
        )

    def test_multi_valued_param_repeats_part(self) -> None:
        """Verify each value gets its own part under the same name."""
        body = encode_multipart(BOUNDARY, FILE_BOUNDARY, {b"tag": [b"b", b"a"]}, {})

        assert body.count(b'Content-Disposition: form-data; name="tag"\r\n') == 2
        assert body.index(b"\r\nb\r\n") < body.index(b"\r\na\r\n")

    def test_simple_file_part(self) -> None:
        """Verify a field with one file is a plain file part."""
        body = encode_multipart(
            BOUNDARY, FILE_BOUNDARY, {}, {b"photo": [(b"photo.jpg", b"\xff\xd8jpeg")]}, fixed_mime
        )

        assert body == (
            b"--" + BOUNDARY + b"\r\n"
            b'Content-Disposition: form-data; name="photo"; filename="photo.jpg"\r\n'
            b"Content-Type: application/x-test\r\n"
            b"\r\n"
            b"\xff\xd8jpeg\r\n"
            b"--" + BOUNDARY + b"--"
        )
        assert FILE_BOUNDARY not in body

    def test_compressed_file_part_mime(self) -> None:
        """Verify a compressed upload is described by its compression type."""
        body = encode_multipart(BOUNDARY, FILE_BOUNDARY, {}, {b"log": [(b"notes.txt.gz", b"\x1f\x8b")]})

        assert b"Content-Type: application/gzip\r\n" in body
        assert b"text/plain" not in body

    def test_simple_file_uses_extension_mime(self) -> None:
        """Verify the default lookup derives the part Content-Type from the filename."""
        body = encode_multipart(BOUNDARY, FILE_BOUNDARY, {}, {b"doc": [(b"doc.txt", b"hi")]})
        assert b"Content-Type: text/plain\r\n" in body

    def test_compound_file_field(self) -> None:
        """Verify two files under one field are nested in multipart/mixed."""
        body = encode_multipart(
            BOUNDARY,
            FILE_BOUNDARY,
            {},
            {b"files": [(b"a.txt", b"AAA"), (b"b.txt", b"BBB")]},
            fixed_mime,
        )

        assert body == (
            b"--" + BOUNDARY + b"\r\n"
            b'Content-Disposition: form-data; name="files"\r\n'
            b"Content-Type: multipart/mixed; boundary=" + FILE_BOUNDARY + b"\r\n"
            b"\r\n"
            b"--" + FILE_BOUNDARY + b"\r\n"
            b'Content-Disposition: files; filename="a.txt"\r\n'
            b"Content-Type: application/x-test\r\n"
            b"\r\n"
            b"AAA\r\n"
            b"--" + FILE_BOUNDARY + b"\r\n"
            b'Content-Disposition: files; filename="b.txt"\r\n'
            b"Content-Type: application/x-test\r\n"
            b"\r\n"
            b"BBB\r\n"
            b"--" + FILE_BOUNDARY + b"--\r\n"
            b"--" + BOUNDARY + b"--"
        )

    def test_compound_inner_parts_omit_form_data(self) -> None:
        """Verify inner parts carry the bare field name."""
        body = encode_multipart(
            BOUNDARY, FILE_BOUNDARY, {}, {b"f": [(b"1.txt", b"1"), (b"2.txt", b"2"), (b"3.txt", b"3")]}
        )

        assert body.count(b'Content-Disposition: f; filename="') == 3
        assert body.count(b"form-data;") == 1

    def test_params_precede_files(self) -> None:
        """Verify parameter parts come before file parts and the terminator is last."""
        body = encode_multipart(
            BOUNDARY,
            FILE_BOUNDARY,
            {b"title": [b"Holiday"]},
            {b"photo": [(b"p.png", b"PNG")], b"docs": [(b"a.txt", b"A"), (b"b.txt", b"B")]},
        )

        assert body.index(b'name="title"') < body.index(b'name="photo"')
        assert body.index(b'name="title"') < body.index(b'name="docs"')
        assert body.endswith(b"--" + BOUNDARY + b"--")
        assert body.count(b'name="photo"') == 1
        assert body.count(b'name="docs"') == 1

    def test_field_with_no_files_is_empty_mixed_part(self) -> None:
        """Verify an empty file list still emits a multipart/mixed wrapper."""
        body = encode_multipart(BOUNDARY, FILE_BOUNDARY, {}, {b"none": []})

        assert b"Content-Type: multipart/mixed; boundary=" + FILE_BOUNDARY in body
        assert b"--" + FILE_BOUNDARY + b"--\r\n" in body
        assert b"filename=" not in body
