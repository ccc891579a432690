"""
Tests for file download parsing.
"""

import httpx

from aas_client.utils.file_parser import parse_file_body, parse_parameters, parse_typed_file_body


class TestParseParameters:
    """Tests for header parameter parsing."""

    def test_quoted_values(self):
        """Test quotes are removed and bare names map to None."""
        params = parse_parameters('attachment; fileName="a.pdf"')
        assert params == {"attachment": None, "fileName": "a.pdf"}

    def test_custom_separator(self):
        """Test parameters separated by commas."""
        assert parse_parameters("a=1, b=2", ",") == {"a": "1", "b": "2"}


class TestParseFileBody:
    """Tests for file responses."""

    def test_file_name_from_header(self):
        """Test the fileName parameter is used as path."""
        response = httpx.Response(
            200,
            headers={"Content-Disposition": 'attachment; fileName="manual.pdf"'},
            content=b"%PDF",
        )

        file = parse_file_body(response)

        assert file.path == "manual.pdf"
        assert file.content == b"%PDF"

    def test_missing_header(self):
        """Test files without Content-Disposition are named unknown."""
        file = parse_file_body(httpx.Response(200, content=b"data"))
        assert file.path == "unknown"

    def test_typed_file(self):
        """Test the typed variant reads filename and content type."""
        response = httpx.Response(
            200,
            headers={
                "Content-Disposition": 'attachment; filename="logo.png"',
                "Content-Type": "image/png",
            },
            content=b"\x89PNG",
        )

        file = parse_typed_file_body(response)

        assert file.path == "logo.png"
        assert file.content_type == "image/png"

    def test_typed_file_defaults(self):
        """Test defaults for missing headers."""
        file = parse_typed_file_body(httpx.Response(200, content=b"data"))

        assert file.path == "unknown"
        assert file.content_type == "application/octet-stream"
