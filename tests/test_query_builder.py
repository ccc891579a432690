"""
Tests for query modifiers and URI construction.
"""

import pytest
from pydantic import ValidationError

from aas_client.query import (
    DEFAULT_SEARCH_CRITERIA,
    Content,
    Extent,
    Level,
    PagingInfo,
    QueryModifier,
    ShellSearchCriteria,
    SubmodelSearchCriteria,
    UriBuilder,
    apply,
    resolve,
)
from aas_client.query.builder import sanitize_endpoint, serialize_parameters
from aas_client.utils.encoding import base64_url_decode


class TestApply:
    """Tests for building paths relative to a resource endpoint."""

    def test_level_and_limit(self):
        """Test level and limit are rendered as query parameters."""
        result = apply("/shells", Content.DEFAULT, QueryModifier(level=Level.DEEP), PagingInfo(limit=50))
        assert result == "/shells?level=deep&limit=50"

    def test_content_modifier(self):
        """Test content modifier is appended as path segment."""
        assert apply("/shells", Content.METADATA) == "/shells/$metadata"
        assert apply(None, Content.VALUE) == "/$value"

    def test_all_defaults_render_nothing(self):
        """Test that default values produce an empty string."""
        assert apply(None) == ""
        assert apply(None, Content.DEFAULT, QueryModifier.DEFAULT, PagingInfo.ALL, DEFAULT_SEARCH_CRITERIA) == ""

    def test_empty_search_criteria_render_nothing(self):
        """Test search criteria without filters are omitted."""
        assert apply("/shells", search_criteria=ShellSearchCriteria()) == "/shells"

    def test_parameter_order(self):
        """Test parameters are ordered level, extent, limit, cursor, criteria."""
        result = apply(
            "/submodels",
            Content.DEFAULT,
            QueryModifier.MAXIMAL,
            PagingInfo(limit=10, cursor="abc==123"),
            SubmodelSearchCriteria(id_short="Nameplate"),
        )
        path, _, query = result.partition("?")
        names = [parameter.split("=", 1)[0] for parameter in query.split("&")]

        assert path == "/submodels"
        assert names == ["level", "extent", "limit", "cursor", "idShort"]
        assert "extent=with_blob_value" in query
        assert query.endswith("idShort=Nameplate")

    def test_cursor_round_trip(self):
        """Test the cursor decodes back to its original value."""
        result = apply(None, paging_info=PagingInfo(cursor="abc==123"))
        encoded = result.removeprefix("?cursor=")

        assert "+" not in encoded and "/" not in encoded
        assert base64_url_decode(encoded) == "abc==123"

    def test_minimal_modifier(self):
        """Test minimal modifier renders core level without blob values."""
        assert serialize_parameters(QueryModifier.MINIMAL) == "?level=core&extent=without_blob_value"

    def test_extent_only(self):
        """Test extent without level."""
        modifier = QueryModifier(extent=Extent.WITHOUT_BLOB_VALUE)
        assert apply("/x", modifier=modifier) == "/x?extent=without_blob_value"


class TestUriBuilder:
    """Tests for building URIs relative to a service URI."""

    def test_content_modifier_without_separator(self):
        """Test the content modifier is appended without a slash."""
        builder = UriBuilder("http://localhost/api/v3.0/")
        uri = builder.get_uri("concept-descriptions/", Content.METADATA)
        assert uri == "http://localhost/api/v3.0/concept-descriptions/$metadata"

    def test_plain_resolution(self):
        """Test a path without modifiers is only resolved."""
        builder = UriBuilder("http://localhost/api/v3.0/")
        assert builder.get_uri("description") == "http://localhost/api/v3.0/description"

    def test_query_parameters(self):
        """Test query parameters follow the path."""
        builder = UriBuilder("http://localhost/api/v3.0/")
        uri = builder.get_uri("concept-descriptions", paging_info=PagingInfo(limit=5))
        assert uri == "http://localhost/api/v3.0/concept-descriptions?limit=5"


class TestResolve:
    """Tests for endpoint path resolution."""

    def test_keeps_last_segment(self):
        """Test the endpoint's last segment is kept."""
        assert resolve("http://h/api/shells", "/abc") == "http://h/api/shells/abc"

    def test_none_and_blank(self):
        """Test None and blank paths return the endpoint."""
        assert resolve("http://h/api", None) == "http://h/api"
        assert resolve("http://h/api", "  ") == "http://h/api"

    def test_query_only(self):
        """Test a query-only path is appended directly."""
        assert resolve("http://h/api/shells", "?limit=1") == "http://h/api/shells?limit=1"

    def test_relative_and_trailing_separator(self):
        """Test leading './' and trailing '/' are stripped."""
        assert resolve("http://h/api/", "./shells/") == "http://h/api/shells"

    def test_sanitize_endpoint(self):
        """Test a single trailing separator is removed."""
        assert sanitize_endpoint("http://h/api/") == "http://h/api"
        assert sanitize_endpoint("http://h/api") == "http://h/api"


class TestModifiers:
    """Tests for modifier values."""

    def test_modifier_equality(self):
        """Test modifiers compare by value."""
        assert QueryModifier(level=Level.DEEP, extent=Extent.WITH_BLOB_VALUE) == QueryModifier.MAXIMAL
        assert QueryModifier() == QueryModifier.DEFAULT

    def test_modifier_is_frozen(self):
        """Test modifiers cannot be changed."""
        with pytest.raises(ValidationError):
            QueryModifier.DEFAULT.level = Level.DEEP

    def test_limit_must_be_positive(self):
        """Test non-positive limits are rejected."""
        with pytest.raises(ValidationError):
            PagingInfo(limit=0)

    def test_has_limit(self):
        """Test has_limit only for explicit limits."""
        assert not PagingInfo.ALL.has_limit()
        assert PagingInfo(limit=1).has_limit()
