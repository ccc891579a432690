"""
Query and URI construction.

Two builders exist because endpoint families differ in how the content
modifier is attached:

- apply(): paths relative to a resource endpoint, modifier as "/$name"
- UriBuilder: paths ending in "/" resolved against the service URI,
  modifier as "$name"

Query parameters are always rendered in the order level, extent, limit,
cursor, search criteria.
"""

import logging
from urllib.parse import urljoin

from aas_client.query.modifiers import Content, Extent, Level, PagingInfo, QueryModifier
from aas_client.query.search_criteria import DefaultSearchCriteria, SearchCriteria
from aas_client.utils.encoding import base64_url_encode

logger = logging.getLogger(__name__)

URI_PATH_SEPARATOR = "/"


def apply(
    path: str | None,
    content: Content = Content.DEFAULT,
    modifier: QueryModifier | None = None,
    paging_info: PagingInfo | None = None,
    search_criteria: SearchCriteria | None = None,
) -> str:
    """
    Append content modifier and query parameters to a relative path.

    Args:
        path: Path relative to the resource endpoint, may be None
        content: Content modifier, rendered as "/$<name>"
        modifier: Level/extent modifier
        paging_info: Limit and cursor
        search_criteria: Resource specific filter

    Returns:
        The path including content modifier and query string
    """
    result = path if path is not None else ""
    result += serialize_content_modifier(content, leading_separator=True)
    result += serialize_parameters(modifier, paging_info, search_criteria)
    return result


class UriBuilder:
    """
    Builds request URIs relative to a service URI.

    Paths are resolved like relative references, so the service URI should
    end in "/" and paths that receive a content modifier as well.
    """

    def __init__(self, service_uri: str):
        self.service_uri = service_uri

    def get_uri(
        self,
        path: str,
        content: Content | None = None,
        modifier: QueryModifier | None = None,
        paging_info: PagingInfo | None = None,
        search_criteria: SearchCriteria | None = None,
    ) -> str:
        if content is None and modifier is None and paging_info is None and search_criteria is None:
            return urljoin(self.service_uri, path)
        if content is None:
            content = Content.DEFAULT
        relative = (
            path
            + serialize_content_modifier(content, leading_separator=False)
            + serialize_parameters(modifier, paging_info, search_criteria)
        )
        return urljoin(self.service_uri, relative)


def serialize_content_modifier(content: Content, leading_separator: bool = True) -> str:
    if content == Content.DEFAULT:
        return ""
    prefix = URI_PATH_SEPARATOR if leading_separator else ""
    return f"{prefix}${content.name.lower()}"


def serialize_parameters(
    modifier: QueryModifier | None = None,
    paging_info: PagingInfo | None = None,
    search_criteria: SearchCriteria | None = None,
) -> str:
    """
    Render the query string for the given modifiers.

    Returns:
        "?" followed by the "&"-joined non-empty parameters, or "" if all
        of them are at their defaults.
    """
    if modifier is None:
        modifier = QueryModifier.DEFAULT
    if paging_info is None:
        paging_info = PagingInfo.ALL

    level = "" if modifier.level == Level.DEFAULT else f"level={modifier.level.name.lower()}"
    extent = "" if modifier.extent == Extent.DEFAULT else f"extent={modifier.extent.name.lower()}"
    limit = f"limit={paging_info.limit}" if paging_info.has_limit() else ""
    cursor = (
        f"cursor={base64_url_encode(paging_info.cursor)}" if paging_info.cursor is not None else ""
    )
    criteria = _serialize_search_criteria(search_criteria)

    parameters = "&".join(p for p in (level, extent, limit, cursor, criteria) if p)
    return f"?{parameters}" if parameters else ""


def _serialize_search_criteria(search_criteria: SearchCriteria | None) -> str:
    if search_criteria is None or isinstance(search_criteria, DefaultSearchCriteria):
        return ""
    return search_criteria.to_query_string()


def resolve(base_uri: str, path: str | None) -> str:
    """
    Resolve a path relative to an endpoint.

    Unlike RFC 3986 resolution, the last segment of ``base_uri`` is kept,
    i.e. resolve("http://host/api/shells", "/abc") is
    "http://host/api/shells/abc".
    """
    if path is None or not path.strip():
        return base_uri
    if path.startswith("?"):
        return base_uri + path
    actual_path = path
    if actual_path.startswith("./"):
        actual_path = actual_path[2:]
    elif actual_path.startswith(URI_PATH_SEPARATOR):
        actual_path = actual_path[1:]
    if actual_path.endswith(URI_PATH_SEPARATOR):
        actual_path = actual_path[:-1]
    result = f"{sanitize_endpoint(base_uri)}{URI_PATH_SEPARATOR}{actual_path}"
    logger.debug("Resolved path %s against %s: %s", path, base_uri, result)
    return result


def sanitize_endpoint(endpoint: str) -> str:
    """Strip a single trailing path separator from an endpoint."""
    if endpoint.endswith(URI_PATH_SEPARATOR):
        return endpoint[:-1]
    return endpoint
