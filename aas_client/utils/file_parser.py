"""
Conversion of file download responses into in-memory file values.
"""

import httpx

from aas_client.schemas.files import InMemoryFile, TypedInMemoryFile

CONTENT_DISPOSITION = "Content-Disposition"
CONTENT_TYPE = "Content-Type"
DEFAULT_FILENAME = "unknown"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def parse_parameters(header: str, separator: str = ";") -> dict[str, str | None]:
    """
    Parse a header of separated name[=value] parameters.

    Values may be quoted; names without a value map to None.

    Example:
        'attachment; fileName="a.pdf"' -> {"attachment": None, "fileName": "a.pdf"}
    """
    params: dict[str, str | None] = {}
    for token in header.split(separator):
        name, sep, value = token.partition("=")
        name = name.strip()
        if not name:
            continue
        if not sep:
            params[name] = None
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        params[name] = value
    return params


def _extract_name(response: httpx.Response, parameter: str) -> str:
    header = response.headers.get(CONTENT_DISPOSITION, DEFAULT_FILENAME)
    return parse_parameters(header).get(parameter) or DEFAULT_FILENAME


def parse_file_body(response: httpx.Response) -> InMemoryFile:
    """
    Read a file download response.

    The file name is taken from the "fileName" parameter of the
    Content-Disposition header, "unknown" if absent.
    """
    if response is None:
        raise ValueError("response must be non-null")
    return InMemoryFile(path=_extract_name(response, "fileName"), content=response.content)


def parse_typed_file_body(response: httpx.Response) -> TypedInMemoryFile:
    """
    Read a file download response including its content type.

    Uses the "filename" parameter of the Content-Disposition header and the
    Content-Type header (application/octet-stream if absent).
    """
    if response is None:
        raise ValueError("response must be non-null")
    return TypedInMemoryFile(
        path=_extract_name(response, "filename"),
        content=response.content,
        content_type=response.headers.get(CONTENT_TYPE, DEFAULT_CONTENT_TYPE),
    )
