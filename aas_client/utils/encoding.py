"""
Base64 helpers for identifiers and query values.

Identifiers in paths and the paging cursor use the URL-safe alphabet;
search criteria values use the standard alphabet. Padding is kept.
"""

import base64


def base64_encode(value: str) -> str:
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def base64_decode(value: str) -> str:
    return base64.b64decode(value.encode("ascii")).decode("utf-8")


def base64_url_encode(value: str) -> str:
    return base64.urlsafe_b64encode(value.encode("utf-8")).decode("ascii")


def base64_url_decode(value: str) -> str:
    return base64.urlsafe_b64decode(value.encode("ascii")).decode("utf-8")
