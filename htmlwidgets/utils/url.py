"""Query-string helpers for building widget link targets."""

import logging
from typing import Union
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

logger = logging.getLogger(__name__)

QueryParams = Union[str, dict[str, object]]


def _parse_params(params: QueryParams) -> list[tuple[str, str]]:
    if isinstance(params, str):
        return parse_qsl(params.lstrip("?&"), keep_blank_values=True)
    return [(str(key), str(value)) for key, value in params.items()]


def add_query(url: str, params: QueryParams) -> str:
    """Merge query parameters into a URL.

    Existing parameters are kept in their original order. A parameter that is
    already present is replaced in place instead of being repeated, and new
    parameters are appended. The fragment, if any, stays at the end.

    The existing query is decoded and encoded again, so its spelling may
    change while its content does not: a bare flag such as ``?debug`` becomes
    ``?debug=`` and ``%20`` becomes ``+``.

    Args:
        url: Base URL, absolute or relative
        params: Either a query string such as ``"p=2"`` or a mapping

    Returns:
        The URL with the merged query string

    Example:
        >>> add_query("/list?sort=name", "p=2")
        '/list?sort=name&p=2'
        >>> add_query("/list?p=1&sort=name", {"p": 3})
        '/list?p=3&sort=name'
    """
    parts = urlsplit(url)
    existing = parse_qsl(parts.query, keep_blank_values=True)
    updates = _parse_params(params)
    update_map = dict(updates)

    merged: list[tuple[str, str]] = []
    replaced: set[str] = set()
    for key, value in existing:
        if key in update_map:
            if key in replaced:
                continue
            merged.append((key, update_map[key]))
            replaced.add(key)
        else:
            merged.append((key, value))

    for key, value in updates:
        if key not in replaced:
            merged.append((key, value))
            replaced.add(key)

    query = urlencode(merged)
    result = urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))
    logger.debug(f"Added query {updates} to {url!r} -> {result!r}")
    return result
