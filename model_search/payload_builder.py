"""
Search and scroll request definition builder.

Converts a target descriptor, a query input (or scroll cursor) and caller
options into the request definition handed to the search engine client.
This module only builds values - it never talks to the client.
"""

import logging
from collections.abc import Mapping
from typing import Dict, Any, Optional, Iterator

from model_search.query_classifier import classify_query
from model_search.target import Target

logger = logging.getLogger(__name__)

# Keys computed by the builders; everything else in options is passed through
RESERVED_KEYS = ("index", "type", "body", "q", "scroll_id")


class RequestDefinition(Mapping):
    """
    Read-only mapping describing one search or scroll call.

    Holds the reserved keys (index, type and one of body/q/scroll_id) plus any
    extra engine parameters supplied by the caller. There is no way to change
    a definition once built.
    """

    def __init__(self, fields: Mapping):
        self._fields = dict(fields)

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"RequestDefinition({self._fields!r})"

    @property
    def is_scroll(self) -> bool:
        return "scroll_id" in self._fields

    @property
    def extra_options(self) -> Dict[str, Any]:
        """Caller-supplied parameters that are not reserved fields."""
        return {k: v for k, v in self._fields.items() if k not in RESERVED_KEYS}

    def to_dict(self) -> Dict[str, Any]:
        """Flattened copy of the definition, as passed to the client."""
        return dict(self._fields)


def merge_options(defaults: Dict[str, Any], options: Optional[Mapping]) -> Dict[str, Any]:
    """
    Overlay caller options on computed defaults.

    Defaults are copied first, then every option is applied key by key in
    the caller's order; the last write wins, so an explicit option always
    replaces a default - even when its value is None.
    """
    merged = dict(defaults)
    for key, value in (options or {}).items():
        merged[key] = value
    return merged


def _target_defaults(target: Target, options: Mapping) -> Dict[str, Any]:
    return {
        "index": options.get("index") or target.index_name,
        "type": options.get("type") or target.document_type,
    }


def build_search_definition(
    target: Target,
    query_input: Any,
    options: Optional[Mapping] = None
) -> RequestDefinition:
    """
    Build a search request definition.

    Args:
        target: Index and document type of the owning model
        query_input: Structured query (mapping or object with to_dict()),
            raw JSON string, or free-text query string
        options: Extra parameters for the client (size, sort, highlight, ...).
            May override "index" and "type".

    Returns:
        RequestDefinition with index, type and exactly one of body/q

    Example:
        >>> build_search_definition(Target("foo", "bar"), "hello")
        RequestDefinition({'index': 'foo', 'type': 'bar', 'q': 'hello'})
    """
    options = options or {}
    classified = classify_query(query_input)

    defaults = _target_defaults(target, options)
    if "body" in classified:
        defaults["body"] = classified["body"]
    else:
        defaults["q"] = classified["q"]

    definition = RequestDefinition(merge_options(defaults, options))
    logger.debug("Built search definition (%s): %r", classified["kind"], definition)
    return definition


def build_scroll_definition(
    target: Target,
    scroll_id: str,
    options: Optional[Mapping] = None
) -> RequestDefinition:
    """
    Build a scroll request definition.

    The scroll_id is an opaque cursor from a previous search or scroll
    response; its format and expiry are not checked here.

    Example:
        >>> build_scroll_definition(Target("foo", "bar"), "abc", {"scroll": "5m"})
        RequestDefinition({'index': 'foo', 'type': 'bar', 'scroll_id': 'abc', 'scroll': '5m'})
    """
    options = options or {}
    defaults = _target_defaults(target, options)
    defaults["scroll_id"] = scroll_id

    definition = RequestDefinition(merge_options(defaults, options))
    logger.debug("Built scroll definition: %r", definition)
    return definition
