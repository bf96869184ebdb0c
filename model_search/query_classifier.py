"""
Query input classification.

Decides how a search input reaches the engine: as a structured request body,
as a raw JSON body, or as a simple query-string parameter.
"""

from collections.abc import Mapping
from typing import Dict, Any, Optional

# ============================================================
# Query kinds
# ============================================================

STRUCTURED_PAYLOAD = "structured_payload"
RAW_JSON_BODY = "raw_json_body"
FREE_TEXT_QUERY = "free_text_query"

# Method names that mark an object as convertible to a query mapping,
# checked in order (e.g. query DSL objects expose to_dict()).
MAPPING_CONVERSIONS = ("to_dict", "to_hash")


def to_query_mapping(query_input: Any) -> Optional[Dict[str, Any]]:
    """
    Convert a structured query input to a plain dict.

    Args:
        query_input: A mapping, or an object exposing to_dict()/to_hash()

    Returns:
        Dictionary preserving the key order of the input, or None when the
        input offers no conversion returning a mapping or a list of pairs
    """
    if isinstance(query_input, Mapping):
        return dict(query_input)

    # Strings are never structured, whatever methods a subclass adds
    if isinstance(query_input, (str, bytes)):
        return None

    for method_name in MAPPING_CONVERSIONS:
        convert = getattr(query_input, method_name, None)
        if callable(convert):
            converted = convert()
            if isinstance(converted, Mapping):
                return dict(converted)
            if _is_pair_sequence(converted):
                return dict(converted)
    return None


def _is_pair_sequence(value: Any) -> bool:
    if not isinstance(value, (list, tuple)):
        return False
    return all(isinstance(item, (list, tuple)) and len(item) == 2 for item in value)


def looks_like_json(text: str) -> bool:
    """Return True when the first non-whitespace character is '{'."""
    return text.lstrip().startswith("{")


def classify_query(query_input: Any) -> Dict[str, Any]:
    """
    Classify a search input into exactly one query kind.

    Priority order (first match wins):
        1. structured_payload: mapping or mapping-convertible object -> "body"
        2. raw_json_body: string starting with '{' -> "body" (the raw string,
           neither parsed nor validated)
        3. free_text_query: anything else -> "q"

    Returns:
        Dictionary with "kind" and either "body" or "q"

    Examples:
        {"query": {"match_all": {}}} -> {"kind": "structured_payload", "body": {...}}
        '{"query": {...}}'           -> {"kind": "raw_json_body", "body": '{"query": {...}}'}
        "title:foo"                  -> {"kind": "free_text_query", "q": "title:foo"}
    """
    body = to_query_mapping(query_input)
    if body is not None:
        return {"kind": STRUCTURED_PAYLOAD, "body": body}

    if isinstance(query_input, str) and looks_like_json(query_input):
        return {"kind": RAW_JSON_BODY, "body": query_input}

    return {"kind": FREE_TEXT_QUERY, "q": query_input}
