"""
Search and scroll requests bound to a model.

A request builds its definition when created and only calls the client when
execute() is called.
"""

import logging
import time
from typing import Dict, Any, Optional
from collections.abc import Mapping

from model_search.payload_builder import (
    RequestDefinition,
    build_search_definition,
    build_scroll_definition,
)

logger = logging.getLogger(__name__)


class SearchRequest:
    """
    Wraps a search request definition.

    Args:
        klass: The model class; provides target() and client()
        query_or_payload: Query string, JSON string, mapping, or object
            exposing to_dict()
        options: Optional parameters passed through to the client
    """

    def __init__(self, klass, query_or_payload: Any, options: Optional[Mapping] = None):
        self.klass = klass
        self.options = dict(options or {})
        self.definition: RequestDefinition = build_search_definition(
            klass.target(), query_or_payload, self.options
        )

    def execute(self) -> Dict[str, Any]:
        """
        Perform the request and return the client's response.

        Client errors are not caught here.
        """
        return _timed_call("search", self.klass.client().search, self.definition)


class ScrollRequest:
    """
    Wraps a scroll request definition.

    Args:
        klass: The model class; provides target() and client()
        scroll_id: Scroll cursor returned by a previous search/scroll
        options: Optional parameters passed through to the client (e.g. scroll="5m")
    """

    def __init__(self, klass, scroll_id: str, options: Optional[Mapping] = None):
        self.klass = klass
        self.options = dict(options or {})
        self.definition: RequestDefinition = build_scroll_definition(
            klass.target(), scroll_id, self.options
        )

    def execute(self) -> Dict[str, Any]:
        """Perform the scroll request and return the client's response."""
        return _timed_call("scroll", self.klass.client().scroll, self.definition)


def _timed_call(operation: str, call, definition: RequestDefinition) -> Dict[str, Any]:
    start = time.time()
    result = call(definition.to_dict())
    elapsed_ms = (time.time() - start) * 1000
    logger.info("%s on index %r completed in %.2fms", operation, definition.get("index"), elapsed_ms)
    return result
