"""
Core modules for building and executing search-engine requests.

This package normalizes query strings, raw JSON bodies, structured query
objects and scroll cursors into request definitions, and executes them
through a search-engine client.
"""

from model_search.target import Target
from model_search.payload_builder import (
    RequestDefinition,
    build_search_definition,
    build_scroll_definition,
)
from model_search.search_request import SearchRequest, ScrollRequest
from model_search.response import Response
from model_search.searching import Searchable

__all__ = [
    "Target",
    "RequestDefinition",
    "build_search_definition",
    "build_scroll_definition",
    "SearchRequest",
    "ScrollRequest",
    "Response",
    "Searchable",
]
