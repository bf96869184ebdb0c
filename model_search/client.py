"""
HTTP client for an Elasticsearch-compatible search engine.

Sends request definitions built by payload_builder to the engine's REST API
and returns the decoded JSON response.
"""

import json
import logging
from typing import Dict, Any, Optional
from collections.abc import Mapping

import requests

from model_search import config

logger = logging.getLogger(__name__)


class SearchEngineClient:
    """
    Executes search and scroll definitions over a pooled HTTP session.

    A single requests.Session is reused for every call, so TCP/TLS
    connections are kept alive between requests.

    Errors are not handled here: HTTP error statuses raise
    requests.HTTPError and transport failures raise the matching
    requests exception.
    """

    def __init__(
        self,
        url: str = config.SEARCH_ENGINE_URL,
        api_key: Optional[str] = config.SEARCH_ENGINE_API_KEY,
        timeout: float = config.SEARCH_ENGINE_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        self.url = url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        if api_key:
            self.session.headers["Authorization"] = f"ApiKey {api_key}"

    def search(self, definition: Mapping) -> Dict[str, Any]:
        """
        Run a search definition.

        "q" and every non-reserved key become URL parameters, except
        structured options (mappings, or lists holding mappings), which are
        merged into a JSON body. A string body is sent exactly as given
        unless structured options have to be merged into it; it is then
        decoded, and invalid JSON raises json.JSONDecodeError.
        """
        params = dict(definition)
        index = params.pop("index", None)
        doc_type = params.pop("type", None)
        body = params.pop("body", None)

        path = "/".join(str(part) for part in (index, doc_type) if part)
        url = f"{self.url}/{path}/_search" if path else f"{self.url}/_search"

        # Structured extras (highlight, aggs, sort clauses, ...) only fit in the JSON body
        nested = [key for key, value in params.items() if _is_structured(value)]

        if isinstance(body, str):
            if not nested:
                return self._post(url, params=params, data=body.encode("utf-8"),
                                  headers={"Content-Type": "application/json"})
            body = json.loads(body)

        if nested:
            body = dict(body or {})
            for key in nested:
                body[key] = params.pop(key)
        return self._post(url, params=params, json=body)

    def scroll(self, definition: Mapping) -> Dict[str, Any]:
        """
        Run a scroll definition.

        The scroll endpoint is not index-scoped, so "index" and "type" are
        dropped; the cursor and keep-alive go in the JSON body.
        """
        params = dict(definition)
        params.pop("index", None)
        params.pop("type", None)

        body = {"scroll_id": params.pop("scroll_id")}
        if "scroll" in params:
            body["scroll"] = params.pop("scroll")
        return self._post(f"{self.url}/_search/scroll", params=params, json=body)

    def _post(self, url: str, params: Dict[str, Any], **kwargs) -> Dict[str, Any]:
        logger.debug("POST %s params=%s", url, params)
        response = self.session.post(url, params=_encode_params(params), timeout=self.timeout, **kwargs)
        response.raise_for_status()
        return response.json()


def _is_structured(value: Any) -> bool:
    if isinstance(value, Mapping):
        return True
    return isinstance(value, (list, tuple)) and any(isinstance(v, Mapping) for v in value)


def _encode_params(params: Dict[str, Any]) -> Dict[str, str]:
    # The REST API expects booleans as "true"/"false" and lists comma-joined
    encoded = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            encoded[key] = ",".join(str(v) for v in value)
        else:
            encoded[key] = value
    return encoded


_search_client = None


def get_search_client() -> SearchEngineClient:
    """
    Get or create the shared search engine client (singleton pattern).

    The client is created lazily on first call from the settings in
    model_search.config and reused afterwards.
    """
    global _search_client
    if _search_client is None:
        _search_client = SearchEngineClient()
    return _search_client
