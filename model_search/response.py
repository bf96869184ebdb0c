"""
Lazy wrapper around a search or scroll response.
"""

from typing import Dict, Any, List, Optional, Iterator


class Response:
    """
    Holds an unexecuted search/scroll request and runs it on first access.

    The request is executed at most once; later accesses reuse the cached
    raw response. Errors raised by the client surface on that first access.

    Example:
        >>> response = Article.search("title:foo")   # nothing sent yet
        >>> response.total                            # executes the search
        3
    """

    def __init__(self, klass, search):
        self.klass = klass
        self.search = search
        self._response: Optional[Dict[str, Any]] = None
        self._executed = False

    @property
    def executed(self) -> bool:
        return self._executed

    @property
    def response(self) -> Dict[str, Any]:
        """Raw response from the client, executing the request if needed."""
        if not self._executed:
            self._response = self.search.execute()
            self._executed = True
        return self._response

    @property
    def took(self) -> Optional[int]:
        return self.response.get("took")

    @property
    def timed_out(self) -> Optional[bool]:
        return self.response.get("timed_out")

    @property
    def shards(self) -> Dict[str, Any]:
        return self.response.get("_shards", {})

    @property
    def hits(self) -> Dict[str, Any]:
        return self.response.get("hits", {})

    @property
    def total(self) -> Optional[int]:
        # 7.x+ engines report {"value": n, "relation": "eq"}
        total = self.hits.get("total")
        if isinstance(total, dict):
            return total.get("value")
        return total

    @property
    def max_score(self) -> Optional[float]:
        return self.hits.get("max_score")

    @property
    def results(self) -> List[Dict[str, Any]]:
        return self.hits.get("hits", [])

    @property
    def aggregations(self) -> Dict[str, Any]:
        return self.response.get("aggregations", {})

    @property
    def scroll_id(self) -> Optional[str]:
        """Cursor for the next scroll call, when the request asked for one."""
        return self.response.get("_scroll_id")

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def __getitem__(self, index):
        return self.results[index]
