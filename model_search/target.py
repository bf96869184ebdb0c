from typing import NamedTuple, Optional


class Target(NamedTuple):
    """Index and document type a model searches against."""

    index_name: str
    document_type: Optional[str] = None
