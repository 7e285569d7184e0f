"""Abstract base class for vector-store backends.

Adding a new backend (Weaviate, Qdrant …) only requires subclassing
:class:`VectorStoreWriter` and implementing the two abstract methods.
The indexer is backend-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pdf_ingest.models import IndexEntry


class VectorStoreWriter(ABC):
    """Backend-agnostic write interface.

    Parameters
    ----------
    index_name:
        Logical name of the index / collection written to.
    """

    def __init__(self, index_name: str) -> None:
        self.index_name = index_name

    # -- required overrides ---------------------------------------------------

    @abstractmethod
    def upsert(self, entries: list[IndexEntry], *, namespace: str) -> int:
        """Insert or overwrite *entries* in *namespace*.

        Returns the number of entries written.  Implementations raise the
        client library's own exception on failure; the indexer wraps it.
        """
        ...

    @abstractmethod
    def health_check(self) -> bool:
        """Return ``True`` when the backend is reachable and ready."""
        ...

    # -- optional overrides ---------------------------------------------------

    def delete_namespace(self, namespace: str) -> None:
        """Remove every entry in *namespace*.  Optional; raises by default."""
        raise NotImplementedError(f"{type(self).__name__} does not support delete_namespace")
