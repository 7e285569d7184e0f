"""Chroma implementation of the vector-store abstraction.

Chroma has no namespaces, so the namespace is stored in each entry's
metadata under :data:`NAMESPACE_KEY` and used as a delete filter.
"""

from __future__ import annotations

import logging

import chromadb

from pdf_ingest.models import IndexEntry
from pdf_ingest.stores.base import VectorStoreWriter

logger = logging.getLogger(__name__)

NAMESPACE_KEY = "namespace"


class ChromaVectorStore(VectorStoreWriter):
    """Chroma-backed vector store.

    Parameters
    ----------
    index_name:
        Name of the Chroma collection (created if missing).
    host:
        Chroma server hostname.
    port:
        Chroma server port.
    distance_metric:
        Distance function for a newly created collection (``cosine`` | ``l2`` | ``ip``).
    """

    def __init__(
        self,
        index_name: str,
        *,
        host: str = "localhost",
        port: int = 8000,
        distance_metric: str = "cosine",
    ) -> None:
        super().__init__(index_name)
        self._client = chromadb.HttpClient(host=host, port=port)
        self._collection = self._client.get_or_create_collection(
            name=index_name,
            metadata={"hnsw:space": distance_metric},
        )

    # -- VectorStoreWriter overrides ------------------------------------------

    def upsert(self, entries: list[IndexEntry], *, namespace: str) -> int:
        if not entries:
            return 0
        metadatas = []
        for entry in entries:
            meta = entry.flat_metadata()
            meta[NAMESPACE_KEY] = namespace
            metadatas.append(meta)
        self._collection.upsert(
            ids=[e.id for e in entries],
            embeddings=[list(e.vector) for e in entries],
            documents=[e.text for e in entries],
            metadatas=metadatas,
        )
        return len(entries)

    def health_check(self) -> bool:
        try:
            self._client.heartbeat()
            return True
        except Exception:
            logger.warning("Chroma health-check failed", exc_info=True)
            return False

    def delete_namespace(self, namespace: str) -> None:
        logger.info("Deleting all vectors in %s/%s", self.index_name, namespace)
        self._collection.delete(where={NAMESPACE_KEY: namespace})
