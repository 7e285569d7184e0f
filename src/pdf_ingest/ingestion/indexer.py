"""Embedding and vector-store persistence.

:func:`index_chunks` embeds every chunk, pairs it with its vector and
upserts the resulting :class:`~pdf_ingest.models.IndexEntry` objects in
batches.  It is all-or-nothing from the caller's point of view: either
every chunk is written or an :class:`~pdf_ingest.errors.IngestError` is
raised.  Batches already written before a failure stay in the store.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from pdf_ingest.errors import EmbeddingError, EmptyInputError, UpsertError
from pdf_ingest.models import IndexEntry, IndexerConfig

if TYPE_CHECKING:
    from langchain_core.documents import Document
    from langchain_core.embeddings import Embeddings

    from pdf_ingest.stores.base import VectorStoreWriter

logger = logging.getLogger(__name__)


def _embed(texts: list[str], embeddings: Embeddings, batch_size: int) -> list[list[float]]:
    vectors: list[list[float]] = []
    for start in range(0, len(texts), batch_size):
        batch = texts[start : start + batch_size]
        try:
            batch_vectors = embeddings.embed_documents(batch)
        except Exception as exc:
            raise EmbeddingError(
                f"Embedding failed for chunks {start}-{start + len(batch) - 1}: {exc}"
            ) from exc

        if len(batch_vectors) != len(batch):
            raise EmbeddingError(
                f"Expected {len(batch)} vectors for chunks starting at {start}, "
                f"got {len(batch_vectors)}"
            )
        for offset, vector in enumerate(batch_vectors):
            if not vector:
                raise EmbeddingError(f"Empty embedding returned for chunk {start + offset}")
        vectors.extend(list(v) for v in batch_vectors)
        logger.debug("  embedded %d / %d", len(vectors), len(texts))
    return vectors


def build_index_entries(
    chunks: list[Document],
    vectors: list[list[float]],
    namespace: str,
) -> list[IndexEntry]:
    """Pair each chunk with its vector."""
    if len(chunks) != len(vectors):
        raise ValueError(f"{len(chunks)} chunks but {len(vectors)} vectors")
    return [
        IndexEntry(
            vector=vector,
            text=chunk.page_content,
            metadata=dict(chunk.metadata),
            namespace=namespace,
        )
        for chunk, vector in zip(chunks, vectors)
    ]


def index_chunks(
    chunks: list[Document],
    embeddings: Embeddings,
    store: VectorStoreWriter,
    config: IndexerConfig,
) -> int:
    """Embed *chunks* and upsert them into *store* under ``config.namespace``.

    Parameters
    ----------
    chunks:
        Output of the splitter.
    embeddings:
        LangChain embedding function (``embed_documents``).
    store:
        Destination vector store.
    config:
        Namespace and batch sizes.

    Returns
    -------
    int
        Number of entries upserted (always ``len(chunks)``).

    Raises
    ------
    EmptyInputError
        If *chunks* is empty; nothing is embedded or written.
    EmbeddingError
        If the embedding provider fails or returns unusable vectors.
    UpsertError
        If the vector store rejects a batch.
    """
    if not chunks:
        raise EmptyInputError()

    texts = [c.page_content for c in chunks]
    logger.info(
        "Embedding %d chunks (batch_size=%d)", len(texts), config.embed_batch_size
    )
    t0 = time.monotonic()
    vectors = _embed(texts, embeddings, config.embed_batch_size)
    entries = build_index_entries(chunks, vectors, config.namespace)

    written = 0
    batch_size = config.upsert_batch_size
    for start in range(0, len(entries), batch_size):
        batch = entries[start : start + batch_size]
        try:
            store.upsert(batch, namespace=config.namespace)
        except Exception as exc:
            raise UpsertError(
                f"Upsert to {store.index_name!r}/{config.namespace!r} failed after "
                f"{written} of {len(entries)} entries: {exc}"
            ) from exc
        written += len(batch)
        logger.debug("  upserted %d / %d", written, len(entries))

    logger.info(
        "Indexed %d vectors → %s/%s in %.1fs",
        written,
        store.index_name,
        config.namespace,
        time.monotonic() - t0,
    )
    return written
