"""End-to-end ingestion run: load → split → embed + upsert."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from pdf_ingest.errors import EmbeddingError, EmptyInputError, IngestError, UpsertError
from pdf_ingest.ingestion.chunker import chunk_documents
from pdf_ingest.ingestion.embedder import get_embedding_function
from pdf_ingest.ingestion.indexer import index_chunks
from pdf_ingest.ingestion.loader import ParserRegistry, load_directory
from pdf_ingest.models import IngestionResult
from pdf_ingest.stores import build_vector_store

if TYPE_CHECKING:
    from langchain_core.documents import Document
    from langchain_core.embeddings import Embeddings

    from pdf_ingest.config import Settings
    from pdf_ingest.stores.base import VectorStoreWriter

logger = logging.getLogger(__name__)


def load_and_split(
    settings: Settings,
    registry: ParserRegistry | None = None,
) -> tuple[list[Document], list[Document]]:
    """Load the configured directory and chunk it.

    Returns ``(raw_documents, chunks)``.
    """
    raw_docs = load_directory(settings.docs_dir, registry, recursive=settings.recursive)
    chunks = chunk_documents(
        raw_docs,
        chunk_size=settings.chunk_size,
        chunk_overlap=settings.chunk_overlap,
    )
    return raw_docs, chunks


def run_ingestion(
    settings: Settings | None = None,
    *,
    registry: ParserRegistry | None = None,
    embeddings: Embeddings | None = None,
    store: VectorStoreWriter | None = None,
) -> IngestionResult:
    """Run the whole pipeline once.

    *embeddings* and *store* default to the ones described by *settings*;
    they are only built once there is something to ingest.

    Raises
    ------
    IngestError
        The typed subclass for whichever stage failed.  The error is logged
        before it propagates.
    """
    if settings is None:
        from pdf_ingest.config import get_settings

        settings = get_settings()

    t0 = time.monotonic()
    try:
        raw_docs, chunks = load_and_split(settings, registry)
        if not chunks:
            raise EmptyInputError()

        config = settings.indexer_config()
        if settings.dry_run:
            logger.info("Dry run: skipping embedding and upsert of %d chunks", len(chunks))
            return IngestionResult(
                documents_loaded=len(raw_docs),
                chunks_created=len(chunks),
                entries_upserted=0,
                index_name=config.index_name,
                namespace=config.namespace,
                elapsed_seconds=time.monotonic() - t0,
            )

        logger.info("Creating vector store...")
        if embeddings is None:
            try:
                embeddings = get_embedding_function(settings)
            except Exception as exc:
                raise EmbeddingError(f"Cannot initialise embeddings: {exc}") from exc
        if store is None:
            try:
                store = build_vector_store(settings)
            except Exception as exc:
                raise UpsertError(f"Cannot connect to vector store: {exc}") from exc
        if not store.health_check():
            raise UpsertError(f"Vector store {store.index_name!r} is not reachable")

        if settings.clear_namespace:
            try:
                store.delete_namespace(config.namespace)
            except Exception as exc:
                raise UpsertError(f"Cannot clear namespace {config.namespace!r}: {exc}") from exc

        written = index_chunks(chunks, embeddings, store, config)
    except IngestError as exc:
        logger.error("Error during ingestion: %s", exc, exc_info=True)
        raise

    result = IngestionResult(
        documents_loaded=len(raw_docs),
        chunks_created=len(chunks),
        entries_upserted=written,
        index_name=store.index_name,
        namespace=config.namespace,
        elapsed_seconds=time.monotonic() - t0,
    )
    logger.info("Ingestion complete: %s", result)
    return result
