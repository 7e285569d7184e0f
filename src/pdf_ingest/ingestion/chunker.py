"""Text chunking strategies."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from langchain_text_splitters import RecursiveCharacterTextSplitter

from pdf_ingest.errors import SplitError

if TYPE_CHECKING:
    from langchain_core.documents import Document

logger = logging.getLogger(__name__)

# Coarsest boundary first: paragraph, line, sentence, word, character.
DEFAULT_SEPARATORS = ["\n\n", "\n", ". ", " ", ""]


def chunk_documents(
    documents: list[Document],
    chunk_size: int = 1000,
    chunk_overlap: int = 200,
    separators: list[str] | None = None,
) -> list[Document]:
    """Split *documents* into smaller chunks for embedding.

    Parameters
    ----------
    documents:
        Source documents produced by a loader.
    chunk_size:
        Maximum number of characters per chunk.
    chunk_overlap:
        Maximum number of characters shared by consecutive chunks.
    separators:
        Split boundaries in priority order.  Defaults to
        :data:`DEFAULT_SEPARATORS`.

    Returns
    -------
    list[Document]
        Chunked documents ready for embedding, each carrying a copy of its
        parent's metadata.
    """
    if chunk_size <= 0:
        raise SplitError(f"chunk_size must be positive, got {chunk_size}")
    if chunk_overlap < 0 or chunk_overlap >= chunk_size:
        raise SplitError(
            f"chunk_overlap ({chunk_overlap}) must be >= 0 and < chunk_size ({chunk_size})"
        )

    splitter = RecursiveCharacterTextSplitter(
        chunk_size=chunk_size,
        chunk_overlap=chunk_overlap,
        length_function=len,
        separators=separators or DEFAULT_SEPARATORS,
    )
    try:
        chunks = splitter.split_documents(documents)
    except Exception as exc:
        raise SplitError(f"Failed to split documents: {exc}") from exc

    logger.info("Split documents: %d", len(chunks))
    return chunks
