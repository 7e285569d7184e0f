"""
Ingestion — document loading, chunking, and embedding into the vector store.

The three stages run strictly in order, each consuming the previous
stage's output:

- :func:`load_directory` — files → raw ``Document`` objects.
- :func:`chunk_documents` — raw documents → overlapping chunks.
- :func:`index_chunks` — chunks → embedded entries upserted into a store.
"""

from pdf_ingest.ingestion.chunker import DEFAULT_SEPARATORS, chunk_documents
from pdf_ingest.ingestion.indexer import build_index_entries, index_chunks
from pdf_ingest.ingestion.loader import (
    DocumentParser,
    ParserRegistry,
    PdfParser,
    TextParser,
    default_registry,
    load_directory,
)

__all__ = [
    "DEFAULT_SEPARATORS",
    "DocumentParser",
    "ParserRegistry",
    "PdfParser",
    "TextParser",
    "build_index_entries",
    "chunk_documents",
    "default_registry",
    "index_chunks",
    "load_directory",
]
