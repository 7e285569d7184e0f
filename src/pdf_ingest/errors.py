"""Exception hierarchy for the ingestion pipeline.

Every stage raises its own subclass of :class:`IngestError` and chains
the underlying library exception (``raise ... from exc``), so callers can
tell *what* failed without losing *why*.
"""

from __future__ import annotations


class IngestError(Exception):
    """Base class for all ingestion failures."""

    user_message = "Failed to ingest your data"


class LoadError(IngestError):
    """The input directory could not be read or a file could not be parsed."""


class SplitError(IngestError):
    """Chunking parameters were invalid or the splitter failed."""


class EmptyInputError(IngestError):
    """Loading and splitting produced nothing to ingest."""

    def __init__(self, message: str = "No documents to ingest") -> None:
        super().__init__(message)


class EmbeddingError(IngestError):
    """The embedding provider failed or returned unusable vectors."""


class UpsertError(IngestError):
    """Writing entries to the vector store failed."""
