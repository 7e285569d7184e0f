"""Domain models for index entries and run configuration/results."""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_NAMESPACE = "default-namespace"

_SCALAR_TYPES = (str, int, float, bool)


class IndexEntry(BaseModel):
    """One chunk of text together with its embedding, ready to upsert.

    Attributes
    ----------
    id:
        Entry identifier; a random UUID4 hex string unless supplied.
    vector:
        Dense embedding of :attr:`text`.  Never empty.
    text:
        The chunk's textual content.
    metadata:
        Provenance metadata inherited from the chunk (at least ``source``).
    namespace:
        Partition of the destination index the entry is written to.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    vector: list[float] = Field(min_length=1)
    text: str
    metadata: dict[str, Any] = Field(default_factory=dict)
    namespace: str = DEFAULT_NAMESPACE

    def flat_metadata(self) -> dict[str, str | int | float | bool]:
        """Return only the scalar metadata values.

        Vector stores reject nested or ``None`` metadata, so anything that
        is not a str/int/float/bool is left out.
        """
        return {k: v for k, v in self.metadata.items() if isinstance(v, _SCALAR_TYPES)}


class IndexerConfig(BaseModel):
    """Explicit destination passed into :func:`~pdf_ingest.ingestion.indexer.index_chunks`."""

    index_name: str = ""
    namespace: str = DEFAULT_NAMESPACE
    embed_batch_size: int = Field(default=64, gt=0)
    upsert_batch_size: int = Field(default=100, gt=0)

    @field_validator("namespace", mode="before")
    @classmethod
    def _fallback_namespace(cls, value: Any) -> Any:
        return value or DEFAULT_NAMESPACE


class IngestionResult(BaseModel):
    """Summary of a completed run."""

    documents_loaded: int
    chunks_created: int
    entries_upserted: int
    index_name: str
    namespace: str
    elapsed_seconds: float = 0.0

    def __str__(self) -> str:  # noqa: D105
        return (
            f"Ingested {self.entries_upserted} chunks from {self.documents_loaded} documents "
            f"→ {self.index_name or '?'}/{self.namespace} in {self.elapsed_seconds:.1f}s"
        )
