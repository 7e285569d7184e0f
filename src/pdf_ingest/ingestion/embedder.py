"""Embedding provider selection — single place to swap providers.

Supports two providers:

1. **OpenAI** (default) — ``OpenAIEmbeddings``; set ``OPENAI_API_KEY``.
2. **HuggingFace** — a local sentence-transformer via
   ``HuggingFaceEmbeddings``, no API key needed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings

    from pdf_ingest.config import Settings

logger = logging.getLogger(__name__)


def get_embedding_function(settings: Settings) -> Embeddings:
    """Return the configured LangChain embedding function."""
    provider = settings.embedding_provider
    logger.info("Using %s embeddings (model=%s)", provider, settings.embedding_model)

    if provider == "openai":
        from langchain_openai import OpenAIEmbeddings

        kwargs: dict = {"model": settings.embedding_model}
        if settings.openai_api_key:
            kwargs["api_key"] = settings.openai_api_key
        return OpenAIEmbeddings(**kwargs)

    if provider == "huggingface":
        from langchain_huggingface import HuggingFaceEmbeddings

        return HuggingFaceEmbeddings(model_name=settings.embedding_model)

    raise ValueError(f"Unsupported embedding_provider: {provider!r}")
