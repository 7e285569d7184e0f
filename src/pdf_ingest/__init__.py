"""pdf_ingest — load PDFs, chunk them and upsert their embeddings into a vector index."""

__version__ = "0.1.0"
