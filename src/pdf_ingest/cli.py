"""Command-line entry point: ``pdf-ingest`` / ``python -m pdf_ingest``."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from pdf_ingest.config import Settings
from pdf_ingest.errors import IngestError
from pdf_ingest.pipeline import run_ingestion

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdf-ingest",
        description="Load PDFs from a directory, chunk them and upsert their embeddings.",
    )
    parser.add_argument("--docs-dir", help="Directory containing the PDF files (default: docs)")
    parser.add_argument("--index-name", help="Destination index / collection name")
    parser.add_argument("--namespace", help="Destination namespace (default: default-namespace)")
    parser.add_argument(
        "--recursive",
        action="store_true",
        default=None,
        help="Also load files from sub-directories",
    )
    parser.add_argument(
        "--clear-namespace",
        action="store_true",
        default=None,
        help="Delete existing vectors in the namespace before upserting",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="Load and split only; do not embed or write anything",
    )
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Environment settings with command-line overrides applied."""
    overrides = {
        "docs_dir": args.docs_dir,
        "pinecone_namespace": args.namespace,
        "recursive": args.recursive,
        "clear_namespace": args.clear_namespace,
        "dry_run": args.dry_run,
        "log_level": args.log_level,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    settings = Settings(**overrides)
    if args.index_name:
        field = "chroma_collection" if settings.vector_store == "chroma" else "pinecone_index_name"
        settings = Settings(**{**overrides, field: args.index_name})
    return settings


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = settings_from_args(args)
    except ValidationError as exc:
        print(f"Invalid configuration:\n{exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        result = run_ingestion(settings)
    except IngestError as exc:
        print(exc.user_message, file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
