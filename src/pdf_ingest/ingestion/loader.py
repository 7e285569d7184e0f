"""Document loaders — thin wrappers around LangChain document loaders.

Parsers are looked up by file extension in a :class:`ParserRegistry`;
only files whose extension is registered are loaded.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from langchain_community.document_loaders import PyPDFLoader, TextLoader

from pdf_ingest.errors import LoadError

if TYPE_CHECKING:
    from langchain_core.documents import Document

logger = logging.getLogger(__name__)


class DocumentParser(ABC):
    """Turns one file into one or more LangChain ``Document`` objects."""

    @abstractmethod
    def parse(self, path: Path) -> list[Document]:
        """Parse *path* and return its documents (metadata includes ``source``)."""
        ...


class PdfParser(DocumentParser):
    """One document per PDF page, via ``PyPDFLoader``."""

    def parse(self, path: Path) -> list[Document]:
        return PyPDFLoader(str(path)).load()


class TextParser(DocumentParser):
    """Whole file as a single document, via ``TextLoader``."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def parse(self, path: Path) -> list[Document]:
        return TextLoader(str(path), encoding=self.encoding).load()


def _normalise_extension(extension: str) -> str:
    extension = extension.strip().lower()
    if not extension:
        raise ValueError("File extension must not be empty")
    return extension if extension.startswith(".") else f".{extension}"


class ParserRegistry:
    """Mapping from file extension (``".pdf"``) to the parser handling it."""

    def __init__(self, parsers: dict[str, DocumentParser] | None = None) -> None:
        self._parsers: dict[str, DocumentParser] = {}
        for extension, parser in (parsers or {}).items():
            self.register(extension, parser)

    def register(self, extension: str, parser: DocumentParser) -> None:
        """Associate *extension* with *parser*, replacing any previous one."""
        self._parsers[_normalise_extension(extension)] = parser

    def get(self, extension: str) -> DocumentParser | None:
        return self._parsers.get(_normalise_extension(extension))

    def supports(self, path: str | Path) -> bool:
        suffix = Path(path).suffix
        return bool(suffix) and _normalise_extension(suffix) in self._parsers

    @property
    def extensions(self) -> list[str]:
        return sorted(self._parsers)

    def __contains__(self, extension: object) -> bool:
        return isinstance(extension, str) and _normalise_extension(extension) in self._parsers

    def __len__(self) -> int:
        return len(self._parsers)


def default_registry() -> ParserRegistry:
    """Registry handling PDF files only."""
    return ParserRegistry({".pdf": PdfParser()})


def _iter_files(root: Path, recursive: bool) -> Iterator[Path]:
    pattern = "**/*" if recursive else "*"
    for path in sorted(root.glob(pattern)):
        if any(part.startswith(".") for part in path.relative_to(root).parts):
            continue
        if not path.is_file():
            continue
        yield path


def load_directory(
    path: str | Path,
    registry: ParserRegistry | None = None,
    *,
    recursive: bool = False,
) -> list[Document]:
    """Load every supported document found in *path*.

    Parameters
    ----------
    path:
        Directory containing source documents.
    registry:
        Extension → parser mapping.  Defaults to :func:`default_registry`.
    recursive:
        Descend into sub-directories when ``True``.

    Returns
    -------
    list[Document]
        Flat list of LangChain ``Document`` objects, in sorted file order.

    Raises
    ------
    LoadError
        If *path* is not a readable directory or any parser fails.
    """
    registry = registry if registry is not None else default_registry()
    root = Path(path)
    if not root.is_dir():
        raise LoadError(f"Document directory not found: {root}")

    try:
        files = list(_iter_files(root, recursive))
    except OSError as exc:
        raise LoadError(f"Cannot read document directory {root}: {exc}") from exc

    documents: list[Document] = []
    for file_path in files:
        parser = registry.get(file_path.suffix) if file_path.suffix else None
        if parser is None:
            logger.debug("Skipping unsupported file %s", file_path)
            continue
        try:
            parsed = parser.parse(file_path)
        except Exception as exc:
            raise LoadError(f"Failed to parse {file_path}: {exc}") from exc
        for doc in parsed:
            doc.metadata.setdefault("source", str(file_path))
        logger.debug("Parsed %s into %d document(s)", file_path, len(parsed))
        documents.extend(parsed)

    logger.info("Loaded raw documents: %d", len(documents))
    return documents
