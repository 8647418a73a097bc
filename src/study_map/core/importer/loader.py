"""Read .ktree files from disk."""

from pathlib import Path

from loguru import logger

from study_map.config import DOCUMENT_SUFFIX
from study_map.core.importer.json_reader import load_document
from study_map.core.tree.navigation import count_nodes
from study_map.errors import InvalidFormatError, UnsupportedFileError
from study_map.models.node import Document


def has_document_suffix(path: Path) -> bool:
    return path.suffix.lower() == DOCUMENT_SUFFIX


def read_document_file(path: Path) -> Document:
    """Read and parse a single .ktree file.

    Raises:
        UnsupportedFileError: If the file does not carry the .ktree suffix.
        InvalidFormatError: If the file cannot be read or parsed.
    """
    if not has_document_suffix(path):
        msg = f"Not a {DOCUMENT_SUFFIX} file: {path.name}"
        raise UnsupportedFileError(msg)

    try:
        raw = path.read_bytes()
    except OSError as e:
        msg = f"Cannot read {path}: {e.strerror or e}"
        raise InvalidFormatError(msg) from e

    doc = load_document(raw, source=path.name)
    logger.info("Loaded {} ({} nodes)", path.name, count_nodes(doc.root))
    return doc


def find_document_files(directory: Path) -> list[Path]:
    """List the .ktree files directly inside a directory, sorted by name."""
    if not directory.is_dir():
        return []
    return sorted(p for p in directory.iterdir() if p.is_file() and has_document_suffix(p))
