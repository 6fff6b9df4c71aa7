"""Plain-text file ingestion."""

import logging
import mimetypes
from pathlib import Path
from typing import Optional, Union

from ..core.config import DEFAULT_MAX_FILE_SIZE
from ..core.exceptions import DocumentProcessingError
from ..models.document import Document

logger = logging.getLogger(__name__)


def is_text_file(path: Path) -> bool:
    """Accept ``.txt`` files and anything whose guessed MIME type is ``text/*``."""
    if path.suffix.lower() == ".txt":
        return True
    mime_type, _ = mimetypes.guess_type(path.name)
    return bool(mime_type and mime_type.startswith("text/"))


def load_text_document(
    path: Union[str, Path],
    document_id: Optional[str] = None,
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
) -> Document:
    """
    Read a text file into a Document.

    Args:
        path: File to read
        document_id: Identifier to use; defaults to the file name
        max_file_size: Largest accepted file size in bytes

    Returns:
        Document titled with the file stem

    Raises:
        DocumentProcessingError: If the file is missing, too large, not text or not UTF-8
    """
    path = Path(path)

    if not path.is_file():
        raise DocumentProcessingError(f"File not found: {path}")

    if not is_text_file(path):
        raise DocumentProcessingError(f"Unsupported file type: {path.name}. Upload a text file (.txt)")

    size = path.stat().st_size
    if size > max_file_size:
        raise DocumentProcessingError(
            f"File too large: {path.name} is {size} bytes, limit is {max_file_size}"
        )

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentProcessingError(f"Failed to read {path.name}: {e}") from e

    logger.debug(f"Loaded {path.name} ({size} bytes)")
    return Document(id=document_id or path.name, title=path.stem, content=content)
