"""Load documents from local files."""

import logging
from pathlib import Path

from pypdf import PdfReader

from ....common.utils import clean_text
from ....core.domain import DocumentMetadata, RawDocument, SourceKind
from ....core.domain.exceptions import EmptyDocumentError, FileLoadError
from .ids import make_document_id

logger = logging.getLogger(__name__)


class FileLoader:
    """Reads text from plain-text and PDF files.

    PDFs are parsed with pypdf. Everything else is decoded as UTF-8 with
    undecodable bytes replaced.
    """

    PDF_SUFFIXES = frozenset({".pdf"})

    def load(self, path: Path | str, doc_id: str | None = None) -> RawDocument:
        """Load one file.

        Args:
            path: File to read.
            doc_id: Explicit id, e.g. to replace an existing document.

        Returns:
            RawDocument with the file name and size in its metadata.

        Raises:
            FileLoadError: File is missing or cannot be parsed.
            EmptyDocumentError: File contains no text.
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise FileLoadError(f"File not found: {file_path}", context={"path": str(file_path)})

        try:
            raw = file_path.read_bytes()
            if file_path.suffix.lower() in self.PDF_SUFFIXES:
                text = self._extract_pdf(file_path)
            else:
                text = raw.decode("utf-8", errors="replace")
        except FileLoadError:
            raise
        except Exception as e:
            raise FileLoadError(
                f"Failed to read {file_path.name}",
                cause=e,
                context={"path": str(file_path)},
            ) from e

        text = clean_text(text).strip()
        if not text:
            raise EmptyDocumentError(
                f"No text found in {file_path.name}", context={"path": str(file_path)}
            )

        logger.info("Loaded %s (%d bytes)", file_path.name, len(raw))
        return RawDocument(
            doc_id=doc_id or make_document_id(SourceKind.FILE, file_path.name),
            content=text,
            metadata=DocumentMetadata(
                name=file_path.name,
                source_kind=SourceKind.FILE,
                size_bytes=len(raw),
                path=str(file_path),
            ),
        )

    @staticmethod
    def _extract_pdf(file_path: Path) -> str:
        try:
            reader = PdfReader(file_path)
            pages = [page.extract_text() or "" for page in reader.pages]
        except Exception as e:
            raise FileLoadError(
                f"Failed to extract text from PDF {file_path.name}",
                cause=e,
                context={"path": str(file_path)},
            ) from e
        return "\n\n".join(page for page in pages if page.strip())
