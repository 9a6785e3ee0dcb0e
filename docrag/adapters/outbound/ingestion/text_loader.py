"""Manual text entry."""

from ....common.utils import clean_text
from ....core.domain import DocumentMetadata, RawDocument, SourceKind
from ....core.domain.exceptions import EmptyDocumentError
from .ids import make_document_id


class TextLoader:
    """Wraps pasted text as a raw document."""

    def load(self, name: str, content: str, doc_id: str | None = None) -> RawDocument:
        text = clean_text(content).strip()
        if not text:
            raise EmptyDocumentError("Document content cannot be empty", context={"name": name})

        title = name.strip() or "Untitled"
        return RawDocument(
            doc_id=doc_id or make_document_id(SourceKind.TEXT, title),
            content=text,
            metadata=DocumentMetadata(
                name=title,
                source_kind=SourceKind.TEXT,
                size_bytes=len(text.encode("utf-8")),
            ),
        )
