"""Document id generation for ingested content."""

import hashlib
import time

from ....core.domain import SourceKind


def make_document_id(kind: SourceKind, key: str, *, unique: bool = True) -> str:
    """Build a document id from the source kind and a stable key.

    Args:
        kind: Source kind, used as the id prefix.
        key: Name, path or URL the document came from.
        unique: Append a millisecond timestamp so repeated uploads of the
            same name become separate documents.

    Returns:
        Id such as ``file_1a2b3c4d_1718000000000`` or ``website_1a2b3c4d``.
    """
    digest = hashlib.md5(key.encode("utf-8")).hexdigest()[:8]
    if unique:
        return f"{kind.value}_{digest}_{time.time_ns() // 1_000_000}"
    return f"{kind.value}_{digest}"
