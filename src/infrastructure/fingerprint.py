import hashlib
from typing import Iterable

from src.domain.models import Document


def compute_text_hash(text: str) -> str:
    """
    Compute SHA-256 hash of a text's UTF-8 bytes.
    """
    return hashlib.sha256((text or "").encode("utf-8")).hexdigest()


def fingerprint_documents(documents: Iterable[Document]) -> str:
    """
    Compute a single SHA-256 digest for an ordered document collection.
    Used to detect whether the collection changed since the last index build.
    Order matters: it decides how score ties are broken.
    """
    sha256 = hashlib.sha256()
    for document in documents:
        sha256.update(document.id.encode("utf-8"))
        sha256.update(b"\x00")
        sha256.update(compute_text_hash(document.content).encode("ascii"))
        sha256.update(b"\n")
    return sha256.hexdigest()
