# tests/test_document_store.py

import pytest

from src.domain.models import Document
from src.infrastructure.document_store import InMemoryDocumentStore
from src.infrastructure.fingerprint import compute_text_hash, fingerprint_documents


def _doc(doc_id: str, content: str = "some content") -> Document:
    return Document(id=doc_id, title=doc_id.upper(), content=content)


def test_list_keeps_insertion_order():
    store = InMemoryDocumentStore()
    for doc_id in ("c", "a", "b"):
        store.add(_doc(doc_id))

    assert [d.id for d in store.list()] == ["c", "a", "b"]
    assert store.count() == 3


def test_duplicate_id_rejected():
    store = InMemoryDocumentStore([_doc("a")])

    with pytest.raises(ValueError, match="already exists"):
        store.add(_doc("a", "different"))


def test_delete_returns_document():
    store = InMemoryDocumentStore([_doc("a"), _doc("b")])

    removed = store.delete("a")

    assert removed.id == "a"
    assert store.get("a") is None
    assert [d.id for d in store.list()] == ["b"]


def test_delete_unknown_raises_key_error():
    store = InMemoryDocumentStore()

    with pytest.raises(KeyError):
        store.delete("nope")


def test_fingerprint_tracks_content_and_order():
    a, b = _doc("a", "alpha"), _doc("b", "beta")

    assert fingerprint_documents([a, b]) == fingerprint_documents([_doc("a", "alpha"), _doc("b", "beta")])
    assert fingerprint_documents([a, b]) != fingerprint_documents([b, a])
    assert fingerprint_documents([a]) != fingerprint_documents([_doc("a", "alpha!")])


def test_text_hash_handles_missing_content():
    assert compute_text_hash(None) == compute_text_hash("")
    assert len(compute_text_hash("hello")) == 64
