# src/infrastructure/document_store.py

from typing import Dict, List, Optional

from src.domain.interfaces import DocumentStorePort
from src.domain.models import Document


class InMemoryDocumentStore(DocumentStorePort):
    """
    Insertion-ordered, process-local document collection.
    Nothing is persisted between sessions.
    """

    def __init__(self, documents: Optional[List[Document]] = None):
        self._documents: Dict[str, Document] = {}
        for document in documents or []:
            self.add(document)

    def add(self, document: Document) -> None:
        if document.id in self._documents:
            raise ValueError(f"Document with id '{document.id}' already exists.")
        self._documents[document.id] = document

    def delete(self, document_id: str) -> Document:
        try:
            return self._documents.pop(document_id)
        except KeyError:
            raise KeyError(f"Document not found: {document_id}") from None

    def get(self, document_id: str) -> Optional[Document]:
        return self._documents.get(document_id)

    def list(self) -> List[Document]:
        return list(self._documents.values())

    def count(self) -> int:
        return len(self._documents)
