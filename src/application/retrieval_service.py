# src/application/retrieval_service.py

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from src.application.prompt_builder import build_prompt
from src.domain.interfaces import DocumentStorePort
from src.domain.models import ContextStatus, Document, RetrievalContext, SearchResult
from src.infrastructure import tfidf_index
from src.infrastructure.fingerprint import fingerprint_documents


class RetrievalService:
    """
    Core use case: find the documents most relevant to a free-text question
    and assemble a grounded prompt from them.

    Lifecycle:
    - The TF-IDF index is a value built from a snapshot of the store
    - It is rebuilt lazily, only when the collection fingerprint changes
    - Sending the prompt to a generative model is the caller's job
    """

    def __init__(self, document_store: DocumentStorePort, top_k: int = tfidf_index.DEFAULT_TOP_K):
        if top_k < 1:
            raise ValueError("top_k must be a positive integer.")
        self._document_store = document_store
        self._top_k = top_k
        self._index: Optional[tfidf_index.TfidfIndex] = None
        self._fingerprint: Optional[str] = None

    @property
    def top_k(self) -> int:
        return self._top_k

    def add_document(self, title: str, content: str) -> Document:
        """Create and store a new document. Blank title or content is rejected."""
        if not title or not title.strip():
            raise ValueError("Document title cannot be empty.")
        if not content or not content.strip():
            raise ValueError("Document content cannot be empty.")

        document = Document(
            id=uuid.uuid4().hex,
            title=title.strip(),
            content=content,
            timestamp=datetime.now(timezone.utc),
        )
        self._document_store.add(document)
        print(f"[RetrievalService] Added document '{document.title}' ({document.id})")
        return document

    def delete_document(self, document_id: str) -> Document:
        document = self._document_store.delete(document_id)
        print(f"[RetrievalService] Deleted document '{document.title}' ({document.id})")
        return document

    def index(self) -> tfidf_index.TfidfIndex:
        """Return an index matching the current store contents, rebuilding if stale."""
        documents = self._document_store.list()
        fingerprint = fingerprint_documents(documents)

        if self._index is None or fingerprint != self._fingerprint:
            self._index = tfidf_index.build(documents)
            self._fingerprint = fingerprint
            print(
                f"[RetrievalService] Index built: {len(self._index)} documents, "
                f"{len(self._index.vocabulary)} terms."
            )

        return self._index

    def search(self, query: str, top_k: Optional[int] = None) -> List[SearchResult]:
        return tfidf_index.retrieve(
            self.index(),
            query,
            top_k=self._top_k if top_k is None else top_k,
        )

    def prepare_context(self, query: str, top_k: Optional[int] = None) -> RetrievalContext:
        """
        Retrieve sources for `query` and build the prompt a model should answer.
        """
        if self._document_store.count() == 0:
            return RetrievalContext(query=query, status=ContextStatus.NO_DOCUMENTS)

        results = self.search(query, top_k=top_k)
        if not results:
            return RetrievalContext(query=query, status=ContextStatus.NO_MATCHES)

        return RetrievalContext(
            query=query,
            status=ContextStatus.READY,
            results=results,
            prompt=build_prompt(query, results),
        )
