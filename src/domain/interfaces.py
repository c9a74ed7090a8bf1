# src/domain/interfaces.py

from abc import ABC, abstractmethod
from typing import List, Optional

from .models import Document


class DocumentStorePort(ABC):
    """
    Port for the document collection that retrieval runs against.
    Implementations must return documents in a stable order, since
    score ties are broken by collection order.
    """

    @abstractmethod
    def add(self, document: Document) -> None: ...

    @abstractmethod
    def delete(self, document_id: str) -> Document: ...

    @abstractmethod
    def get(self, document_id: str) -> Optional[Document]: ...

    @abstractmethod
    def list(self) -> List[Document]: ...

    @abstractmethod
    def count(self) -> int: ...
