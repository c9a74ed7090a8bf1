# src/domain/models.py

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Document:
    """
    A stored knowledge-base document. Only `content` is indexed;
    the retrieval engine reads documents and never mutates them.
    """
    id: str
    title: str
    content: Optional[str] = ""
    timestamp: datetime = field(default_factory=_utc_now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class SearchResult:
    """
    A document that matched a query, with its cosine similarity score.
    """
    document: Document
    score: float

    def to_dict(self) -> dict:
        data = self.document.to_dict()
        data["score"] = self.score
        return data

    def __repr__(self) -> str:
        preview = (self.document.content or "")[:80].replace("\n", " ")
        return (
            f"SearchResult(score={self.score:.4f}, "
            f"title='{self.document.title}', "
            f"preview='{preview}...')"
        )


class ContextStatus(str, Enum):
    NO_DOCUMENTS = "no_documents"
    NO_MATCHES = "no_matches"
    READY = "ready"


@dataclass(frozen=True)
class RetrievalContext:
    """
    Everything a caller needs to ask a generative model a grounded question.
    `prompt` is only set when status is READY.
    """
    query: str
    status: ContextStatus
    results: List[SearchResult] = field(default_factory=list)
    prompt: Optional[str] = None
