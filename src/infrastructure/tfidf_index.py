# src/infrastructure/tfidf_index.py

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

import numpy as np

from src.domain.models import Document, SearchResult
from src.infrastructure.text_normalizer import normalize


DEFAULT_TOP_K = 3


@dataclass(frozen=True, eq=False)
class TfidfIndex:
    """
    Immutable TF-IDF index over one snapshot of a document collection.

    `weights[i]` is the sparse term -> weight mapping of `documents[i]`;
    `matrix` holds the same weights densely, one row per document and one
    column per vocabulary term. Rebuild instead of updating.
    """
    documents: Tuple[Document, ...]
    weights: Tuple[Dict[str, float], ...]
    vocabulary: Dict[str, int]
    matrix: np.ndarray = field(repr=False)
    norms: np.ndarray = field(repr=False)

    def __len__(self) -> int:
        return len(self.documents)


def build(documents: Sequence[Document]) -> TfidfIndex:
    """Compute TF-IDF weight vectors for every document, keeping input order."""
    documents = tuple(documents)
    doc_terms = [normalize(doc.content) for doc in documents]

    doc_freq: Counter = Counter()
    for terms in doc_terms:
        doc_freq.update(set(terms))

    # An empty collection still divides by 1
    doc_count = len(documents) or 1

    weights: List[Dict[str, float]] = []
    for terms in doc_terms:
        term_counts = Counter(terms)
        total = max(1, len(terms))
        weights.append({
            term: (count / total) * math.log(doc_count / doc_freq[term])
            for term, count in term_counts.items()
        })

    vocabulary: Dict[str, int] = {}
    for terms in doc_terms:
        for term in terms:
            vocabulary.setdefault(term, len(vocabulary))

    matrix = np.zeros((len(documents), len(vocabulary)), dtype=np.float64)
    for row, vector in enumerate(weights):
        for term, weight in vector.items():
            matrix[row, vocabulary[term]] = weight

    return TfidfIndex(
        documents=documents,
        weights=tuple(weights),
        vocabulary=vocabulary,
        matrix=matrix,
        norms=np.linalg.norm(matrix, axis=1),
    )


def retrieve(index: TfidfIndex, query: str, top_k: int = DEFAULT_TOP_K) -> List[SearchResult]:
    """
    Rank indexed documents against a free-text query by cosine similarity.

    The query vector uses raw term counts (no idf). Only strictly positive
    scores are returned, highest first; equal scores keep collection order.
    """
    if not index.documents or top_k <= 0:
        return []
    if not query or not query.strip():
        return []

    query_counts = Counter(normalize(query))
    if not query_counts:
        return []

    # Out-of-vocabulary terms contribute to the query magnitude only
    query_norm = math.sqrt(sum(count * count for count in query_counts.values()))
    query_vector = np.zeros(len(index.vocabulary), dtype=np.float64)
    for term, count in query_counts.items():
        column = index.vocabulary.get(term)
        if column is not None:
            query_vector[column] = count

    dots = index.matrix @ query_vector
    denominators = index.norms * query_norm
    scores = np.divide(
        dots,
        denominators,
        out=np.zeros_like(dots),
        where=denominators > 0,
    )
    scores = np.minimum(scores, 1.0)

    candidates = np.flatnonzero(scores > 0)
    order = candidates[np.argsort(-scores[candidates], kind="stable")]

    return [
        SearchResult(document=index.documents[i], score=float(scores[i]))
        for i in order[:top_k]
    ]
