# src/infrastructure/text_normalizer.py

import re
from typing import List, Optional


MIN_TERM_LENGTH = 3

_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)
_WHITESPACE = re.compile(r"\s+", re.ASCII)


def normalize(text: Optional[str]) -> List[str]:
    """
    Turn raw text into indexable terms.

    Lowercase, replace punctuation with spaces, collapse whitespace, split,
    and drop tokens shorter than MIN_TERM_LENGTH. Order and duplicates are
    kept because term frequency depends on them.
    """
    if not text:
        return []

    cleaned = _NON_WORD.sub(" ", text.lower())
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    if not cleaned:
        return []

    return [token for token in cleaned.split(" ") if len(token) >= MIN_TERM_LENGTH]
