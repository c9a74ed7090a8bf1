# src/application/prompt_builder.py

from typing import List

from src.domain.models import SearchResult


CONTEXT_SEPARATOR = "\n\n---\n\n"

PROMPT_TEMPLATE = (
    "You are a helpful assistant. Answer the user's question based ONLY on the "
    "following context. If the answer cannot be found in the context, say so.\n"
    "\n"
    "Context:\n"
    "{context}\n"
    "\n"
    "Question: {query}\n"
    "\n"
    "Provide a clear, concise answer based on the context provided."
)


def build_context_block(results: List[SearchResult]) -> str:
    """Render retrieved documents as a single context string, best match first."""
    return CONTEXT_SEPARATOR.join(
        f"Document: {result.document.title}\nContent: {result.document.content or ''}"
        for result in results
    )


def build_prompt(query: str, results: List[SearchResult]) -> str:
    return PROMPT_TEMPLATE.format(context=build_context_block(results), query=query)
