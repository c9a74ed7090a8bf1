# tests/test_prompt_builder.py

from src.application.prompt_builder import build_context_block, build_prompt
from src.domain.models import Document, SearchResult


def _result(title: str, content: str, score: float) -> SearchResult:
    return SearchResult(document=Document(id=title, title=title, content=content), score=score)


def test_context_block_joins_documents_in_rank_order():
    results = [_result("First", "one", 0.9), _result("Second", "two", 0.4)]

    block = build_context_block(results)

    assert block == "Document: First\nContent: one\n\n---\n\nDocument: Second\nContent: two"


def test_prompt_contains_context_and_question():
    prompt = build_prompt("What is {braces}?", [_result("Doc", "body text", 0.5)])

    assert "based ONLY on the following context" in prompt
    assert "Context:\nDocument: Doc\nContent: body text" in prompt
    assert "Question: What is {braces}?" in prompt
