# main.py

import argparse
import sys

from src.application.retrieval_service import RetrievalService
from src.domain.models import ContextStatus
from src.infrastructure.document_loader import DocumentLoader
from src.infrastructure.document_store import InMemoryDocumentStore
from src.interface.cli import (
    display_welcome_banner,
    display_indexing_status,
    prompt_for_query,
    display_results,
    display_prompt,
    display_error,
    ask_continue,
)


DATA_DIRECTORY = "data"
TOP_K_RESULTS = 3


def main() -> None:
    parser = argparse.ArgumentParser(description="Interactive TF-IDF document search.")
    parser.add_argument("--data-dir", default=DATA_DIRECTORY)
    parser.add_argument("--top-k", type=int, default=TOP_K_RESULTS)
    parser.add_argument(
        "--show-prompt",
        action="store_true",
        help="Print the grounded prompt assembled from the retrieved documents.",
    )
    args = parser.parse_args()

    display_welcome_banner()

    # ── 1. Load documents ────────────────────────────────────────────────────
    try:
        documents = DocumentLoader().load_directory(args.data_dir)
    except FileNotFoundError as error:
        display_error(str(error))
        sys.exit(1)

    if not documents:
        display_error(f"No supported documents found in '{args.data_dir}/'.")
        sys.exit(1)

    try:
        service = RetrievalService(InMemoryDocumentStore(documents), top_k=args.top_k)
    except ValueError as error:
        display_error(str(error))
        sys.exit(1)

    # ── 2. Build the index once up front ─────────────────────────────────────
    index = service.index()
    display_indexing_status(len(index), len(index.vocabulary))

    # ── 3. Interactive search loop ────────────────────────────────────────────
    while True:
        query = prompt_for_query()
        context = service.prepare_context(query)
        display_results(query, context.results)

        if args.show_prompt and context.status is ContextStatus.READY:
            display_prompt(context.prompt)

        if not ask_continue():
            break


if __name__ == "__main__":
    main()
