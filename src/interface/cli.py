# src/interface/cli.py

from typing import List
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich import box
from rich.table import Table
from rich.text import Text

from src.domain.models import SearchResult


console = Console()

CONTENT_PREVIEW_CHARS = 600


def display_welcome_banner() -> None:
    console.print(Panel.fit(
        "[bold cyan]📚 Document Q&A Retrieval[/bold cyan]\n"
        "[dim]Powered by TF-IDF + cosine similarity[/dim]",
        box=box.DOUBLE,
        border_style="cyan",
    ))


def display_indexing_status(num_documents: int, num_terms: int) -> None:
    console.print(
        f"\n[green]✓[/green] Index built — [bold]{num_documents}[/bold] documents, "
        f"[bold]{num_terms}[/bold] terms ready for search.\n"
    )


def prompt_for_query() -> str:
    return Prompt.ask("\n[bold yellow]❓ Your question[/bold yellow]")


def display_results(query: str, results: List[SearchResult]) -> None:
    if not results:
        console.print(
            f"\n[yellow]⚠ No relevant documents found for[/yellow] [italic]\"{query}\"[/italic]. "
            "[dim]Try rephrasing or adding more documents.[/dim]\n"
        )
        return

    summary = Table(box=box.SIMPLE_HEAD, title=f"Sources for \"{query}\"", title_justify="left")
    summary.add_column("#", justify="right", style="dim")
    summary.add_column("Document", style="bold")
    summary.add_column("Score", justify="right")
    summary.add_column("Added", style="dim")
    for rank, result in enumerate(results, start=1):
        color = _score_to_color(result.score)
        summary.add_row(
            str(rank),
            escape(result.document.title),
            f"[{color}]{result.score:.4f}[/{color}]",
            result.document.timestamp.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(summary)

    for rank, result in enumerate(results, start=1):
        console.print(_excerpt_panel(rank, result))


def _excerpt_panel(rank: int, result: SearchResult) -> Panel:
    content = result.document.content or ""
    if len(content) > CONTENT_PREVIEW_CHARS:
        content = content[:CONTENT_PREVIEW_CHARS] + "..."

    return Panel(
        Text(content),
        title=Text(f"#{rank} {result.document.title}"),
        title_align="left",
        border_style=_score_to_color(result.score),
        box=box.ROUNDED,
    )


def display_prompt(prompt: str) -> None:
    console.print(Panel(
        Text(prompt),
        title="[bold]Grounded prompt[/bold]",
        border_style="dim",
        box=box.ROUNDED,
    ))


def display_error(message: str) -> None:
    console.print(f"\n[bold red]✗ Error:[/bold red] {message}\n")


def ask_continue() -> bool:
    return Confirm.ask("[dim]Ask another question?[/dim]", default=True)


def _score_to_color(score: float) -> str:
    # TF-IDF cosine scores run lower than embedding similarities
    if score >= 0.5:
        return "green"
    elif score >= 0.2:
        return "yellow"
    else:
        return "red"
