"""CLI interface for docrag."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from ....application.knowledge_base import KnowledgeBase
from ....common.exception_handler import format_exception_json
from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain import RAGResponse
from ....core.services import RAGPipeline

app = typer.Typer(
    name="docrag",
    help="docrag - ask questions about your own documents",
    add_completion=False,
)

console = Console()


def handle_cli_error(exc: Exception) -> None:
    """Display an error with its code, or the full JSON in debug mode."""
    error_data = format_exception_json(exc, include_trace=settings.debug)

    if settings.debug:
        console.print(
            Panel(
                json.dumps(error_data, indent=2, default=str),
                title="[bold red]Error Details[/]",
                border_style="red",
            )
        )
        return

    error_code = error_data["error"].get("code", "UNKNOWN")
    console.print(f"[red]Error [{error_code}]:[/] {error_data['error']['message']}")
    console.print("[dim]Set DEBUG=true for full details[/]")


def build_session() -> tuple[KnowledgeBase, RAGPipeline]:
    """Create a fresh in-memory knowledge base and pipeline for this process."""
    from ....composition.container import get_knowledge_base, get_pipeline

    setup_logging(settings.log_level, json_format=settings.log_json)
    return get_knowledge_base(), get_pipeline()


def load_sources(kb: KnowledgeBase, files: list[Path] | None, urls: list[str] | None) -> int:
    """Index the given files and URLs, reporting failures without stopping."""
    loaded = 0
    for path in files or []:
        try:
            document = kb.add_file(path)
            console.print(f"[green]Indexed[/] {document.metadata.name} ({document.token_count} tokens)")
            loaded += 1
        except Exception as exc:
            handle_cli_error(exc)
    for url in urls or []:
        try:
            with console.status(f"[bold green]Scraping {url}...[/]"):
                document = kb.add_website(url)
            console.print(f"[green]Indexed[/] {document.metadata.name} ({document.token_count} tokens)")
            loaded += 1
        except Exception as exc:
            handle_cli_error(exc)
    return loaded


def render_response(response: RAGResponse, show_context: bool = False) -> None:
    console.print(Panel(Markdown(response.answer), title="[bold]Answer[/]", border_style="green"))

    if response.sources:
        table = Table(title="Sources", show_lines=False)
        table.add_column("#", justify="right")
        table.add_column("Document")
        table.add_column("Kind")
        table.add_column("Relevance", justify="right")
        for rank, source in enumerate(response.sources, start=1):
            meta = source.document.metadata
            table.add_row(str(rank), meta.name, meta.source_kind.value, f"{source.similarity:.0%}")
        console.print(table)

    console.print(
        f"[dim]Confidence {response.context.confidence}% | "
        f"{response.processing_time_ms}ms[/]"
    )
    if show_context and response.context.context_window:
        console.print(Panel(response.context.context_window, title="Context window", border_style="blue"))


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to answer"),
    files: Optional[list[Path]] = typer.Option(None, "--file", "-f", help="File to index (repeatable)"),
    urls: Optional[list[str]] = typer.Option(None, "--url", "-u", help="Web page to index (repeatable)"),
    top_k: int = typer.Option(settings.top_k_results, "--top-k", "-k", help="Documents to retrieve"),
    show_context: bool = typer.Option(False, "--show-context", help="Print the context window"),
) -> None:
    """Index the given sources and answer one question."""
    kb, pipeline = build_session()
    load_sources(kb, files, urls)

    with console.status("[bold green]Thinking...[/]"):
        response = pipeline.query(question, top_k=top_k)
    render_response(response, show_context=show_context)


@app.command()
def chat(
    files: Optional[list[Path]] = typer.Option(None, "--file", "-f", help="File to index (repeatable)"),
    urls: Optional[list[str]] = typer.Option(None, "--url", "-u", help="Web page to index (repeatable)"),
    top_k: int = typer.Option(settings.top_k_results, "--top-k", "-k", help="Documents to retrieve"),
) -> None:
    """Start an interactive session over the given sources."""
    console.print(
        Panel.fit(
            "[bold]docrag[/]\n"
            "[dim]Ask questions about the indexed documents.[/]\n\n"
            "Commands:\n"
            "  /add <path>   index a file\n"
            "  /url <url>    index a web page\n"
            "  /stats        show knowledge base statistics\n\n"
            "[dim]Type 'quit' or 'exit' to leave[/]",
            title="Welcome",
            border_style="blue",
        )
    )

    kb, pipeline = build_session()
    load_sources(kb, files, urls)

    while True:
        query = Prompt.ask("\n[bold cyan]You[/]")

        if query.lower() in ("quit", "exit", "q"):
            console.print("[dim]Goodbye![/]")
            break
        if not query.strip():
            continue

        if query.startswith("/add "):
            load_sources(kb, [Path(query[5:].strip())], None)
            continue
        if query.startswith("/url "):
            load_sources(kb, None, [query[5:].strip()])
            continue
        if query.strip() == "/stats":
            print_stats(pipeline)
            continue

        with console.status("[bold green]Thinking...[/]"):
            response = pipeline.query(query, top_k=top_k)
        render_response(response)


def print_stats(pipeline: RAGPipeline) -> None:
    stats = pipeline.get_stats()
    table = Table(title="Knowledge base")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Documents", str(stats.document_count))
    table.add_row("Total tokens", str(stats.total_tokens))
    table.add_row("Average tokens per document", str(stats.average_tokens_per_doc))
    table.add_row("Vector dimensions", str(stats.vector_dimensions))
    table.add_row("Pipeline version", stats.pipeline_version)
    console.print(table)
    console.print("[dim]Features: " + ", ".join(stats.features) + "[/]")


@app.command()
def stats(
    files: Optional[list[Path]] = typer.Option(None, "--file", "-f", help="File to index (repeatable)"),
    urls: Optional[list[str]] = typer.Option(None, "--url", "-u", help="Web page to index (repeatable)"),
) -> None:
    """Index the given sources and print knowledge base statistics."""
    kb, pipeline = build_session()
    load_sources(kb, files, urls)
    print_stats(pipeline)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Port"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("docrag.adapters.inbound.api.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
