from __future__ import annotations
import asyncio
import json
import logging
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box
from .config import SummarizerConfig, write_default_config
from .fetcher import fetch_text
from .highlight import render_highlighted
from .summarizer import locate_occurrences, summarize as summarize_text
from .utils import clamp_text, read_input

app = typer.Typer(help="Pick key sentences out of a block of text")
console = Console()
log = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_config(config_path: Path) -> SummarizerConfig:
    if config_path.exists():
        log.debug("loading config from %s", config_path)
        return SummarizerConfig.load(config_path)
    return SummarizerConfig()


def _resolve_text(text: Optional[str], file: Optional[Path], url: Optional[str], cfg: SummarizerConfig) -> str:
    given = [x for x in (text, file, url) if x is not None]
    if len(given) > 1:
        typer.echo("Provide only one of TEXT, --file or --url")
        raise typer.Exit(code=2)

    if url:
        res = asyncio.run(fetch_text(url, cfg))
        if not res.ok:
            console.print(f"[red]Fetch failed[/red] {url}: {res.error}")
            raise typer.Exit(code=1)
        return res.text or ""
    if text is not None:
        return text
    try:
        return read_input(file)
    except (OSError, UnicodeDecodeError) as ex:
        console.print(f"[red]Cannot read[/red] {file}: {ex}")
        raise typer.Exit(code=1)


@app.command()
def init(
    config_path: Path = typer.Option("keysum.json", help="Where to create config"),
):
    """Create default config."""
    try:
        write_default_config(config_path)
    except FileExistsError as ex:
        console.print(f"[yellow]{ex}[/yellow]")
        raise typer.Exit(code=1)
    console.print(f"[green]Created[/green] {config_path}")


@app.command()
def summarize(
    text: Optional[str] = typer.Argument(None, help="Text to summarize (stdin when omitted)"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read text from file ('-' for stdin)"),
    url: Optional[str] = typer.Option(None, help="Fetch a page and summarize its text"),
    top_words: Optional[int] = typer.Option(None, "--top-words", "-k", help="Number of frequent words driving selection"),
    config_path: Path = typer.Option("keysum.json", help="Config file (used when present)"),
    highlight: bool = typer.Option(False, help="Show the source text with key sentences highlighted"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
):
    """Extract key sentences."""
    _setup_logging(verbose)
    if as_json and highlight:
        typer.echo("Use either --json or --highlight, not both")
        raise typer.Exit(code=2)
    cfg = _load_config(config_path)
    k = cfg.top_words if top_words is None else top_words

    raw = clamp_text(_resolve_text(text, file, url, cfg), cfg.max_chars)
    result = summarize_text(raw, k, bullet=cfg.bullet)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return
    if highlight:
        console.print(Panel(render_highlighted(raw, result.key_sentences, cfg.highlight_style), title="Input Text"))
        console.print(Panel(Text(result.bulleted_summary), title="Key Sentences"))
        return
    if not result.key_sentences:
        console.print("[yellow]No key sentences[/yellow]")
        return
    typer.echo(result.bulleted_summary)


@app.command()
def locate(
    sentence: str = typer.Argument(..., help="Sentence to look for, verbatim"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Text file ('-' or omitted for stdin)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
):
    """Show every offset where a sentence occurs in the text."""
    _setup_logging(verbose)
    try:
        raw = read_input(file)
    except (OSError, UnicodeDecodeError) as ex:
        console.print(f"[red]Cannot read[/red] {file}: {ex}")
        raise typer.Exit(code=1)

    spans = locate_occurrences(raw, sentence)
    log.debug("locate: %d occurrences in %d chars", len(spans), len(raw))
    if not spans:
        console.print("[yellow]No occurrences[/yellow]")
        return
    table = Table(box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    for i, (start, end) in enumerate(spans, 1):
        table.add_row(str(i), str(start), str(end))
    console.print(table)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1"),
    port: int = typer.Option(8000),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
):
    """Run the HTTP service."""
    import uvicorn
    _setup_logging(verbose)
    uvicorn.run(
        "keysum_cli.server.main:app", host=host, port=port,
        log_level="debug" if verbose else "info",
    )


def main():
    app()


if __name__ == "__main__":
    main()
