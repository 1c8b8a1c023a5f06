from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich import box
from .config import SummarizerConfig
from .errors import SummarizerError
from .summarize import summarize_text

app = typer.Typer(help="Extract the most representative sentences from a text")
console = Console()
err_console = Console(stderr=True)

def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )

def _preview(text: str, width: int = 70) -> str:
    text = " ".join(text.split())
    return text[:width] + "..." if len(text) > width else text

@app.command()
def summarize(
    src: str = typer.Argument(..., help="Text to summarize, or '-' to read stdin"),
    n: Optional[int] = typer.Option(None, "-n", "--n", min=0, help="Number of sentences in summary"),
    config_path: Optional[Path] = typer.Option(None, "--config", exists=True, dir_okay=False, help="JSON config file"),
    scores: bool = typer.Option(False, "--scores", help="Print per-sentence scores"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Summarize SRC and print the selected sentences."""
    _setup_logging(verbose)
    text = sys.stdin.read() if src == "-" else src
    try:
        cfg = SummarizerConfig.load(config_path) if config_path else SummarizerConfig()
        result = summarize_text(text, n, cfg)
    except (SummarizerError, ValueError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    if scores:
        table = Table(title=f"Sentence Scores ({result.language.name})", box=box.SIMPLE)
        table.add_column("#", justify="right")
        table.add_column("Score", justify="right")
        table.add_column("Selected")
        table.add_column("Text")
        chosen = set(result.selected)
        for s, score in zip(result.document.sentences, result.scores):
            table.add_row(str(s.idx + 1), f"{score:.4f}", "yes" if s.idx in chosen else "", _preview(s.text))
        console.print(table)
    typer.echo(result.summary)

def main():
    app()

if __name__ == "__main__":
    main()
