"""``rulepress`` command group."""

import click
from rich.console import Console
from rich.panel import Panel

from .. import __version__
from .commands import compress, stats, stages
from ..core.logging import setup_logging

console = Console(stderr=True)

INFO_TEXT = """[bold]Stages[/bold] (run in this order, each can be switched off)
  [cyan]stopwords[/cyan]    drop common English words, join the rest
  [cyan]punctuation[/cyan]  drop , ; : ' " ! ?   (off by default)
  [cyan]stemming[/cyan]     porter, snowball or lancaster suffix stripping
  [cyan]whitespace[/cyan]   remove leftover spaces, keep line breaks

Defaults come from RP_* environment variables or a .env file.
Run [bold]rulepress serve[/bold] for the REST API (docs at /docs)."""


@click.group()
@click.version_option(version=__version__, prog_name="rulepress")
def cli():
    """Shrink AI rules files (.cursorrules, CLAUDE.md, ...) before they reach a model.

    \b
    rulepress compress -f CLAUDE.md -o CLAUDE.min.md
    rulepress stats CLAUDE.md CLAUDE.min.md
    rulepress stages
    """
    setup_logging()


cli.add_command(compress)
cli.add_command(stats)
cli.add_command(stages)


@cli.command()
@click.option("-h", "--host", default=None, help="Bind address (default: RP_API_HOST)")
@click.option("-p", "--port", default=None, type=int, help="Port (default: RP_API_PORT)")
@click.option("--reload", is_flag=True, help="Restart on code changes")
@click.option("-w", "--workers", default=1, type=int, help="Worker processes")
def serve(host, port, reload, workers):
    """Run the REST API with uvicorn."""
    from ..api import run_server
    from ..core.config import get_settings

    api_settings = get_settings().api
    host = host or api_settings.host
    port = port or api_settings.port

    console.print(f"[bold]RulePress API[/bold] on http://{host}:{port} (docs: /docs)")
    run_server(host=host, port=port, reload=reload, workers=workers)


@cli.command()
def info():
    """Describe the compression stages and configuration."""
    Console().print(Panel(INFO_TEXT, title=f"RulePress {__version__}", border_style="green"))


def main():
    cli()


if __name__ == "__main__":
    main()
