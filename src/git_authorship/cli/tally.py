"""The attribution command."""

from pathlib import Path
from typing import List, Optional

import click
import typer
from rich.markup import escape

from ..blame import AuthorshipAnalyzer, GitCLI
from ..exceptions import AuthorshipError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import err_console, resolve_config

# Formats whose stdout must stay machine-readable get no progress lines
_PROGRESS_FORMATS = ("text", "rich")


def _version_callback(value: bool) -> None:
    if value:
        from .. import __version__

        err_console.print(
            f"[bold cyan]git-authorship[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)


@app.command()
def main(
    path: Path = typer.Option(
        ...,
        "-p",
        "--path",
        help="Path to the git repository",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    extensions: List[str] = typer.Option(
        ...,
        "-e",
        "--extensions",
        help="File extensions to include, comma-separated (e.g. rs,js,py)",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "-f",
        "--format",
        help="Output format: text | rich | json | csv",
        click_type=click.Choice(["text", "rich", "json", "csv"], case_sensitive=False),
    ),
    sort: Optional[str] = typer.Option(
        None,
        "--sort",
        help="Order by whole percent (truncated) or by exact line count (exact)",
        click_type=click.Choice(["truncated", "exact"], case_sensitive=False),
    ),
    skip_failed: bool = typer.Option(
        False,
        "--skip-failed",
        help="Warn and continue when a file cannot be blamed",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging, including every git command",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only print the report and errors",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Count lines of code per author in a git repository.

    Every tracked file with a matching extension is blamed and each surviving
    line is credited to the author who last changed it.

    [bold cyan]Examples:[/bold cyan]

      git-authorship --path /path/to/repo --extensions rs,js,py

      git-authorship -p . -e py --format json
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        config = resolve_config(
            output_format=output_format,
            sort_mode=sort,
            skip_failed=skip_failed,
            verbose=verbose,
            quiet=quiet,
        )

        show_progress = config.verbosity != "quiet" and config.output_format in _PROGRESS_FORMATS

        def on_file(file_path: str) -> None:
            if show_progress:
                err_console.print(
                    f"Processing {escape(file_path)}...", highlight=False, soft_wrap=True
                )

        vcs = GitCLI(
            str(path),
            git_executable=config.git_executable,
            timeout=config.git_timeout,
            encoding=config.encoding,
        )
        analyzer = AuthorshipAnalyzer(vcs, extensions, config=config, on_file=on_file)
        report = analyzer.run()

        get_formatter(config.output_format).render(report)

    except typer.Exit:
        raise

    except AuthorshipError as e:
        logger.debug("%s: %s", e.__class__.__name__, e)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        err_console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during attribution")
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)
