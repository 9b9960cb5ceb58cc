import logging
import sys
from pathlib import Path

import click

from .exceptions import RetrievalError, UnsupportedSourceError
from .parser import parse_all
from .registry import get_source
from .render import FORMATTERS
from .sources.web import DEFAULT_TIMEOUT
from .sources.youtube import DEFAULT_EXECUTABLE


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.argument("source")
@click.option("--format", "output_format", type=click.Choice(sorted(FORMATTERS)),
              default="table", show_default=True,
              help="Output layout.")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Write the setlist to PATH instead of stdout.")
@click.option("--yt-dlp", "yt_dlp", default=DEFAULT_EXECUTABLE, show_default=True,
              envvar="SETLIST_RESOLVER_YT_DLP", metavar="PATH",
              help="yt-dlp executable used for YouTube sources.")
@click.option("--timeout", default=DEFAULT_TIMEOUT, show_default=True, type=float,
              help="HTTP timeout in seconds for web page sources.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log debug information to stderr.")
def main(source: str, output_format: str, output_path: str | None, yt_dlp: str,
         timeout: float, verbose: bool) -> None:
    """Resolve a setlist from timestamped comments.

    \b
    SOURCE may be:
      - a YouTube video ID or URL (comments fetched with yt-dlp)
      - any other http(s) URL
      - a local text file, or - for stdin
    """
    _configure_logging(verbose)

    # --- Resolve source ---
    try:
        comment_source = get_source(source, yt_dlp=yt_dlp, timeout=timeout)
    except UnsupportedSourceError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Resolving setlist for: {source}", err=True)

    # --- Fetch + parse ---
    try:
        text = comment_source.fetch(source)
    except RetrievalError as exc:
        click.echo(f"Resolving setlist failed: {exc.diagnostic}", err=True)
        sys.exit(1)

    entries = parse_all(text)
    if not entries:
        click.echo("No setlist entries found.", err=True)
        return

    # --- Render ---
    rendered = FORMATTERS[output_format]().render(entries)

    # --- Output ---
    if output_path is None:
        click.echo(rendered, nl=False)
        return

    dest = Path(output_path)
    dest.write_text(rendered, encoding="utf-8")
    click.echo(f"Written to {dest}", err=True)
