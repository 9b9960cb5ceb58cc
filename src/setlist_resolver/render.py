"""Plain-text renderers for a parsed setlist.

Usage::

    from setlist_resolver.render import TableFormatter
    print(TableFormatter().render(entries), end="")

:class:`TableFormatter` output::

    +----------+-----------+----------+
    | Time     | Song      | Artist   |
    +----------+-----------+----------+
    | 00:00:00 | Opening   |          |
    | 00:03:12 | Dark Star | The Dead |
    +----------+-----------+----------+

Column widths are measured in terminal cells, so full-width (CJK) characters
count double and the borders stay aligned.
"""

import unicodedata
from collections.abc import Sequence

from .models import SetlistEntry

HEADERS = ("Time", "Song", "Artist")


def display_width(text: str) -> int:
    """Return the number of terminal cells *text* occupies."""
    width = 0
    for char in text:
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def _pad(text: str, width: int) -> str:
    return text + " " * (width - display_width(text))


class TableFormatter:
    """Render entries as a bordered ``Time | Song | Artist`` table."""

    def render(self, entries: Sequence[SetlistEntry]) -> str:
        """Return the table text, ending with a single newline.

        An empty sequence still renders the header row.
        """
        rows = [(e.to_time_format(), e.song_name, e.artist) for e in entries]
        widths = [
            max(display_width(cell) for cell in column)
            for column in zip(HEADERS, *rows)
        ]

        border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
        lines = [border, _render_row(HEADERS, widths), border]
        lines.extend(_render_row(row, widths) for row in rows)
        if rows:
            lines.append(border)
        return "\n".join(lines) + "\n"


class ListFormatter:
    """Render entries one per line as ``HH:MM:SS ~ Song / Artist``."""

    def render(self, entries: Sequence[SetlistEntry]) -> str:
        if not entries:
            return ""
        return "\n".join(entry.info() for entry in entries) + "\n"


FORMATTERS = {
    "table": TableFormatter,
    "list": ListFormatter,
}


def _render_row(cells: Sequence[str], widths: Sequence[int]) -> str:
    return "| " + " | ".join(_pad(cell, w) for cell, w in zip(cells, widths)) + " |"
