"""Timestamp-comment parser.

Turns free-form comment text into an ordered list of
:class:`~setlist_resolver.models.SetlistEntry` values::

    00:00 Opening SE
    03:12 - 星間飛行 / ランカ・リー
    1:02:45 ~ [Encore] Song Title

Each match is a *time token* (``MM:SS`` or ``H:MM:SS``, at least three
digits in all), an optional decorative separator (``-``, ``~``, ``/`` or ``／``,
surrounded by spaces), and a label running to the end of the line.  The label
is split on its last ``/`` into song name and artist.

A label never continues onto the following line, even when no timestamp
follows: in ``"00:00 Song\\n(cont) / Artist"`` the second line is dropped and
the entry has an empty artist.

Text that contains no time token is ignored; :func:`parse_all` never raises.
"""

import logging
import re

from .models import SetlistEntry
from .normalize import format_text

logger = logging.getLogger(__name__)

# Group 1: time token.  The colon after the first group is optional, so a
# compact run like "123:45" is also accepted (minute=123, second=45).
# Group 2: separator, discarded.
# Group 3: label; "." stops at a newline, so a label never spans lines.
SETLIST_LINE_RE = re.compile(
    r"(\d{1,2}:?\d{1,2}:\d{1,2})([ ]*[-~/／]?[ ]*)(.*)",
    re.ASCII,
)

ARTIST_SEPARATOR = "/"


def split_time_token(token: str) -> tuple[int, int, int]:
    """Return ``(hour, minute, second)`` for a colon-delimited time token.

    Components are read right to left: the last is always the second, the
    one before it the minute, the one before that the hour.  Missing or
    non-numeric components count as ``0``.
    """
    parts = token.split(":")
    second = _to_int(parts.pop()) if parts else 0
    minute = _to_int(parts.pop()) if parts else 0
    hour = _to_int(parts.pop()) if parts else 0
    return hour, minute, second


def _to_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


def split_label(label: str) -> tuple[str, str]:
    """Split a label into ``(song_name, artist)`` on its last ``/``.

    ``"A/B/C"`` gives ``("A/B", "C")``; a label without ``/`` gives an empty
    artist.  Neither part is normalized here.
    """
    song_name, sep, artist = label.rpartition(ARTIST_SEPARATOR)
    if not sep:
        return label, ""
    return song_name, artist


def parse_entry(match: re.Match) -> SetlistEntry:
    """Build a :class:`SetlistEntry` from one :data:`SETLIST_LINE_RE` match."""
    hour, minute, second = split_time_token(match.group(1))
    song_name, artist = split_label(match.group(3) or "")
    return SetlistEntry(
        hour=hour,
        minute=minute,
        second=second,
        song_name=format_text(song_name),
        artist=format_text(artist),
    )


def parse_all(text: str) -> list[SetlistEntry]:
    """Extract every setlist entry from *text*, in order of appearance.

    Entries are never re-ordered by time.  Returns an empty list when the
    text contains no time tokens.
    """
    entries = [parse_entry(m) for m in SETLIST_LINE_RE.finditer(text)]
    logger.debug("Parsed %d setlist entries from %d characters", len(entries), len(text))
    return entries
