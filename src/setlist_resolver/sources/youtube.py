"""Comment source for YouTube videos, backed by the ``yt-dlp`` executable.

Command run::

    yt-dlp -j --skip-download --write-comments <video>

``-j`` prints one JSON document per video on stdout.  Comments live under
``comments[].text``; every comment of every document is collected in order
and joined with newlines.

Accepted identifiers:
    - bare 11-character video IDs (``dQw4w9WgXcQ``)
    - ``youtube.com/watch?v=...``, ``youtube.com/live/...``,
      ``youtube.com/shorts/...`` and ``youtu.be/...`` URLs
"""

import json
import logging
import re
import subprocess

from ..exceptions import RetrievalError
from .base import CommentSource

logger = logging.getLogger(__name__)

DEFAULT_EXECUTABLE = "yt-dlp"

_VIDEO_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")
_YOUTUBE_URL_RE = re.compile(
    r"^(?:https?://)?(?:(?:www|m|music)\.)?(?:youtube\.com|youtu\.be)/",
    re.IGNORECASE,
)


def extract_comment_texts(output: str) -> list[str]:
    """Return every ``comments[].text`` value from yt-dlp ``-j`` output.

    Blank lines are skipped.  Documents without comments contribute nothing.

    Raises ValueError (json.JSONDecodeError) on malformed output, and
    TypeError or AttributeError when a document does not have the expected
    shape.
    """
    texts: list[str] = []
    for line in output.splitlines():
        if not line.strip():
            continue
        info = json.loads(line)
        for comment in info.get("comments") or []:
            text = comment.get("text")
            if isinstance(text, str):
                texts.append(text)
    return texts


class YtDlpSource(CommentSource):
    """Fetch YouTube comments by running ``yt-dlp``."""

    def __init__(self, executable: str = DEFAULT_EXECUTABLE):
        self.executable = executable

    @classmethod
    def from_options(cls, yt_dlp: str = DEFAULT_EXECUTABLE, **options) -> "YtDlpSource":
        return cls(executable=yt_dlp)

    @classmethod
    def can_handle(cls, identifier: str) -> bool:
        return bool(_VIDEO_ID_RE.match(identifier) or _YOUTUBE_URL_RE.match(identifier))

    def build_command(self, identifier: str) -> list[str]:
        return [self.executable, "-j", "--skip-download", "--write-comments", identifier]

    def fetch(self, identifier: str) -> str:
        cmd = self.build_command(identifier)
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, encoding="utf-8", errors="replace"
            )
        except FileNotFoundError as exc:
            raise RetrievalError(identifier, f"{self.executable} not found") from exc
        except OSError as exc:  # e.g. a directory or a non-executable file
            raise RetrievalError(identifier, f"Could not run {self.executable}: {exc}") from exc
        if result.returncode != 0:
            raise RetrievalError(identifier, result.stderr.strip())

        try:
            texts = extract_comment_texts(result.stdout)
        except (ValueError, TypeError, AttributeError) as exc:
            raise RetrievalError(identifier, f"Could not decode {self.executable} output: {exc}") from exc

        logger.debug("Decoded %d comments for %s", len(texts), identifier)
        return "\n".join(texts)
