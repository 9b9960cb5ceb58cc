import logging
import sys
from pathlib import Path

from ..exceptions import RetrievalError
from .base import CommentSource

logger = logging.getLogger(__name__)

STDIN = "-"


class FileSource(CommentSource):
    """Read comment text from a local file, or from stdin when given ``-``."""

    @classmethod
    def can_handle(cls, identifier: str) -> bool:
        if identifier == STDIN:
            return True
        try:
            return Path(identifier).is_file()
        except OSError:  # e.g. name too long
            return False

    def fetch(self, identifier: str) -> str:
        if identifier == STDIN:
            logger.debug("Reading comment text from stdin")
            return sys.stdin.read()
        logger.debug("Reading comment text from %s", identifier)
        try:
            return Path(identifier).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise RetrievalError(identifier, str(exc)) from exc
