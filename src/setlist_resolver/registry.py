import logging

from .exceptions import UnsupportedSourceError
from .sources.base import CommentSource
from .sources.file import FileSource
from .sources.web import DEFAULT_TIMEOUT, WebPageSource
from .sources.youtube import DEFAULT_EXECUTABLE, YtDlpSource

logger = logging.getLogger(__name__)

# Order matters: a local file named like a video ID wins, and YouTube URLs
# go to yt-dlp before the generic web source sees them.
_SOURCES: list[type[CommentSource]] = [
    FileSource,
    YtDlpSource,
    WebPageSource,
]


def get_source(
    identifier: str,
    yt_dlp: str = DEFAULT_EXECUTABLE,
    timeout: float = DEFAULT_TIMEOUT,
) -> CommentSource:
    """Return an instantiated comment source for the given identifier.

    Raises UnsupportedSourceError if no source matches.
    """
    for cls in _SOURCES:
        if cls.can_handle(identifier):
            logger.debug("Using %s for %s", cls.__name__, identifier)
            return cls.from_options(yt_dlp=yt_dlp, timeout=timeout)
    raise UnsupportedSourceError(identifier)
