class SetlistResolverError(Exception):
    """Base exception for setlist_resolver."""


class RetrievalError(SetlistResolverError):
    """Raised when comment text cannot be retrieved from a source.

    ``diagnostic`` carries the upstream tool's own output (yt-dlp stderr,
    HTTP status, OS error message) so it can be shown to the user verbatim.
    """

    def __init__(self, identifier: str, diagnostic: str):
        self.identifier = identifier
        self.diagnostic = diagnostic
        super().__init__(f"Could not retrieve {identifier}: {diagnostic}")


class UnsupportedSourceError(SetlistResolverError):
    """Raised when no comment source accepts the given identifier."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"No comment source found for: {identifier}")
