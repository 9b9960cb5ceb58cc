from abc import ABC, abstractmethod


class CommentSource(ABC):
    """Abstract base class for everything that can supply raw comment text."""

    @classmethod
    @abstractmethod
    def can_handle(cls, identifier: str) -> bool:
        """Return True if this source can retrieve text for *identifier*."""

    @abstractmethod
    def fetch(self, identifier: str) -> str:
        """Return the raw comment text for *identifier* as a single string.

        Multiple comments are joined with newlines.

        Raises RetrievalError when the text cannot be retrieved.
        """

    @classmethod
    def from_options(cls, **options) -> "CommentSource":
        """Instantiate from command-line options, ignoring those not used here."""
        return cls()
