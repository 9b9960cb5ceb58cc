from dataclasses import dataclass


@dataclass(frozen=True)
class SetlistEntry:
    """One timestamped song in a setlist.

    Minutes and seconds are kept exactly as written in the source text, so
    values of 60 or more are possible.
    """

    hour: int
    minute: int
    second: int
    song_name: str = ""
    artist: str = ""  # empty when the label had no "/" separator

    def to_time_format(self) -> str:
        """Return ``HH:MM:SS``; fields wider than two digits are not truncated."""
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    def info(self) -> str:
        """One-line summary: ``HH:MM:SS ~ Song`` or ``HH:MM:SS ~ Song / Artist``."""
        if not self.artist:
            return f"{self.to_time_format()} ~ {self.song_name}"
        return f"{self.to_time_format()} ~ {self.song_name} / {self.artist}"
