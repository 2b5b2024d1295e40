"""Fatal source errors raised before any slide extraction begins.

Everything below the document level (a missing title, a malformed table,
an unreachable image) degrades to an empty value instead of raising.
"""

from pathlib import Path


class DeckSourceError(Exception):
    """The HTML deck source could not be turned into a document tree."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.describe()}: {self.path} ({reason})")

    def describe(self) -> str:
        return "Deck source error"


class SourceUnreadable(DeckSourceError):
    """The HTML file cannot be opened or read."""

    def describe(self) -> str:
        return "Cannot read HTML source"


class SourceUnparsable(DeckSourceError):
    """The file was read but its content is not parsable as HTML."""

    def describe(self) -> str:
        return "Cannot parse HTML source"
