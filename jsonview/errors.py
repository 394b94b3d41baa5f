"""Exception types shared across json-view modules."""

from __future__ import annotations


class JsonViewError(Exception):
    """Base class for json-view failures that are reported to the user."""


class DocumentError(JsonViewError):
    """One input document could not be opened or parsed.

    Handled per document: the remaining documents still load.
    """

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name
        self.message = message

    def __str__(self) -> str:
        return self.message
