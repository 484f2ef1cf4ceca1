"""Exceptions raised while reading an XD archive."""
from __future__ import annotations


class XdFontsError(Exception):
    """Base class for failures reading an XD file."""


class ContainerEntryMissingError(XdFontsError, KeyError):
    """A required entry is absent from the archive."""

    def __init__(self, entry_name: str) -> None:
        super().__init__(entry_name)
        self.entry_name = entry_name

    def __str__(self) -> str:
        return f"Required XD entry missing: {self.entry_name}"


class MalformedDocumentError(XdFontsError, ValueError):
    """Archive or entry bytes could not be decoded."""
