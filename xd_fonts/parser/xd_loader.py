"""XD package loader responsible for unpacking the manifest and artwork entries."""
from __future__ import annotations

import zipfile
import zlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional

from xd_fonts.model.artboard_model import ARTWORK_PREFIX, ArtboardDescriptor
from xd_fonts.parser.errors import ContainerEntryMissingError, MalformedDocumentError
from xd_fonts.utils.logger import get_logger

LOGGER = get_logger(__name__)

MANIFEST_PATH = "manifest"

_READ_ERRORS = (zipfile.BadZipFile, zlib.error, EOFError)


@dataclass(slots=True)
class XdPackage:
    """Container for the raw entries read from an XD archive.

    Entries that could not be read are kept in ``unreadable`` with the read
    error, so one corrupt artboard does not take the others down with it.
    """

    raw_parts: Mapping[str, bytes]
    unreadable: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def load(cls, xd_path: Path) -> "XdPackage":
        """Open an XD archive and read the manifest and artwork entries."""
        archive_name = Path(xd_path).name
        parts: Dict[str, bytes] = {}
        unreadable: Dict[str, str] = {}
        try:
            with zipfile.ZipFile(xd_path) as xd_zip:
                for name in xd_zip.namelist():
                    if name != MANIFEST_PATH and not name.startswith(ARTWORK_PREFIX):
                        continue
                    try:
                        parts[name] = xd_zip.read(name)
                    except _READ_ERRORS as exc:
                        if name == MANIFEST_PATH:
                            raise
                        LOGGER.debug("Cannot read %s from %s: %s", name, archive_name, exc)
                        unreadable[name] = str(exc)
        except _READ_ERRORS as exc:
            raise MalformedDocumentError(f"{archive_name} is not a readable XD archive: {exc}") from exc

        LOGGER.debug("Loaded %d entries from %s", len(parts), archive_name)
        return cls(raw_parts=parts, unreadable=unreadable)

    # ------------------------------------------------------------------
    # Public helpers
    def get_entry(self, name: str) -> Optional[bytes]:
        """Return the entry bytes, ``None`` when absent.

        Raises :class:`MalformedDocumentError` when the entry exists but could
        not be read from the archive.
        """
        if name in self.unreadable:
            raise MalformedDocumentError(f"{name} could not be read: {self.unreadable[name]}")
        return self.raw_parts.get(name)

    def require_entry(self, name: str) -> bytes:
        data = self.get_entry(name)
        if data is None:
            raise ContainerEntryMissingError(name)
        return data

    def require_manifest(self) -> bytes:
        return self.require_entry(MANIFEST_PATH)

    def get_artboard_content(self, descriptor: ArtboardDescriptor) -> Optional[bytes]:
        return self.get_entry(descriptor.content_path)
