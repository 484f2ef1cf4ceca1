"""Artboard model describes the pages listed in an XD manifest."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from xd_fonts.model.font_model import FontDeclaration

ARTBOARD_PATH_PREFIX = "artboard"
ARTWORK_PREFIX = "artwork/"
GRAPHIC_CONTENT_SUFFIX = "/graphics/graphicContent.agc"


@dataclass(frozen=True)
class ArtboardDescriptor:
    """One child of the manifest's artwork root."""

    artboard_id: str
    name: str
    path: str

    @classmethod
    def from_manifest_entry(cls, entry: Any) -> Optional["ArtboardDescriptor"]:
        """Return a descriptor, or ``None`` when the entry lacks id, name or path."""
        if not isinstance(entry, dict):
            return None
        artboard_id = entry.get("id")
        name = entry.get("name")
        path = entry.get("path")
        if artboard_id is None or name is None or path is None:
            return None
        return cls(artboard_id=str(artboard_id), name=str(name), path=str(path))

    @property
    def is_artboard(self) -> bool:
        return self.path.startswith(ARTBOARD_PATH_PREFIX)

    @property
    def content_path(self) -> str:
        """Archive entry holding this artboard's graphic content."""
        return f"{ARTWORK_PREFIX}{self.path}{GRAPHIC_CONTENT_SUFFIX}"

    @property
    def usage_label(self) -> str:
        return f"{self.name} [{self.artboard_id}]"


@dataclass(slots=True)
class ArtboardResult:
    """Outcome of loading and scanning a single artboard."""

    descriptor: ArtboardDescriptor
    fonts: Dict[str, FontDeclaration] = field(default_factory=dict)
    skipped_reason: Optional[str] = None

    @property
    def is_skipped(self) -> bool:
        return self.skipped_reason is not None
