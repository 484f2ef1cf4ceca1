"""Read the XD manifest and list the artboards it declares."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from xd_fonts.model.artboard_model import ArtboardDescriptor
from xd_fonts.utils.json_utils import parse_json
from xd_fonts.utils.logger import get_logger

LOGGER = get_logger(__name__)

ARTWORK_ROOT_NAME = "artwork"
PASTEBOARD_NAME = "pasteboard"


class Manifest:
    """Decoded manifest document of an XD archive."""

    def __init__(self, document: Any) -> None:
        self._document = document

    @classmethod
    def parse(cls, data: bytes) -> "Manifest":
        return cls(parse_json(data, source="manifest"))

    def artwork_root(self) -> Optional[Dict[str, Any]]:
        """Return the top-level child named ``artwork`` if present."""
        children = self._children(self._document)
        if children is None:
            return None
        for child in children:
            if isinstance(child, dict) and child.get("name") == ARTWORK_ROOT_NAME:
                return child
        return None

    def enumerate_artboards(self) -> Optional[List[ArtboardDescriptor]]:
        """Return the artboards under the artwork root, in manifest order.

        ``None`` means the manifest has no artwork root or the root has no
        children. The pasteboard and entries missing an id, name or path are
        left out.
        """
        root = self.artwork_root()
        if root is None:
            return None
        children = self._children(root)
        if children is None:
            return None

        artboards: List[ArtboardDescriptor] = []
        for child in children:
            if isinstance(child, dict) and child.get("name") == PASTEBOARD_NAME:
                continue
            descriptor = ArtboardDescriptor.from_manifest_entry(child)
            if descriptor is None or not descriptor.is_artboard:
                continue
            artboards.append(descriptor)
        LOGGER.debug("Manifest lists %d artboards", len(artboards))
        return artboards

    @staticmethod
    def _children(node: Any) -> Optional[List[Any]]:
        if not isinstance(node, dict):
            return None
        children = node.get("children")
        if not isinstance(children, list):
            return None
        return children
