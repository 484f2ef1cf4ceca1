"""Scan an artboard's graphic content for the fonts it references."""
from __future__ import annotations

from typing import Any, Dict

from xd_fonts.model.font_model import FontDeclaration
from xd_fonts.parser.errors import MalformedDocumentError
from xd_fonts.utils.json_utils import parse_json

FontMap = Dict[str, FontDeclaration]


class ArtboardDocument:
    """Decoded ``graphicContent.agc`` document of one artboard.

    Text elements reference fonts in two shapes: inline on the style object
    as ``fontFamily``/``fontStyle``/``postscriptName``, or nested under a
    ``font`` key as ``family``/``style``/``postscriptName``. Both are reported
    as :class:`FontDeclaration` keyed by PostScript name.
    """

    def __init__(self, root: Any) -> None:
        self.root = root

    @classmethod
    def parse(cls, data: bytes, source: str = "artboard") -> "ArtboardDocument":
        return cls(parse_json(data, source=source))

    def scan_fonts(self) -> FontMap:
        """Walk the whole document and return a fresh identity -> font map.

        Raises :class:`MalformedDocumentError` when the document nests deeper
        than the interpreter's recursion limit.
        """
        fonts: FontMap = {}
        try:
            self._find_fonts(self.root, fonts)
        except RecursionError as exc:
            raise MalformedDocumentError("artboard content is nested too deeply to scan") from exc
        return fonts

    def _find_fonts(self, node: Any, fonts: FontMap) -> None:
        if isinstance(node, list):
            for item in node:
                self._find_fonts(item, fonts)
            return
        if not isinstance(node, dict):
            return

        if "fontFamily" in node:
            self._record(
                fonts,
                FontDeclaration.create(node.get("fontFamily"), node.get("fontStyle"), node.get("postscriptName")),
            )
        for key, value in node.items():
            if key == "font" and isinstance(value, dict):
                self._record(
                    fonts,
                    FontDeclaration.create(value.get("family"), value.get("style"), value.get("postscriptName")),
                )
            self._find_fonts(value, fonts)

    @staticmethod
    def _record(fonts: FontMap, declaration: FontDeclaration) -> None:
        # later declarations with the same identity replace earlier ones
        fonts[declaration.identity] = declaration
