"""Render the font inventory as a plain-text report."""
from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from xd_fonts.model.document_model import FontInventory
from xd_fonts.model.font_model import FontDeclaration


class TextRenderer:
    """Write one block per font listing the artboards that use it."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def render(self, inventory: FontInventory) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(self._build_text(inventory.catalog))

    def _build_text(self, fonts: Iterable[FontDeclaration]) -> str:
        return "".join(f"{font.describe()}\n" for font in fonts)
