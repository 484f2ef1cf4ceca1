"""Aggregate model combining the font catalog with per-artboard outcomes."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from xd_fonts.model.artboard_model import ArtboardResult
from xd_fonts.model.font_model import FontCatalog


@dataclass(slots=True)
class FontInventory:
    """Result of one run over an XD file that renderers consume."""

    catalog: FontCatalog = field(default_factory=FontCatalog)
    artboards: List[ArtboardResult] = field(default_factory=list)

    @property
    def skipped(self) -> List[ArtboardResult]:
        return [result for result in self.artboards if result.is_skipped]
