"""Font model captures the font references discovered in an XD file."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple


@dataclass(slots=True)
class FontDeclaration:
    """A font family/style pair keyed by its PostScript name."""

    display_name: str
    style: str
    identity: str
    usages: List[str] = field(default_factory=list)

    @classmethod
    def create(
        cls, display_name: Optional[str], style: Optional[str], postscript_name: Optional[str]
    ) -> "FontDeclaration":
        """Build a declaration, turning null fields into empty strings.

        The identity is the PostScript name. A declaration without one is
        keyed as ``"<family>:<style>"`` so that unnamed fonts with different
        families are not collapsed into a single entry.
        """
        name = "" if display_name is None else str(display_name)
        style_name = "" if style is None else str(style)
        if postscript_name is None:
            identity = f"{name}:{style_name}"
        else:
            identity = str(postscript_name)
        return cls(display_name=name, style=style_name, identity=identity)

    def add_usage(self, label: str) -> None:
        if label in self.usages:
            return
        self.usages.append(label)

    def describe(self) -> str:
        """Return the report block listing where this font is used."""
        lines = [f"{self.display_name}:{self.style}"]
        lines.extend(f"  - {usage}" for usage in self.usages)
        return "\n".join(lines) + "\n"


class FontCatalog:
    """Collection of font declarations keyed by identity, in first-seen order."""

    def __init__(self, fonts: Optional[Mapping[str, FontDeclaration]] = None) -> None:
        self._fonts: Dict[str, FontDeclaration] = dict(fonts or {})

    def merge(self, artboard_fonts: Mapping[str, FontDeclaration], label: str) -> None:
        """Fold one artboard's fonts into the catalog under ``label``.

        New identities are inserted with ``label`` as their only usage. Known
        identities keep their original name and style and only gain the label.
        """
        for identity, declaration in artboard_fonts.items():
            existing = self._fonts.get(identity)
            if existing is None:
                self._fonts[identity] = FontDeclaration(
                    display_name=declaration.display_name,
                    style=declaration.style,
                    identity=identity,
                    usages=[label],
                )
            else:
                existing.add_usage(label)

    def get(self, identity: Optional[str]) -> Optional[FontDeclaration]:
        if identity is None:
            return None
        return self._fonts.get(identity)

    def all(self) -> Mapping[str, FontDeclaration]:
        """Return a copy of the identity -> declaration mapping."""
        return dict(self._fonts)

    def __len__(self) -> int:
        return len(self._fonts)

    def __iter__(self) -> Iterator[FontDeclaration]:
        return iter(list(self._fonts.values()))

    def __contains__(self, identity: object) -> bool:
        return identity in self._fonts


def merge_font_maps(artboards: Iterable[Tuple[Mapping[str, FontDeclaration], str]]) -> FontCatalog:
    """Build a catalog from ``(fonts, label)`` pairs in order."""
    catalog = FontCatalog()
    for fonts, label in artboards:
        catalog.merge(fonts, label)
    return catalog
