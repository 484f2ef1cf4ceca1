"""Entry-point for the XD font inventory pipeline."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from xd_fonts.model.artboard_model import ArtboardDescriptor, ArtboardResult
from xd_fonts.model.document_model import FontInventory
from xd_fonts.parser.artboard_parser import ArtboardDocument
from xd_fonts.parser.errors import MalformedDocumentError, XdFontsError
from xd_fonts.parser.manifest_parser import Manifest
from xd_fonts.parser.xd_loader import XdPackage
from xd_fonts.renderer.text_renderer import TextRenderer
from xd_fonts.utils.logger import get_logger

LOGGER = get_logger(__name__)


def scan_artboard(package: XdPackage, descriptor: ArtboardDescriptor) -> ArtboardResult:
    """Load one artboard's content and collect its fonts, recording why it was skipped."""
    try:
        data = package.get_artboard_content(descriptor)
        if data is None:
            return ArtboardResult(descriptor, skipped_reason=f"missing entry {descriptor.content_path}")
        fonts = ArtboardDocument.parse(data, source=descriptor.content_path).scan_fonts()
    except MalformedDocumentError as exc:
        return ArtboardResult(descriptor, skipped_reason=str(exc))
    LOGGER.debug("Found %d fonts on %s", len(fonts), descriptor.usage_label)
    return ArtboardResult(descriptor, fonts=fonts)


def collect_fonts(package: XdPackage) -> FontInventory:
    """Scan every artboard listed in the package manifest and merge the results."""
    manifest = Manifest.parse(package.require_manifest())
    inventory = FontInventory()
    artboards = manifest.enumerate_artboards()
    if artboards is None:
        return inventory

    for descriptor in artboards:
        result = scan_artboard(package, descriptor)
        inventory.artboards.append(result)
        if result.is_skipped:
            LOGGER.warning("Skipping artboard %s: %s", descriptor.usage_label, result.skipped_reason)
            continue
        inventory.catalog.merge(result.fonts, descriptor.usage_label)
    return inventory


def build_font_inventory(xd_path: Path) -> FontInventory:
    """Load an XD archive and build the catalog of fonts used by its artboards."""
    package = XdPackage.load(xd_path)
    return collect_fonts(package)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Print the fonts used in an XD file along with the artboards using them."""
    parser = argparse.ArgumentParser(description="List the fonts used by the artboards of an Adobe XD file")
    parser.add_argument("xd_file", help="Path to the input .xd file")
    args = parser.parse_args(argv)

    xd_path = Path(args.xd_file).resolve()
    if not xd_path.exists():
        raise FileNotFoundError(f"XD file not found: {xd_path}")

    LOGGER.info("Collecting fonts from %s", xd_path.name)
    try:
        inventory = build_font_inventory(xd_path)
    except XdFontsError as exc:
        LOGGER.error("Failed to read %s: %s", xd_path.name, exc)
        return
    TextRenderer().render(inventory)


if __name__ == "__main__":  # pragma: no cover
    main()
