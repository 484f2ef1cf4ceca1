"""Builders for in-memory XD archives used across the tests."""
from __future__ import annotations

import io
import json
import zipfile
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Union


def artboard_entry(artboard_id: str, name: str, path: Optional[str] = None) -> Dict[str, Any]:
    return {"id": artboard_id, "name": name, "path": path or f"artboard-{artboard_id}"}


def manifest_for(artboards: Iterable[Mapping[str, Any]], pasteboard: bool = True) -> Dict[str, Any]:
    """Return a manifest whose artwork root holds ``artboards``."""
    children = list(artboards)
    if pasteboard:
        children.insert(0, {"id": "paste", "name": "pasteboard", "path": "pasteboard"})
    return {
        "name": "Design.xd",
        "children": [
            {"id": "res", "name": "resources", "path": "resources"},
            {"id": "art", "name": "artwork", "path": "artwork", "children": children},
        ],
    }


def text_element(family: str, style: Optional[str], postscript_name: str) -> Dict[str, Any]:
    """A text shape carrying its font under a ``font`` key."""
    return {
        "type": "text",
        "style": {"font": {"family": family, "style": style, "postscriptName": postscript_name}},
    }


def graphic_content(*elements: Mapping[str, Any]) -> Dict[str, Any]:
    return {"version": "1.5.0", "children": [{"type": "artboard", "artboard": {"children": list(elements)}}]}


def content_path(path: str) -> str:
    return f"artwork/{path}/graphics/graphicContent.agc"


def build_xd_bytes(entries: Mapping[str, Union[bytes, Mapping[str, Any]]]) -> bytes:
    """Zip ``entries`` into an archive, JSON-encoding mapping values."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, payload in entries.items():
            if not isinstance(payload, bytes):
                payload = json.dumps(payload).encode("utf-8")
            archive.writestr(name, payload)
    return buffer.getvalue()


def write_xd(directory: Path, entries: Mapping[str, Union[bytes, Mapping[str, Any]]], name: str = "design.xd") -> Path:
    target = directory / name
    target.write_bytes(build_xd_bytes(entries))
    return target


def corrupt_stored_bytes(archive: bytes, marker: bytes) -> bytes:
    """Flip the last byte of ``marker`` inside a stored (uncompressed) archive."""
    offset = archive.index(marker) + len(marker) - 1
    flipped = bytes([archive[offset] ^ 0x01])
    return archive[:offset] + flipped + archive[offset + 1 :]


def nested_lists(depth: int) -> bytes:
    """A JSON document of ``depth`` nested arrays under ``children``."""
    return b'{"children":' + b"[" * depth + b"]" * depth + b"}"
