"""Helper functions to decode the JSON documents stored inside an XD archive."""
from __future__ import annotations

import json
from typing import Any, Optional

from xd_fonts.parser.errors import MalformedDocumentError


def parse_json(data: bytes, source: Optional[str] = None) -> Any:
    """Decode UTF-8 JSON from raw bytes, preserving the document's key order."""
    label = source or "document"
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedDocumentError(f"{label} is not valid UTF-8: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedDocumentError(f"{label} is not well-formed JSON: {exc}") from exc
    except RecursionError as exc:
        raise MalformedDocumentError(f"{label} is nested too deeply to decode") from exc
