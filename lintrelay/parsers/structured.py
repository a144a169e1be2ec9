from __future__ import annotations

import json
from typing import Any

import yaml

from lintrelay.core.errors import ParseError


def load_yaml(text: str, tool: str) -> Any:
    """Parse a YAML document; blank input reads as ``None``."""
    if not text or not text.strip():
        return None
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ParseError(f"Error parsing {tool} YAML output: {exc}") from exc


def load_json(text: str, tool: str) -> Any:
    """Parse a JSON document; blank input reads as ``None``."""
    if not text or not text.strip():
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Error parsing {tool} JSON output: {exc}. Output: {text[:500]!r}") from exc
