"""Parse package.json documents."""

from __future__ import annotations

from typing import Any


def parse_text(text: str) -> Any:
    """Return the decoded JSON document; raises json.JSONDecodeError."""
    import json

    return json.loads(text)
