"""Parse package.yaml documents (the YAML manifest format pnpm accepts)."""

from __future__ import annotations

from typing import Any


def parse_text(text: str) -> Any:
    """Return the decoded YAML document; an empty document becomes ``{}``."""
    import yaml

    return yaml.safe_load(text) or {}
