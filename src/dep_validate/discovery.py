"""Manifest discovery for batch runs."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from .manifest import MANIFEST_NAMES

EXCLUDES = {"node_modules", ".git", ".venv"}


def discover_manifests(root: Path, names: Iterable[str] = MANIFEST_NAMES) -> list[Path]:
    """Find manifests under root, pruning vendor and VCS directories.

    Returns resolved paths sorted so batch output is deterministic.
    """
    root = root.resolve()
    targets = set(names)
    found: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if d not in EXCLUDES]
        found.extend(Path(dirpath) / name for name in filenames if name in targets)

    return sorted(found)
