"""Manifest model holding the two dependency groups."""

from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Any

RUNTIME_SECTION = "dependencies"
DEVELOPMENT_SECTION = "devDependencies"


@dataclass(frozen=True)
class Manifest:
    """Runtime and development dependency groups read from one manifest.

    Both groups keep the manifest's declaration order.
    """

    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)
    source: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], source: str | None = None) -> Manifest:
        deps = data.get(RUNTIME_SECTION) or {}
        dev_deps = data.get(DEVELOPMENT_SECTION) or {}
        return cls(
            dependencies=dict(deps),
            dev_dependencies=dict(dev_deps),
            source=source,
        )
