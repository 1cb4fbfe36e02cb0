"""Data models for dependency policy validation."""

from __future__ import annotations

from .manifest import Manifest
from .policy import EnforcementPolicy, HardcodedMode
from .result import ManifestRun, ValidationResult
from .violation import Violation

__all__ = [
    "EnforcementPolicy",
    "HardcodedMode",
    "Manifest",
    "ManifestRun",
    "ValidationResult",
    "Violation",
]
