"""Validation result models."""

from __future__ import annotations

from dataclasses import dataclass

from .violation import Violation


@dataclass(frozen=True)
class ValidationResult:
    """Violations per dependency group, in manifest order.

    An empty tuple means the group is compliant (or was not selected).
    """

    dependencies: tuple[Violation, ...] = ()
    dev_dependencies: tuple[Violation, ...] = ()

    @property
    def has_errors(self) -> bool:
        return bool(self.dependencies) or bool(self.dev_dependencies)

    @property
    def total(self) -> int:
        return len(self.dependencies) + len(self.dev_dependencies)

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        return {
            "dependencies": [v.to_dict() for v in self.dependencies],
            "devDependencies": [v.to_dict() for v in self.dev_dependencies],
        }


@dataclass(frozen=True)
class ManifestRun:
    """Result of validating one manifest in a batch run."""

    path: str
    result: ValidationResult

    @property
    def failed(self) -> bool:
        return self.result.has_errors
