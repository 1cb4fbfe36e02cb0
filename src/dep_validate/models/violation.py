"""Violation value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Violation:
    """A single dependency's non-compliance with its group's policy."""

    name: str
    version: str
    expected: str

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "version": self.version,
            "expected": self.expected,
        }
