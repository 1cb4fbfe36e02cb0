"""Enforcement policy model."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from collections.abc import Iterable


class HardcodedMode(str, Enum):
    """How versions without a range operator are treated."""

    DEFAULT = "default"
    ALLOW = "allow"
    FORCE = "force"

    @classmethod
    def coerce(cls, value: str | HardcodedMode | None) -> HardcodedMode:
        """Map a configured value onto a mode; unknown values are strict."""
        if isinstance(value, HardcodedMode):
            return value
        for mode in cls:
            if mode.value == value:
                return mode
        return cls.DEFAULT


@dataclass(frozen=True)
class EnforcementPolicy:
    """Policy applied to one dependency group.

    ``prefix`` is used verbatim. A prefix outside the recognized operators is
    not rejected; it simply never matches.
    """

    prefix: str
    hardcoded: HardcodedMode = HardcodedMode.DEFAULT
    excluded: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def build(
        cls,
        prefix: str,
        *,
        hardcoded: str | HardcodedMode | None = None,
        excluded: Iterable[str] = (),
    ) -> EnforcementPolicy:
        return cls(
            prefix=prefix,
            hardcoded=HardcodedMode.coerce(hardcoded),
            excluded=frozenset(excluded),
        )
