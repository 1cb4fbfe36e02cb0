"""Range-prefix classification for declared version strings.

Only the leading character is inspected; no semantic version is parsed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

RANGE_OPERATORS = ("<", "<=", "=", "=>", ">", "^", "~")

# Ordered alternation: "<=1.0.0" strips to "=1.0.0".
RANGE_PATTERN = re.compile(r"^(<|<=|=|=>|>|\^|~)")

_HARDCODED_PATTERN = re.compile(r"^[a-zA-Z/.~]")


@dataclass(slots=True, frozen=True)
class Classification:
    """Outcome of classifying a single version string."""

    is_range_prefixed: bool
    is_likely_hardcoded: bool


def classify(version: str) -> Classification:
    """Classify ``version`` by its first character.

    ``is_likely_hardcoded`` flags git URLs, tags, paths and local files, which
    sit outside the policy. It is only computed when the version carries no
    range operator. An empty version counts as likely hardcoded.
    """
    first = version[:1]
    if RANGE_PATTERN.match(first):
        return Classification(is_range_prefixed=True, is_likely_hardcoded=False)

    hardcoded = not first or _HARDCODED_PATTERN.match(first) is not None
    return Classification(is_range_prefixed=False, is_likely_hardcoded=hardcoded)


def strip_range(version: str) -> str:
    """Remove one leading range operator from ``version``."""
    return RANGE_PATTERN.sub("", version, count=1)
