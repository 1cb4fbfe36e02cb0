"""Policy evaluation for a single dependency group."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .models import EnforcementPolicy, HardcodedMode, Violation
from .ranges import classify, strip_range

logger = logging.getLogger(__name__)


def _violation(name: str, version: str, prefix: str) -> Violation:
    expected = prefix + strip_range(version)
    logger.debug("%s@%s violates policy, expected %s", name, version, expected)
    return Violation(name=name, version=version, expected=expected)


def evaluate(group: Mapping[str, str], policy: EnforcementPolicy) -> list[Violation]:
    """Return the violations of ``group`` under ``policy``, in group order.

    Decision table per dependency:

    - excluded names are skipped;
    - versions without a range operator are skipped when they look like a
      tag, path or URL, or when hardcoded versions are allowed or forced,
      and flagged otherwise;
    - ranged versions are flagged in force mode (expected is the bare pin);
    - otherwise a ranged version must start with the policy prefix, compared
      as a literal substring.
    """
    allow_hardcoded = policy.hardcoded is HardcodedMode.ALLOW
    force_hardcoded = policy.hardcoded is HardcodedMode.FORCE

    violations: list[Violation] = []
    for name, version in group.items():
        if name in policy.excluded:
            continue

        classification = classify(version)

        if not classification.is_range_prefixed:
            if classification.is_likely_hardcoded or allow_hardcoded or force_hardcoded:
                continue
            violations.append(_violation(name, version, policy.prefix))
            continue

        if force_hardcoded:
            violations.append(_violation(name, version, ""))
            continue

        if version[: len(policy.prefix)] != policy.prefix:
            violations.append(_violation(name, version, policy.prefix))

    return violations
