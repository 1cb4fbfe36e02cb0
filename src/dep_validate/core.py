"""Core validation entrypoints.

This module performs no I/O beyond delegating to ``load_manifest`` when it is
handed no manifest, so it can back the CLI, the batch pipeline and the
callback wrapper alike.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .manifest import load_manifest
from .models import EnforcementPolicy, Manifest, ValidationResult
from .options import ValidationOptions
from .policy import evaluate

logger = logging.getLogger(__name__)

RUNTIME_SCOPES = {"prod", "production"}
DEVELOPMENT_SCOPES = {"dev", "development"}


def _selected(only: tuple[str, ...] | None, scopes: set[str]) -> bool:
    return only is None or any(scope in scopes for scope in only)


def validate(
    manifest: Manifest | Mapping[str, Any] | None = None,
    options: ValidationOptions | Mapping[str, Any] | None = None,
) -> ValidationResult:
    """Validate both dependency groups of a manifest.

    Params:
        manifest: a Manifest, an already-parsed manifest document, or None to
            load ``options.package_file``
        options: ValidationOptions or a configuration mapping; defaults apply
            when None

    Returns: a ValidationResult holding both groups; unselected groups are empty.

    Raises:
        ConfigurationError: when the manifest has to be loaded and cannot be.
    """
    opts = ValidationOptions.coerce(options)

    if manifest is None:
        manifest = load_manifest(opts.package_file)
    elif not isinstance(manifest, Manifest):
        manifest = Manifest.from_mapping(manifest)

    deps_errors = []
    dev_deps_errors = []

    if _selected(opts.only, RUNTIME_SCOPES):
        policy = EnforcementPolicy.build(
            opts.dependencies, hardcoded=opts.hardcoded, excluded=opts.excluded
        )
        deps_errors = evaluate(manifest.dependencies, policy)

    if _selected(opts.only, DEVELOPMENT_SCOPES):
        policy = EnforcementPolicy.build(
            opts.dev_dependencies, hardcoded=opts.hardcoded, excluded=opts.excluded
        )
        dev_deps_errors = evaluate(manifest.dev_dependencies, policy)

    result = ValidationResult(
        dependencies=tuple(deps_errors),
        dev_dependencies=tuple(dev_deps_errors),
    )
    logger.debug(
        "Validated %s: %d violation(s)", manifest.source or "<manifest>", result.total
    )
    return result


def has_errors(result: ValidationResult) -> bool:
    """Return True when either group holds a violation."""
    return result.has_errors
