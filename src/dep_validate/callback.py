"""Callback-style and raising wrappers around ``validate``."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .core import validate
from .errors import CallbackFailure
from .models import ValidationResult
from .options import ValidationOptions

FAILURE_MESSAGE = "Unable to validate dependencies"

Callback = Callable[[CallbackFailure | None], Any]


def check(options: ValidationOptions | Mapping[str, Any] | None = None) -> ValidationResult:
    """Run one validation, raising CallbackFailure if anything is non-compliant."""
    results = validate(None, options)
    if results.has_errors:
        raise CallbackFailure(FAILURE_MESSAGE, results)
    return results


def pipe(
    options: ValidationOptions | Mapping[str, Any] | Callback | None = None,
    callback: Callback | None = None,
) -> Any:
    """Run one validation and report the outcome through ``callback``.

    The callback receives None on success and a CallbackFailure carrying the
    results otherwise. The callback may be passed in place of ``options``.
    ConfigurationError is raised, not handed to the callback.
    """
    if callable(options):
        callback, options = options, None

    try:
        check(options)
    except CallbackFailure as err:
        return callback(err) if callback else None

    return callback(None) if callback else None
