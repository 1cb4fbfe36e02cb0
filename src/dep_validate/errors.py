"""Error taxonomy for dep-validate.

Policy violations are never raised by the engine; they are returned as data.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ValidationResult


class DepValidateError(RuntimeError):
    """Base error for dep-validate failures."""


class ConfigurationError(DepValidateError):
    """Raised when a manifest or options file cannot be located or parsed."""


class PipelineFailure(DepValidateError):
    """Raised by the stream adapter when fail-on-error is set and a manifest failed."""


class CallbackFailure(DepValidateError):
    """Signals that a validation run found violations.

    The full result is kept on ``results`` for programmatic inspection.
    """

    def __init__(self, message: str, results: ValidationResult) -> None:
        super().__init__(message)
        self.results = results
