"""dep-validate core package.

Audits the version declarations of an npm-style manifest against a range-prefix
policy. The engine is callable from the CLI, batch pipelines and plain Python.
"""

from .callback import check, pipe
from .core import has_errors, validate
from .errors import CallbackFailure, ConfigurationError, DepValidateError, PipelineFailure
from .manifest import load_manifest
from .models import (
    EnforcementPolicy,
    HardcodedMode,
    Manifest,
    ManifestRun,
    ValidationResult,
    Violation,
)
from .options import ValidationOptions, load_options
from .pipeline import run_pipeline, validate_stream
from .report import format_results, log, render

__all__ = [
    "CallbackFailure",
    "ConfigurationError",
    "DepValidateError",
    "EnforcementPolicy",
    "HardcodedMode",
    "Manifest",
    "ManifestRun",
    "PipelineFailure",
    "ValidationOptions",
    "ValidationResult",
    "Violation",
    "check",
    "format_results",
    "has_errors",
    "load_manifest",
    "load_options",
    "log",
    "pipe",
    "render",
    "run_pipeline",
    "validate",
    "validate_stream",
]
