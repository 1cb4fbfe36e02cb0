"""Batch and stream adapters over ``validate``.

Every manifest is validated before pass/fail is decided; a failing manifest
never stops the run early.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any, TextIO, TypeVar

from .core import validate
from .errors import PipelineFailure
from .models import ManifestRun
from .options import ValidationOptions
from .report import log

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _file_path(file: Any) -> str:
    """Return the path of a file reference (path, string or object with ``.path``)."""
    if isinstance(file, (str, Path)):
        return str(file)
    return str(file.path)


def run_pipeline(
    files: Iterable[Any],
    options: ValidationOptions | Mapping[str, Any] | None = None,
    stream: TextIO | None = None,
) -> list[ManifestRun]:
    """Validate each manifest in order and report the failing ones.

    ``package_file`` is overridden per file; other options are shared.
    """
    opts = ValidationOptions.coerce(options)

    runs: list[ManifestRun] = []
    for file in files:
        path = _file_path(file)
        result = validate(None, opts.with_package_file(path))
        run = ManifestRun(path=path, result=result)
        runs.append(run)

        if run.failed:
            logger.warning("Dependency policy violations in %s", path)
            log(result, stream)

    return runs


def validate_stream(
    files: Iterable[T],
    options: ValidationOptions | Mapping[str, Any] | None = None,
    stream: TextIO | None = None,
) -> Iterator[T]:
    """Pass file references through unchanged, validating them once drained.

    Raises:
        PipelineFailure: after the input is exhausted, when ``fail_on_error``
            is set and at least one manifest had violations.
    """
    opts = ValidationOptions.coerce(options)
    collected: list[str] = []

    for file in files:
        collected.append(_file_path(file))
        yield file

    runs = run_pipeline(collected, opts, stream)

    if opts.fail_on_error and any(run.failed for run in runs):
        raise PipelineFailure("Unable to validate dependencies")
