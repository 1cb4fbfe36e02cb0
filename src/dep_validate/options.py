"""Validation options and the options-file loader.

Options use the camelCase keys of the configuration surface (``packageFile``,
``devDependencies``, ``failOnError``...). Files may be JSON or YAML. Only the
shape of each value is checked here; range prefixes are taken verbatim.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from collections.abc import Mapping
from typing import Any

import yaml

from .errors import ConfigurationError
from .models import HardcodedMode

DEFAULT_RUNTIME_PREFIX = "~"
DEFAULT_DEVELOPMENT_PREFIX = "^"
CONFIG_PATH_ENV_VAR = "DEP_VALIDATE_CONFIG"


def _string_list(key: str, value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return tuple(value)
    raise ConfigurationError(f"'{key}' must be a string or a list of strings")


def _optional_string(key: str, value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise ConfigurationError(f"'{key}' must be a string")


def _prefix(value: Any, default: str) -> str:
    """Unset or empty prefixes fall back to the default; anything else is kept as text."""
    return str(value) if value else default


@dataclass(frozen=True)
class ValidationOptions:
    """Options for one validation run.

    ``only`` is ``None`` to select both groups. An explicit empty tuple selects
    neither.
    """

    package_file: str | None = None
    dependencies: str = DEFAULT_RUNTIME_PREFIX
    dev_dependencies: str = DEFAULT_DEVELOPMENT_PREFIX
    only: tuple[str, ...] | None = None
    hardcoded: HardcodedMode = HardcodedMode.DEFAULT
    excluded: tuple[str, ...] = ()
    fail_on_error: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ValidationOptions:
        """Create options from a configuration mapping, validating value types."""
        package_file = data.get("packageFile")
        if isinstance(package_file, Path):
            package_file = str(package_file)
        package_file = _optional_string("packageFile", package_file)

        deps = _prefix(data.get("dependencies"), DEFAULT_RUNTIME_PREFIX)
        dev_deps = _prefix(data.get("devDependencies"), DEFAULT_DEVELOPMENT_PREFIX)

        only_value = data.get("only")
        only = None if only_value in (None, "") else _string_list("only", only_value)

        hardcoded = _optional_string("hardcoded", data.get("hardcoded"))

        excluded_value = data.get("excluded")
        excluded = () if excluded_value is None else _string_list("excluded", excluded_value)

        fail_on_error = data.get("failOnError", False)
        if not isinstance(fail_on_error, bool):
            raise ConfigurationError("'failOnError' must be a boolean")

        return cls(
            package_file=package_file,
            dependencies=deps,
            dev_dependencies=dev_deps,
            only=only,
            hardcoded=HardcodedMode.coerce(hardcoded),
            excluded=excluded,
            fail_on_error=fail_on_error,
        )

    @classmethod
    def coerce(cls, options: ValidationOptions | Mapping[str, Any] | None) -> ValidationOptions:
        if options is None:
            return cls()
        if isinstance(options, ValidationOptions):
            return options
        return cls.from_dict(options)

    def with_package_file(self, package_file: str | Path) -> ValidationOptions:
        return replace(self, package_file=str(package_file))

    def to_dict(self) -> dict[str, Any]:
        return {
            "packageFile": self.package_file,
            "dependencies": self.dependencies,
            "devDependencies": self.dev_dependencies,
            "only": list(self.only) if self.only is not None else None,
            "hardcoded": self.hardcoded.value,
            "excluded": list(self.excluded),
            "failOnError": self.fail_on_error,
        }


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the options file path.

    Priority:
    1. Explicit path argument
    2. DEP_VALIDATE_CONFIG environment variable
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_options(path: Path | str | None = None) -> ValidationOptions:
    """Load options from a JSON or YAML file.

    Returns default options when no path is given and DEP_VALIDATE_CONFIG is
    unset.

    Raises:
        ConfigurationError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return ValidationOptions()

    if not config_path.is_file():
        raise ConfigurationError(f"Options file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to read options file: {exc}") from exc

    try:
        if config_path.suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(content) or {}
        else:
            data = json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Invalid options file {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError("Options file must contain an object")

    return ValidationOptions.from_dict(data)
