"""Manifest source resolution and loading.

A manifest source is always explicit: a file path, a directory holding a
manifest, or an http(s) URL. Every failure to locate, read, parse or validate
the document surfaces as ConfigurationError.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import Any

import requests
import yaml
from jsonschema import Draft202012Validator
from tenacity import retry, stop_after_attempt, wait_fixed

from .errors import ConfigurationError
from .models import Manifest
from .parsers import package_json, package_yaml

logger = logging.getLogger(__name__)

MANIFEST_NAMES = ("package.json", "package.yaml")
YAML_SUFFIXES = {".yaml", ".yml"}
SCHEMA_PATH = Path(__file__).with_name("manifest.schema.json")


@retry(reraise=True, stop=stop_after_attempt(3), wait=wait_fixed(1))
def _http_get(url: str) -> str:  # pragma: no cover - patched in tests
    r = requests.get(url, timeout=10)
    r.raise_for_status()
    return r.text


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


@lru_cache(maxsize=1)
def _schema_validator() -> Draft202012Validator:
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    return Draft202012Validator(schema)


def _check_schema(document: Any, source: str) -> None:
    errors = sorted(_schema_validator().iter_errors(document), key=lambda e: list(e.path))
    if errors:
        raise ConfigurationError(f"Invalid manifest {source}:\n" + _format_errors(errors))


def _parse(text: str, source: str) -> Any:
    is_yaml = Path(source.split("?", 1)[0]).suffix in YAML_SUFFIXES
    try:
        if is_yaml:
            return package_yaml.parse_text(text)
        return package_json.parse_text(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Unable to parse manifest {source}: {exc}") from exc


def _resolve_path(source: Path) -> Path:
    if source.is_dir():
        for name in MANIFEST_NAMES:
            candidate = source / name
            if candidate.is_file():
                return candidate
        raise ConfigurationError(f"No manifest found in directory: {source}")

    if not source.is_file():
        raise ConfigurationError(f"Manifest not found: {source}")

    return source


def _read_source(source: str | Path) -> tuple[str, str]:
    """Return (text, resolved source) for a path or URL."""
    if isinstance(source, str) and source.startswith(("http://", "https://")):
        try:
            return _http_get(source), source
        except requests.RequestException as exc:
            raise ConfigurationError(f"Failed to fetch manifest {source}: {exc}") from exc

    path = _resolve_path(Path(source))
    try:
        return path.read_text(encoding="utf-8"), str(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read manifest {path}: {exc}") from exc


def load_manifest(source: str | Path | None) -> Manifest:
    """Load the dependency groups of the manifest at ``source``.

    Raises:
        ConfigurationError: If no source is given, or the manifest cannot be
            located, read, parsed or does not match the manifest schema.
    """
    if source is None or source == "":
        raise ConfigurationError("No manifest source configured")

    text, resolved = _read_source(source)
    document = _parse(text, resolved)
    _check_schema(document, resolved)

    manifest = Manifest.from_mapping(document, source=resolved)
    logger.debug(
        "Loaded %s: %d dependencies, %d devDependencies",
        resolved,
        len(manifest.dependencies),
        len(manifest.dev_dependencies),
    )
    return manifest
