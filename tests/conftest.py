"""pytest configuration and shared fixtures for dep-validate tests."""

import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep options-file and warn-only overrides from leaking into tests."""
    monkeypatch.delenv("DEP_VALIDATE_CONFIG", raising=False)
    monkeypatch.delenv("DEP_VALIDATE_WARN_ONLY", raising=False)


@pytest.fixture
def write_manifest(tmp_path) -> Callable[..., Path]:
    """Write a package.json (or another named manifest) and return its path."""

    def _write(data: Dict[str, Any], name: str = "package.json", directory: Path = None) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def compliant_manifest() -> Dict[str, Any]:
    return {
        "name": "demo",
        "dependencies": {"lodash": "~1.2.3", "express": "~4.18.2"},
        "devDependencies": {"mocha": "^10.0.0"},
    }


@pytest.fixture
def failing_manifest() -> Dict[str, Any]:
    return {
        "name": "demo",
        "dependencies": {"lodash": "1.2.3", "express": "~4.18.2"},
        "devDependencies": {"mocha": "~2.0.0"},
    }
