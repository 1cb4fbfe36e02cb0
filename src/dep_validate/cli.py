"""CLI entrypoint for validating manifest dependency versions.

Usage:
  dep-validate [paths...] [--root DIR] [--config FILE] [--only dev] [--warn-only]

With no paths and no --root, ./package.json is validated.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from .discovery import discover_manifests
from .errors import ConfigurationError
from .models import HardcodedMode
from .options import ValidationOptions, load_options
from .pipeline import run_pipeline
from .report import aggregate
from .summary import render_summary

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_VIOLATIONS = 10
WARN_ONLY_ENV_VAR = "DEP_VALIDATE_WARN_ONLY"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dep-validate",
        description="Check manifest dependency versions against a range-prefix policy.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Manifest files, directories or URLs (default: ./package.json)",
    )
    parser.add_argument("--root", type=Path, default=None, help="Validate every manifest under DIR")
    parser.add_argument("--config", type=Path, default=None, help="JSON or YAML options file")
    parser.add_argument("--dependencies", default=None, help="Required prefix for dependencies")
    parser.add_argument(
        "--dev-dependencies", default=None, help="Required prefix for devDependencies"
    )
    parser.add_argument(
        "--only",
        action="append",
        choices=["prod", "production", "dev", "development"],
        help="Restrict validation to a dependency group (repeatable)",
    )
    parser.add_argument(
        "--hardcoded",
        choices=[HardcodedMode.ALLOW.value, HardcodedMode.FORCE.value],
        default=None,
        help="Allow or force exact versions instead of ranges",
    )
    parser.add_argument(
        "--excluded", action="append", help="Dependency name to skip (repeatable)"
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON report")
    parser.add_argument(
        "--summary", type=Path, default=None, help="Append a Markdown summary to this file"
    )
    parser.add_argument("--warn-only", action="store_true", help="Exit 0 even on violations")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _build_options(args: argparse.Namespace) -> ValidationOptions:
    base = load_options(args.config).to_dict()

    overrides: dict[str, Any] = {
        "dependencies": args.dependencies,
        "devDependencies": args.dev_dependencies,
        "only": args.only,
        "hardcoded": args.hardcoded,
        "excluded": args.excluded,
    }
    base.update({key: value for key, value in overrides.items() if value is not None})
    return ValidationOptions.from_dict(base)


def _manifest_sources(args: argparse.Namespace, options: ValidationOptions) -> list[str]:
    if args.paths:
        return list(args.paths)
    if args.root is not None:
        found = discover_manifests(args.root)
        if not found:
            raise ConfigurationError(f"No manifests found under {args.root}")
        return [str(p) for p in found]
    if options.package_file:
        return [options.package_file]
    return [str(Path.cwd() / "package.json")]


def _warn_only(args: argparse.Namespace) -> bool:
    if args.warn_only:
        return True
    warn_env = os.getenv(WARN_ONLY_ENV_VAR, "").strip().lower()
    return warn_env in {"1", "true", "yes", "y"}


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        options = _build_options(args)
        sources = _manifest_sources(args, options)
        # Tables go to stdout unless a JSON report was requested.
        stream = sys.stderr if args.json else sys.stdout
        runs = run_pipeline(sources, options, stream)
    except ConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    report = aggregate(runs)

    if args.json:
        print(json.dumps(report, indent=2))

    if args.summary is not None:
        with args.summary.open("a", encoding="utf-8") as fh:
            fh.write(render_summary(report))

    if report["hasViolations"] and not _warn_only(args):
        return EXIT_VIOLATIONS

    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
