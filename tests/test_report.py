"""Tests for table rendering and the JSON aggregate."""

import io

from dep_validate.errors import CallbackFailure
from dep_validate.models import ManifestRun, ValidationResult, Violation
from dep_validate.report import aggregate, format_results, log, render

LODASH = Violation(name="lodash", version="1.2.3", expected="~1.2.3")
MOCHA = Violation(name="mocha", version="~2.0.0", expected="^2.0.0")


def _row(table: str, name: str) -> list:
    line = next(line for line in table.splitlines() if name in line)
    return line.split("│")[1:-1]


class TestFormatResults:
    """Per-group tables."""

    def test_compliant_groups_render_empty(self):
        assert format_results(ValidationResult()) == {"dependencies": "", "devDependencies": ""}

    def test_runtime_table(self):
        formatted = format_results(ValidationResult(dependencies=(LODASH,)))
        table = formatted["dependencies"]
        assert "Dependencies" in table
        assert "Actual" in table
        assert "Expected" in table
        assert formatted["devDependencies"] == ""

    def test_versions_are_right_aligned(self):
        table = format_results(ValidationResult(dependencies=(LODASH,)))["dependencies"]
        name, actual, expected = _row(table, "lodash")
        assert name.strip() == "lodash"
        assert actual.strip() == "1.2.3"
        assert actual.endswith("1.2.3 ") and actual.startswith("  ")
        assert expected.endswith("~1.2.3 ") and expected.startswith("  ")

    def test_markup_in_names_is_literal(self):
        odd = Violation(name="[bold]pkg", version="1.0.0", expected="~1.0.0")
        table = format_results(ValidationResult(dependencies=(odd,)))["dependencies"]
        assert "[bold]pkg" in table

    def test_no_ansi_codes(self):
        table = format_results(ValidationResult(dev_dependencies=(MOCHA,)))["devDependencies"]
        assert "\x1b[" not in table
        assert "Dev Dependencies" in table


class TestRender:
    """Combined output and logging."""

    def test_compliant_renders_nothing(self):
        assert render(ValidationResult()) == ""

    def test_runtime_group_first(self):
        output = render(ValidationResult(dependencies=(LODASH,), dev_dependencies=(MOCHA,)))
        assert output.index("lodash") < output.index("Dev Dependencies") < output.index("mocha")
        assert output.endswith("\n")

    def test_log_writes_to_stream(self):
        stream = io.StringIO()
        result = ValidationResult(dependencies=(LODASH,))
        log(result, stream)
        assert stream.getvalue() == render(result)

    def test_log_accepts_callback_failure(self):
        stream = io.StringIO()
        result = ValidationResult(dev_dependencies=(MOCHA,))
        log(CallbackFailure("Unable to validate dependencies", result), stream)
        assert "mocha" in stream.getvalue()

    def test_log_defaults_to_stdout(self, capsys):
        log(ValidationResult(dependencies=(LODASH,)))
        assert "lodash" in capsys.readouterr().out


class TestAggregate:
    """JSON-friendly batch report."""

    def test_totals_and_order(self):
        runs = [
            ManifestRun(path="b/package.json", result=ValidationResult(dependencies=(LODASH,))),
            ManifestRun(path="a/package.json", result=ValidationResult()),
            ManifestRun(
                path="c/package.json",
                result=ValidationResult(dependencies=(LODASH,), dev_dependencies=(MOCHA,)),
            ),
        ]
        report = aggregate(runs)
        assert report["version"] == "1"
        assert report["hasViolations"] is True
        assert [m["path"] for m in report["manifests"]] == [
            "b/package.json",
            "a/package.json",
            "c/package.json",
        ]
        assert report["manifests"][2]["devDependencies"] == [MOCHA.to_dict()]
        assert report["totals"] == {"manifests": 3, "failed": 2, "violations": 3}

    def test_empty(self):
        report = aggregate([])
        assert report["hasViolations"] is False
        assert report["totals"] == {"manifests": 0, "failed": 0, "violations": 0}


class TestLongCells:
    """Wide rows are shown in full."""

    def test_long_name_and_prerelease_version_are_not_truncated(self):
        name = "@organisation-with-a-long-scope/" + "x" * 70
        version = "^1.0.0-beta.1234567890+build.abcdefghijklmnop"
        expected = "~1.0.0-beta.1234567890+build.abcdefghijklmnop"
        result = ValidationResult(
            dependencies=(Violation(name=name, version=version, expected=expected),)
        )

        table = format_results(result)["dependencies"]
        assert "…" not in table
        cells = [cell.strip() for cell in _row(table, name)]
        assert cells == [name, version, expected]
