"""Tests for validation options and the options-file loader."""

import json

import pytest

from dep_validate.core import validate
from dep_validate.errors import ConfigurationError
from dep_validate.models import HardcodedMode
from dep_validate.options import ValidationOptions, load_options


class TestFromDict:
    """Mapping the configuration surface onto ValidationOptions."""

    def test_defaults(self):
        options = ValidationOptions.from_dict({})
        assert options == ValidationOptions()
        assert options.dependencies == "~"
        assert options.dev_dependencies == "^"
        assert options.only is None
        assert options.hardcoded is HardcodedMode.DEFAULT
        assert options.excluded == ()
        assert options.fail_on_error is False

    def test_full_mapping(self):
        options = ValidationOptions.from_dict(
            {
                "packageFile": "/repo/package.json",
                "dependencies": "^",
                "devDependencies": "~",
                "only": ["dev"],
                "hardcoded": "allow",
                "excluded": ["lodash", "react"],
                "failOnError": True,
            }
        )
        assert options.package_file == "/repo/package.json"
        assert options.dependencies == "^"
        assert options.dev_dependencies == "~"
        assert options.only == ("dev",)
        assert options.hardcoded is HardcodedMode.ALLOW
        assert options.excluded == ("lodash", "react")
        assert options.fail_on_error is True

    def test_strings_become_lists(self):
        options = ValidationOptions.from_dict({"only": "prod", "excluded": "lodash"})
        assert options.only == ("prod",)
        assert options.excluded == ("lodash",)

    def test_explicit_empty_only_is_kept(self):
        assert ValidationOptions.from_dict({"only": []}).only == ()

    def test_prefix_is_not_validated(self):
        assert ValidationOptions.from_dict({"dependencies": "v"}).dependencies == "v"

    def test_non_string_prefix_is_kept_as_text(self):
        options = ValidationOptions.from_dict({"dependencies": 1, "devDependencies": False})
        assert options.dependencies == "1"
        assert options.dev_dependencies == "^"

    def test_non_string_prefix_never_matches(self):
        result = validate({"dependencies": {"a": "~1.0.0"}}, {"dependencies": 1})
        assert [v.expected for v in result.dependencies] == ["11.0.0"]

    @pytest.mark.parametrize(
        "data",
        [
            {"excluded": 3},
            {"only": [1, 2]},
            {"failOnError": "yes"},
            {"hardcoded": True},
        ],
    )
    def test_wrong_types_raise(self, data):
        with pytest.raises(ConfigurationError):
            ValidationOptions.from_dict(data)

    def test_round_trip_through_to_dict(self):
        options = ValidationOptions(only=("dev",), excluded=("a",), fail_on_error=True)
        assert ValidationOptions.from_dict(options.to_dict()) == options

    def test_with_package_file_returns_copy(self, tmp_path):
        options = ValidationOptions(excluded=("a",))
        updated = options.with_package_file(tmp_path / "package.json")
        assert updated.package_file == str(tmp_path / "package.json")
        assert updated.excluded == ("a",)
        assert options.package_file is None


class TestLoadOptions:
    """Reading options files."""

    def test_no_path_returns_defaults(self):
        assert load_options() == ValidationOptions()

    def test_json_file(self, tmp_path):
        path = tmp_path / "dep-validate.json"
        path.write_text(json.dumps({"hardcoded": "force", "excluded": "a"}))
        options = load_options(path)
        assert options.hardcoded is HardcodedMode.FORCE
        assert options.excluded == ("a",)

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "dep-validate.yaml"
        path.write_text("only:\n  - prod\ndependencies: '^'\n")
        options = load_options(path)
        assert options.only == ("prod",)
        assert options.dependencies == "^"

    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "options.json"
        path.write_text(json.dumps({"failOnError": True}))
        monkeypatch.setenv("DEP_VALIDATE_CONFIG", str(path))
        assert load_options().fail_on_error is True

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_options(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "options.json"
        path.write_text("{oops")
        with pytest.raises(ConfigurationError, match="Invalid options file"):
            load_options(path)

    def test_non_object(self, tmp_path):
        path = tmp_path / "options.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigurationError, match="must contain an object"):
            load_options(path)
