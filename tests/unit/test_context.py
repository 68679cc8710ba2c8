"""Unit tests for the step environment and channel settings."""

import json

import pytest
from pydantic import ValidationError

from wfcmd.context import StepEnvironment, input_variable_name
from wfcmd.models import ChannelSettings, Error, load_settings, resolve_settings


class TestStepEnvironment:
    """Test lookups and copy-on-write updates."""

    def test_missing_key_defaults_to_empty(self):
        env = StepEnvironment({})
        assert env.get("NOPE") == ""

    def test_lookup_is_case_sensitive(self):
        env = StepEnvironment({"Foo": "1"})
        assert env.get("Foo") == "1"
        assert env.get("FOO") == ""

    def test_with_value_returns_new_environment(self):
        env = StepEnvironment({"A": "1"})
        updated = env.with_value("B", "2")
        assert updated["B"] == "2"
        assert updated["A"] == "1"
        assert "B" not in env

    def test_with_path_prepended(self):
        settings = ChannelSettings(path_separator=":")
        env = StepEnvironment({"PATH": "/usr/bin"}, settings)
        updated = env.with_path_prepended("/opt/tool")
        assert updated["PATH"] == "/opt/tool:/usr/bin"
        assert env["PATH"] == "/usr/bin"

    def test_with_path_prepended_when_unset(self):
        settings = ChannelSettings(path_separator=":")
        env = StepEnvironment({}, settings)
        assert env.with_path_prepended("/opt/tool")["PATH"] == "/opt/tool:"

    def test_custom_path_variable(self):
        settings = ChannelSettings(path_variable="PYTHONPATH", path_separator=";")
        env = StepEnvironment({"PYTHONPATH": "lib"}, settings)
        assert env.with_path_prepended("src")["PYTHONPATH"] == "src;lib"

    def test_input_and_state(self):
        env = StepEnvironment({"INPUT_MY_INPUT": " v ", "STATE_pid": "42"})
        assert env.input("my input") == " v "
        assert env.state("pid") == "42"
        assert env.state("PID") == ""

    def test_is_debug(self):
        assert StepEnvironment({"RUNNER_DEBUG": "1"}).is_debug
        assert not StepEnvironment({"RUNNER_DEBUG": "true"}).is_debug
        assert not StepEnvironment({}).is_debug

    def test_from_os(self, monkeypatch):
        monkeypatch.setenv("WFCMD_TEST_VAR", "x")
        env = StepEnvironment.from_os()
        assert env["WFCMD_TEST_VAR"] == "x"

    def test_seed_is_copied(self):
        seed = {"A": "1"}
        env = StepEnvironment(seed)
        seed["A"] = "2"
        assert env["A"] == "1"


class TestInputVariableName:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("token", "INPUT_TOKEN"),
            ("api token", "INPUT_API_TOKEN"),
            ("Already_Upper", "INPUT_ALREADY_UPPER"),
            ("with-dash", "INPUT_WITH-DASH"),
        ],
    )
    def test_normalization(self, name, expected):
        assert input_variable_name(name) == expected


class TestSettings:
    """Test settings validation and loading."""

    def test_defaults(self):
        settings = ChannelSettings()
        assert settings.input_prefix == "INPUT_"
        assert settings.state_prefix == "STATE_"
        assert settings.path_variable == "PATH"
        assert settings.debug_variable == "RUNNER_DEBUG"

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            ChannelSettings(unknown="x")

    def test_empty_separator_rejected(self):
        with pytest.raises(ValidationError):
            ChannelSettings(path_separator="")

    def test_load_settings(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"debug_variable": "STEP_DEBUG"}))
        settings = load_settings(path)
        assert settings.debug_variable == "STEP_DEBUG"

    def test_load_missing_file(self, tmp_path):
        result = load_settings(tmp_path / "missing.json")
        assert isinstance(result, Error)
        assert "not found" in result.message

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        assert isinstance(load_settings(path), Error)

    def test_load_invalid_settings(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"path_variable": ""}))
        assert isinstance(load_settings(path), Error)

    def test_resolve_prefers_option(self, tmp_path):
        flag = tmp_path / "flag.json"
        flag.write_text(json.dumps({"state_prefix": "FLAG_"}))
        env_file = tmp_path / "env.json"
        env_file.write_text(json.dumps({"state_prefix": "ENV_"}))
        environ = {"WFCMD_SETTINGS": str(env_file)}
        assert resolve_settings(str(flag), environ).state_prefix == "FLAG_"
        assert resolve_settings(None, environ).state_prefix == "ENV_"
        assert resolve_settings(None, {}) == ChannelSettings()
