"""Pytest configuration and shared fixtures."""

import io

import pytest
from click.testing import CliRunner

from wfcmd.action import Action
from wfcmd.cli.main import cli


@pytest.fixture(autouse=True)
def clear_settings_env(monkeypatch):
    """Keep a developer's $WFCMD_SETTINGS out of the tests."""
    monkeypatch.delenv("WFCMD_SETTINGS", raising=False)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args, optional input and environment.

    Usage:
        result = invoke(["export", "GREETING", "hi"])
        result = invoke(["get-input", "token"], env={"INPUT_TOKEN": "x"})
        result = invoke(["decode"], input_data="::debug::hi\\n")
    """

    def _invoke(args, input_data=None, env=None):
        return cli_runner.invoke(cli, args, input=input_data, env=env)

    return _invoke


@pytest.fixture
def out():
    """In-memory output stream standing in for the step's stdout."""
    return io.StringIO()


@pytest.fixture
def make_action(out):
    """Build an Action writing to ``out`` with the given environment."""

    def _make(env=None, **kwargs):
        return Action(out=out, env=env if env is not None else {}, **kwargs)

    return _make
