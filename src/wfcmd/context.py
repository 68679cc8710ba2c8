"""Step environment and CLI context."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Iterator, Optional

import click

from .models.settings import ChannelSettings


class StepEnvironment(Mapping):
    """Read-only snapshot of the variables the orchestrator passed to a step.

    Lookups are exact and case-sensitive; ``get`` defaults to an empty
    string. The two write operations (``with_value`` and
    ``with_path_prepended``) return a new environment and leave this one
    untouched.
    """

    def __init__(
        self,
        variables: Optional[Mapping[str, str]] = None,
        settings: Optional[ChannelSettings] = None,
    ):
        self._variables = dict(variables or {})
        self.settings = settings or ChannelSettings()

    @classmethod
    def from_os(
        cls, settings: Optional[ChannelSettings] = None
    ) -> "StepEnvironment":
        """Seed from a copy of the current process environment."""
        return cls(os.environ.copy(), settings)

    def __getitem__(self, name: str) -> str:
        return self._variables[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def __repr__(self) -> str:
        return f"StepEnvironment({len(self._variables)} variables)"

    def get(self, name: str, default: str = "") -> str:
        return self._variables.get(name, default)

    def with_value(self, name: str, value: str) -> "StepEnvironment":
        """Return a copy with ``name`` set to ``value``."""
        return StepEnvironment({**self._variables, name: value}, self.settings)

    def with_path_prepended(self, entry: str) -> "StepEnvironment":
        """Return a copy with ``entry`` prepended to the path variable."""
        variable = self.settings.path_variable
        current = self.get(variable)
        return self.with_value(
            variable, entry + self.settings.path_separator + current
        )

    def input(self, name: str) -> str:
        """Raw (untrimmed) value of a step input, or "" if not supplied.

        "my input" is looked up as INPUT_MY_INPUT.
        """
        return self.get(input_variable_name(name, self.settings))

    def state(self, name: str) -> str:
        """Value saved by an earlier phase of this step, or ""."""
        return self.get(self.settings.state_prefix + name)

    @property
    def is_debug(self) -> bool:
        return self.get(self.settings.debug_variable) == "1"


def input_variable_name(
    name: str, settings: Optional[ChannelSettings] = None
) -> str:
    """Environment variable holding input ``name`` (spaces→_, upper-cased)."""
    settings = settings or ChannelSettings()
    return settings.input_prefix + name.replace(" ", "_").upper()


class WfcmdContext:
    def __init__(self):
        self.action = None


pass_context = click.make_pass_decorator(WfcmdContext, ensure=True)


__all__ = [
    "StepEnvironment",
    "WfcmdContext",
    "input_variable_name",
    "pass_context",
]
