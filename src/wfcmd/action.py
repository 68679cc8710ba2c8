"""Step-facing API for talking to the orchestrator.

Everything the orchestrator needs to know goes through the output stream as
workflow commands. Inputs and saved state come in through the environment
the step was launched with.

Example:
    action = Action()
    token = action.get_input("token", required=True)
    action.set_secret(token)
    with action.group("Build"):
        action.info("compiling...")
    action.set_output("artifact", {"path": "dist/app.whl"})
    sys.exit(action.exit_code)
"""

from __future__ import annotations

import logging
import sys
import traceback
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional, TextIO, Union

from .context import StepEnvironment
from .models.errors import Error, MissingRequiredInputError
from .models.settings import ChannelSettings
from .protocol.command import CommandProperties
from .protocol.emitter import issue, issue_command
from .serialization import Serializer, to_command_value
from .status import ExitCode

logger = logging.getLogger(__name__)

MessageOrError = Union[str, BaseException]


def root_cause(error: BaseException) -> BaseException:
    """Follow the explicit cause chain (``raise ... from``) of ``error``.

    Implicit context ("during handling of ...") is not a cause and is not
    followed. Stops when a link points back to an exception already visited.
    """
    seen = {id(error)}
    current = error
    while True:
        nxt = current.__cause__
        if nxt is None or id(nxt) in seen:
            return current
        seen.add(id(nxt))
        current = nxt


def resolve_message(error: MessageOrError) -> str:
    """Message for a string or an exception's root cause.

    Falls back to "<type> @ <innermost frame>" when the root cause has no
    message.
    """
    if not isinstance(error, BaseException):
        return error

    root = root_cause(error)
    message = str(root)
    if message:
        return message

    error_type = type(root)
    type_name = f"{error_type.__module__}.{error_type.__qualname__}"
    frames = traceback.extract_tb(root.__traceback__)
    if frames:
        frame = frames[-1]
        location = f"{frame.filename}:{frame.lineno} in {frame.name}"
    else:
        location = "<no traceback>"
    return f"{type_name} @ {location}"


class Action:
    """One step execution's connection to the orchestrator."""

    def __init__(
        self,
        out: Optional[TextIO] = None,
        env: Optional[Mapping[str, str]] = None,
        *,
        serializer: Optional[Serializer] = None,
        settings: Optional[ChannelSettings] = None,
    ):
        self.out = out if out is not None else sys.stdout
        self.serializer = serializer
        if isinstance(env, StepEnvironment) and settings is None:
            self.env = env
        elif env is None:
            self.env = StepEnvironment.from_os(settings)
        else:
            self.env = StepEnvironment(env, settings)
        self._status = ExitCode.SUCCESS

    @property
    def status(self) -> ExitCode:
        return self._status

    @property
    def exit_code(self) -> int:
        return self._status.code

    def _command(
        self,
        command: str,
        properties: Optional[Mapping[str, Any]] = None,
        message: Any = None,
    ) -> None:
        issue_command(self.out, command, properties, message, self.serializer)

    # ------------------------------------------------------------------
    # Variables
    # ------------------------------------------------------------------

    def export_variable(self, name: str, value: Any) -> StepEnvironment:
        """Set an environment variable for this step and later ones.

        Returns the updated environment, which this action also adopts.
        """
        converted = to_command_value(value, self.serializer)
        self.env = self.env.with_value(name, converted)
        self._command("set-env", CommandProperties.named(name), converted)
        return self.env

    def set_secret(self, secret: str) -> None:
        """Register a value to be masked in the job's logs."""
        issue(self.out, "add-mask", secret)

    def add_path(self, path: str) -> StepEnvironment:
        """Prepend ``path`` to the path variable for this step and later ones."""
        issue(self.out, "add-path", path)
        self.env = self.env.with_path_prepended(path)
        return self.env

    def get_input(self, name: str, required: bool = False) -> str:
        """Value of a step input, trimmed.

        Raises:
            MissingRequiredInputError: If required and blank after trimming
        """
        value = self.env.input(name).strip()
        if required and not value:
            raise MissingRequiredInputError(name)
        return value

    def try_get_input(self, name: str, required: bool = False) -> str | Error:
        """Like ``get_input`` but returns an Error result instead of raising."""
        try:
            return self.get_input(name, required)
        except MissingRequiredInputError as e:
            return Error(message=str(e))

    def set_output(self, name: str, value: Any) -> None:
        self._command("set-output", CommandProperties.named(name), value)

    def set_command_echo(self, enabled: bool) -> None:
        """Turn echoing of commands in the job log on or off."""
        issue(self.out, "echo", "on" if enabled else "off")

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def set_failed(self, message: MessageOrError) -> None:
        """Mark the step failed and log the error.

        The step will exit with code 1. Does not raise, so cleanup code can
        keep running.
        """
        if self._status is not ExitCode.FAILURE:
            logger.debug("Step status set to failure")
        self._status = ExitCode.FAILURE
        self.error(message)

    # ------------------------------------------------------------------
    # Logging commands
    # ------------------------------------------------------------------

    def is_debug(self) -> bool:
        return self.env.is_debug

    def debug(self, message: MessageOrError) -> None:
        issue(self.out, "debug", resolve_message(message))

    def error(self, message: MessageOrError) -> None:
        issue(self.out, "error", resolve_message(message))

    def warning(self, message: MessageOrError) -> None:
        issue(self.out, "warning", resolve_message(message))

    def info(self, message: str) -> None:
        """Write a plain log line (no command envelope, no escaping)."""
        self.out.write(message + "\n")
        flush = getattr(self.out, "flush", None)
        if flush is not None:
            flush()

    def start_group(self, name: str) -> None:
        """Begin a foldable output group."""
        issue(self.out, "group", name)

    def end_group(self) -> None:
        issue(self.out, "endgroup")

    @contextmanager
    def group(self, name: str) -> Iterator["Action"]:
        """Wrap a block of output in a group, closing it even on error."""
        self.start_group(name)
        try:
            yield self
        finally:
            self.end_group()

    # ------------------------------------------------------------------
    # State shared between phases of the same step
    # ------------------------------------------------------------------

    def save_state(self, name: str, value: Any) -> None:
        """Save state for a later phase of this step (read with get_state)."""
        self._command("save-state", CommandProperties.named(name), value)

    def get_state(self, name: str) -> str:
        return self.env.state(name)


__all__ = ["Action", "resolve_message", "root_cause"]
