"""Executable payloads attached to tasks.

An action is anything with a ``run(inputs, env)`` method returning an
:class:`Output`. Two variants ship with the package: :class:`CommandAction`,
built from a ``cmd`` string in the YAML file, and :class:`FnAction`, which
wraps caller-supplied Python logic.
"""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from typing import Any, Callable, Protocol, Tuple, runtime_checkable

from .logging import get_logger


log = get_logger("taskgraph.actions")


class RunningError(Exception):
    """Raised by an action when its work fails."""

    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode


@dataclass(frozen=True)
class Output:
    value: Any = None

    @classmethod
    def empty(cls) -> "Output":
        return cls()

    def is_empty(self) -> bool:
        return self.value is None


# Outputs of the precursor tasks, in precursor order
Input = Tuple[Output, ...]


class EnvVar:
    """Key/value environment shared by every action of one run."""

    def __init__(self, values: dict | None = None):
        self._values: dict[str, Any] = dict(values or {})

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self._values


@runtime_checkable
class Action(Protocol):
    def run(self, inputs: Input, env: EnvVar) -> Output: ...


class FnAction:
    """Wrap a plain ``fn(inputs, env)`` callable as an action.

    A returned :class:`Output` is passed through; any other value is wrapped.
    """

    def __init__(self, fn: Callable[[Input, EnvVar], Any]):
        self.fn = fn

    def run(self, inputs: Input, env: EnvVar) -> Output:
        result = self.fn(inputs, env)
        if isinstance(result, Output):
            return result
        return Output(result)

    def __repr__(self) -> str:
        return f"FnAction({getattr(self.fn, '__name__', self.fn)!r})"


def _shell_argv(command: str) -> list[str]:
    if os.name == "nt":
        return ["powershell", "-Command", command]
    # "taskgraph" fills $0 so inputs land in $1, $2, ...
    return ["sh", "-c", command, "taskgraph"]


class CommandAction:
    """Run a command string through the platform shell.

    String values of the inputs are appended as positional arguments. The
    command's stdout becomes the output value.
    """

    def __init__(self, command: str):
        self.command = command

    def run(self, inputs: Input, env: EnvVar) -> Output:
        argv = _shell_argv(self.command)
        argv.extend(o.value for o in inputs if isinstance(o.value, str))
        try:
            completed = subprocess.run(  # noqa: S603
                argv,
                check=False,
                capture_output=True,
                text=True,
                errors="replace",
            )
        except OSError as e:
            log.error("Failed to start command %r: %s", self.command, e)
            raise RunningError(f"Failed to start command: {e}") from e
        if completed.returncode != 0:
            message = completed.stderr.strip() or f"exit status {completed.returncode}"
            log.error("Command %r failed: %s", self.command, message)
            raise RunningError(message, returncode=completed.returncode)
        return Output(completed.stdout)

    def __repr__(self) -> str:
        return f"CommandAction({self.command!r})"
