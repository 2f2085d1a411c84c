"""Runtime environment variable backends.

EnvSet never touches os.environ directly; it goes through an EnvBackend.

- RuntimeEnvService is the real process environment (global to the process).
- MemoryEnvService is a private string table with the same interface, used by
  tests and by callers that want a fully sandboxed environment.

Note: This is intentionally small and synchronous.
"""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable


@runtime_checkable
class EnvBackend(Protocol):
    """get/set/unset over a process-wide string table."""

    def get(self, key: str, default: str | None = None) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def unset(self, key: str) -> None: ...


class RuntimeEnvService:
    """Small wrapper around os.environ for runtime env mutation."""

    def get(self, key: str, default: str | None = None) -> str | None:
        return os.environ.get(key, default)

    def set(self, key: str, value: str) -> None:
        os.environ[str(key)] = str(value)

    def unset(self, key: str) -> None:
        os.environ.pop(str(key), None)


class MemoryEnvService:
    """In-memory stand-in for the process environment.

    Mirrors the platform's constraints on names and values so that code
    exercised against it fails the same way it would against os.environ.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._vars: dict[str, str] = dict(initial) if initial else {}

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._vars.get(key, default)

    def set(self, key: str, value: str) -> None:
        key, value = str(key), str(value)
        if not key or "=" in key:
            raise ValueError(f"illegal environment variable name: {key!r}")
        if "\x00" in key or "\x00" in value:
            raise ValueError("embedded null byte")
        self._vars[key] = value

    def unset(self, key: str) -> None:
        self._vars.pop(str(key), None)

    def __contains__(self, key: object) -> bool:
        return key in self._vars
