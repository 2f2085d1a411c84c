"""Typed, layered access to environment variables.

Lookup order (first hit wins):
1. override - values written with EnvSet.set()
2. OS environment - the injected EnvBackend (os.environ by default)
3. file - values parsed from the env file by EnvSet.load_file()
4. the caller's default

Typed getters never raise. They return `(value, error)`: the parsed value and
None on success, otherwise the caller's default and an EnvError describing
why it was used.

EnvSet is not thread-safe.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

from envtier.config import EnvtierSettings, get_settings
from envtier.defaults import DefaultGetter
from envtier.enums import LogLevel
from envtier.env_file import read_env_file
from envtier.errors import (
    EmptyError,
    EnvError,
    FileAlreadyLoadedError,
    IntOverflowError,
    NotSetError,
    PathResolutionError,
    PlatformEnvError,
)
from envtier.log_level import apply_log_level
from envtier.parsing import narrow_int, parse_bool, parse_int, sign_flipped
from envtier.services.runtime_env_service import EnvBackend, RuntimeEnvService

logger = logging.getLogger(__name__)


class Getter(Protocol):
    """Read side of EnvSet."""

    def string(self, key: str, default: str) -> tuple[str, bool]: ...

    def int(self, key: str, default: int) -> tuple[int, EnvError | None]: ...

    def bool(self, key: str, default: bool) -> tuple[bool, EnvError | None]: ...

    def int32(self, key: str, default: int) -> tuple[int, EnvError | None]: ...

    def int64(self, key: str, default: int) -> tuple[int, EnvError | None]: ...

    def default(self, fallback: str) -> DefaultGetter[str]: ...

    def default_int(self, fallback: int) -> DefaultGetter[int]: ...

    def default_bool(self, fallback: bool) -> DefaultGetter[bool]: ...

    def default_int32(self, fallback: int) -> DefaultGetter[int]: ...

    def default_int64(self, fallback: int) -> DefaultGetter[int]: ...


class Setter(Protocol):
    """Write side of EnvSet."""

    def set(self, key: str, value: str, *, global_: bool = False) -> None: ...

    def unset(self, key: str) -> None: ...

    def clone(self) -> "EnvSet": ...


class EnvSet:
    """Read, copy or modify a layered set of environment variables.

    The OS environment tier is shared: clones observe, and global writes
    affect, the same backend. The file and override tiers belong to each
    instance.
    """

    def __init__(
        self,
        env: EnvBackend | None = None,
        *,
        settings: EnvtierSettings | None = None,
        default_value: str = "",
    ) -> None:
        self.env: EnvBackend = env if env is not None else RuntimeEnvService()
        self.settings = settings if settings is not None else get_settings()
        self.default_value = default_value
        self.file_data: dict[str, str] | None = None
        self.override: dict[str, str] | None = None

    def __repr__(self) -> str:
        files = len(self.file_data) if self.file_data is not None else None
        overrides = len(self.override) if self.override is not None else None
        return f"EnvSet(file_data={files}, override={overrides}, env={type(self.env).__name__})"

    def getter(self) -> Getter:
        return self

    def setter(self) -> Setter:
        return self

    # ------------------------------------------------------------------
    # File tier
    # ------------------------------------------------------------------

    def load_file(self, path: str | os.PathLike[str] | None = None) -> dict[str, str]:
        """Read the env file; its values rank below the OS environment.

        `path` defaults to settings.file_name, resolved against the current
        working directory. A missing file is not an error: the file tier is
        left as it was and an empty mapping is returned.

        Returns:
            A copy of the freshly parsed mapping.

        Raises:
            FileAlreadyLoadedError: File data exists and set() was used since.
            PathResolutionError: The absolute path cannot be determined.
            OSError: The file exists but cannot be read.
        """
        if self.file_data and self.override is not None:
            raise FileAlreadyLoadedError(str(path) if path is not None else None)

        name = path if path is not None else self.settings.file_name
        try:
            filename = Path(name).absolute()
        except OSError as e:
            raise PathResolutionError(f"cannot resolve absolute path of {name!s}: {e}") from e

        logger.debug("Reading env file: %s", filename)

        try:
            data = read_env_file(
                filename,
                encoding=self.settings.file_encoding,
                trim=self.settings.file_trim_characters,
            )
        except FileNotFoundError:
            logger.debug("Env file not found, skipping: %s", filename)
            return {}

        self.file_data = data
        return dict(data)

    # ------------------------------------------------------------------
    # Getters
    # ------------------------------------------------------------------

    def string(self, key: str, default: str) -> tuple[str, bool]:
        """Return `(value, found)` for `key`.

        Override values are returned exactly as set. Values from the OS
        environment and the file are trimmed of settings.trim_characters.
        When the key is in no tier, returns `(default, False)` with the
        default untouched.
        """
        if self.override is not None and key in self.override:
            return self.override[key], True

        val = self._lookup(key)
        if val is None:
            return default, False
        return val.strip(self.settings.trim_characters), True

    def int(self, key: str, default: int) -> tuple[int, EnvError | None]:
        """Parse a native-width int; values whose sign flips when narrowed overflow."""
        v, err = self.int64(key, default)
        if err is not None:
            return default, err

        bits = self.settings.int_bits
        i = narrow_int(v, bits)
        if sign_flipped(v, i):
            return default, IntOverflowError(key, v, bits)
        return i, None

    def int32(self, key: str, default: int) -> tuple[int, EnvError | None]:
        return self._parse_int(key, default, 32)

    def int64(self, key: str, default: int) -> tuple[int, EnvError | None]:
        return self._parse_int(key, default, 64)

    def bool(self, key: str, default: bool) -> tuple[bool, EnvError | None]:
        s, err = self._require(key)
        if err is not None:
            return default, err
        try:
            return parse_bool(key, s), None
        except EnvError as e:
            return default, e

    def default(self, fallback: str) -> DefaultGetter[str]:
        return DefaultGetter(self.string, fallback)

    def default_int(self, fallback: int) -> DefaultGetter[int]:
        return DefaultGetter(self.int, fallback)

    def default_bool(self, fallback: bool) -> DefaultGetter[bool]:
        return DefaultGetter(self.bool, fallback)

    def default_int32(self, fallback: int) -> DefaultGetter[int]:
        return DefaultGetter(self.int32, fallback)

    def default_int64(self, fallback: int) -> DefaultGetter[int]:
        return DefaultGetter(self.int64, fallback)

    def default_get(self, key: str) -> str:
        """Return the string value of `key`, or this instance's default_value."""
        val, _ = self.string(key, self.default_value)
        return val

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set(self, key: str, value: str, *, global_: bool = False) -> None:
        """Set a variable.

        With `global_=True` the value is also written to the OS environment;
        otherwise it is only visible through this instance and its clones.

        Raises:
            PlatformEnvError: The OS environment rejected the write.
        """
        if self.override is None:
            self.override = {}
        self.override[key] = value

        if global_:
            try:
                self.env.set(key, value)
            except (OSError, ValueError) as e:
                raise PlatformEnvError(f"cannot set envvar {key!r}: {e}") from e

    def unset(self, key: str) -> None:
        """Remove a variable.

        If `key` is held by the override or file tier it is removed there
        only, and any OS environment value of the same name is left in place.
        Otherwise it is removed from the OS environment.

        Raises:
            PlatformEnvError: The OS environment rejected the removal.
        """
        local = False

        if self.override is not None and key in self.override:
            del self.override[key]
            local = True

        if self.file_data is not None and key in self.file_data:
            del self.file_data[key]
            local = True

        if local:
            return

        try:
            self.env.unset(key)
        except (OSError, ValueError) as e:
            raise PlatformEnvError(f"cannot unset envvar {key!r}: {e}") from e

    def clone(self) -> EnvSet:
        """Snapshot the file and override tiers (NOT the OS environment).

        The clone can be modified with set()/unset() in a limited scope
        without affecting this instance.
        """
        n = EnvSet(self.env, settings=self.settings, default_value=self.default_value)
        if self.file_data is not None:
            n.file_data = dict(self.file_data)
        if self.override is not None:
            n.override = dict(self.override)
        return n

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def apply_log_level(self, default_level: LogLevel) -> LogLevel:
        """Apply the level named by LOG_LEVEL process-wide and return it."""
        return apply_log_level(self, default_level, key=self.settings.log_level_key)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _lookup(self, key: str) -> str | None:
        val = self.env.get(key)
        if val is not None:
            return val

        if self.file_data is not None:
            return self.file_data.get(key)
        return None

    def _require(self, key: str) -> tuple[str, EnvError | None]:
        s, found = self.string(key, "")
        if not found:
            return s, NotSetError(key)
        if not s:
            return s, EmptyError(key)
        return s, None

    def _parse_int(self, key: str, default: int, bits: int) -> tuple[int, EnvError | None]:
        s, err = self._require(key)
        if err is not None:
            return default, err
        try:
            return parse_int(key, s, bits), None
        except EnvError as e:
            return default, e
