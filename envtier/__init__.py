"""Typed, layered access to environment variables.

Example:
    env = EnvSet()
    env.load_file()
    port, err = env.int("PORT", 8080)
    debug = env.default_bool(False)("DEBUG")
"""

from envtier.config import EnvtierSettings, get_settings
from envtier.defaults import DefaultGetter
from envtier.enums import LogLevel
from envtier.env_set import EnvSet, Getter, Setter
from envtier.errors import (
    EmptyError,
    EnvError,
    FileAlreadyLoadedError,
    IntOverflowError,
    NotSetError,
    ParseError,
    PathResolutionError,
    PlatformEnvError,
)
from envtier.log_level import apply_log_level
from envtier.services import EnvBackend, MemoryEnvService, RuntimeEnvService

__all__ = [
    "DefaultGetter",
    "EmptyError",
    "EnvBackend",
    "EnvError",
    "EnvSet",
    "EnvtierSettings",
    "FileAlreadyLoadedError",
    "Getter",
    "IntOverflowError",
    "LogLevel",
    "MemoryEnvService",
    "NotSetError",
    "ParseError",
    "PathResolutionError",
    "PlatformEnvError",
    "RuntimeEnvService",
    "Setter",
    "apply_log_level",
    "get_settings",
]
