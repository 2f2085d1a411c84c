"""Error taxonomy for environment access.

Typed getters return these as values alongside the caller's default; file
loading and mutation raise them.
"""


class EnvError(Exception):
    """Base class for all envtier errors."""

    pass


class FileAlreadyLoadedError(EnvError):
    """Raised when the env file is reloaded after overrides were applied."""

    def __init__(self, path: str | None = None):
        self.path = path
        super().__init__(
            "env file was loaded already and a variable was changed/added "
            "since then; refusing to load again"
        )


class PathResolutionError(EnvError, OSError):
    """Raised when the absolute path of the env file cannot be determined."""

    pass


class NotSetError(EnvError, KeyError):
    """The variable is absent from every tier."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"envvar {self.key!r} is unset"


class EmptyError(EnvError, ValueError):
    """The variable is set, but empty after trimming."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"envvar {key!r} is set, but empty")


class ParseError(EnvError, ValueError):
    """The value does not match the literal grammar of the target type."""

    def __init__(self, key: str, value: str, target: str, reason: str = "invalid syntax"):
        self.key = key
        self.value = value
        self.target = target
        self.reason = reason
        super().__init__(f"envvar {key!r}: parsing {value!r} as {target}: {reason}")


class IntOverflowError(EnvError, OverflowError):
    """Narrowing to the native integer width changed the sign."""

    def __init__(self, key: str, value: int, bits: int):
        self.key = key
        self.value = value
        self.bits = bits
        super().__init__(f"envvar {key!r}: integer overflow, {value} does not fit in {bits} bits")


class PlatformEnvError(EnvError, OSError):
    """Raised when the process environment cannot be modified."""

    pass
