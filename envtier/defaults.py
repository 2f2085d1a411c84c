"""Best-effort getters with a bound fallback value."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class DefaultGetter(Generic[T]):
    """Callable `key -> value` that never reports an error.

    Wraps a typed getter `(key, default) -> (value, error)` together with a
    fallback. The error half is discarded, so callers that need to tell a
    real value from the fallback must use the typed getter directly.
    """

    __slots__ = ("_getter", "fallback")

    def __init__(self, getter: Callable[[str, T], tuple[T, object]], fallback: T) -> None:
        self._getter = getter
        self.fallback = fallback

    def __call__(self, key: str) -> T:
        value, _ = self._getter(key, self.fallback)
        return value

    def __repr__(self) -> str:
        name = getattr(self._getter, "__name__", "getter")
        return f"DefaultGetter({name}, fallback={self.fallback!r})"
