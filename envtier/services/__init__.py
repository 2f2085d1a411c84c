"""Environment backend services package."""

from .runtime_env_service import EnvBackend, MemoryEnvService, RuntimeEnvService

__all__ = [
    "EnvBackend",
    "MemoryEnvService",
    "RuntimeEnvService",
]
