"""Pytest configuration and fixtures."""

import logging

import pytest

from envtier.config import EnvtierSettings
from envtier.env_set import EnvSet
from envtier.services.runtime_env_service import MemoryEnvService


@pytest.fixture(autouse=True)
def reset_global_log_level():
    """apply_log_level() changes the process-wide threshold; undo it per test."""
    logging.disable(logging.NOTSET)
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def settings(monkeypatch) -> EnvtierSettings:
    """Default settings, isolated from any ENVTIER_* variables on the host."""
    for name in [
        "ENVTIER_FILE_NAME",
        "ENVTIER_FILE_ENCODING",
        "ENVTIER_TRIM_CHARACTERS",
        "ENVTIER_FILE_TRIM_CHARACTERS",
        "ENVTIER_LOG_LEVEL_KEY",
        "ENVTIER_INT_BITS",
    ]:
        monkeypatch.delenv(name, raising=False)
    return EnvtierSettings()


@pytest.fixture
def memory_env() -> MemoryEnvService:
    """An empty in-memory OS environment."""
    return MemoryEnvService()


@pytest.fixture
def env(memory_env: MemoryEnvService, settings: EnvtierSettings) -> EnvSet:
    """EnvSet backed by the in-memory environment."""
    return EnvSet(memory_env, settings=settings)
