"""Package settings with env variable support.

These settings control how envtier itself behaves (file name, trim sets,
native integer width). They are read from ENVTIER_* variables, e.g.
ENVTIER_FILE_NAME=.env.local.
"""

import struct
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default env file name (a file name, not a path).
FILE_NAME = ".env"

# Characters trimmed from both ends of every value read through EnvSet.string().
TRIM_CHARACTERS = " \n\t"

# Characters trimmed from both ends of keys and values parsed from the env file.
FILE_TRIM_CHARACTERS = ' ,\t;#"'

# Width of the platform's native signed integer (pointer size).
NATIVE_INT_BITS = struct.calcsize("P") * 8


class EnvtierSettings(BaseSettings):
    """envtier configuration.

    Prefix: ENVTIER_ (e.g., ENVTIER_FILE_ENCODING)
    """

    model_config = SettingsConfigDict(
        env_prefix="ENVTIER_",
        extra="ignore",
    )

    file_name: str = Field(default=FILE_NAME)
    file_encoding: str = Field(default="utf-8")
    trim_characters: str = Field(default=TRIM_CHARACTERS)
    file_trim_characters: str = Field(default=FILE_TRIM_CHARACTERS)
    log_level_key: str = Field(
        default="LOG_LEVEL",
        description="Variable consulted by apply_log_level().",
    )
    int_bits: int = Field(
        default=NATIVE_INT_BITS,
        description="Width used by EnvSet.int() when narrowing parsed 64-bit values.",
    )

    @field_validator("int_bits")
    @classmethod
    def _check_int_bits(cls, v: int) -> int:
        if v not in (8, 16, 32, 64):
            raise ValueError("int_bits must be one of 8, 16, 32, 64")
        return v

    @field_validator("file_name")
    @classmethod
    def _check_file_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("file_name must not be empty")
        return v


@lru_cache
def get_settings() -> EnvtierSettings:
    """Return the process-wide settings, read once from ENVTIER_* variables."""
    return EnvtierSettings()
