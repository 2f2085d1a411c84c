"""Flat key=value env file parsing.

Format:
- one variable per line;
- a line whose first non-blank character is `#` is a comment;
- a data line has exactly one `=`; lines with none or several are skipped;
- keys and values are trimmed of the file trim set (space, comma, tab,
  semicolon, hash and double quote).

Skipped lines are not reported. Bytes that do not decode are kept as lone
surrogates, the same way os.environ decodes them on POSIX.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from envtier.config import FILE_TRIM_CHARACTERS


def parse_env_line(line: str, trim: str = FILE_TRIM_CHARACTERS) -> tuple[str, str] | None:
    """Parse a single line into a (key, value) pair, or None if it is skipped."""
    if line.strip(" \t").startswith("#"):
        return None

    parts = line.split("=")
    if len(parts) != 2:
        return None

    key, value = (part.strip(trim) for part in parts)
    return key, value


def parse_env_lines(lines: Iterable[str], trim: str = FILE_TRIM_CHARACTERS) -> dict[str, str]:
    """Parse env file lines; later duplicate keys overwrite earlier ones."""
    data: dict[str, str] = {}
    for raw in lines:
        line = raw.rstrip("\n")
        if line.endswith("\r"):
            line = line[:-1]
        pair = parse_env_line(line, trim)
        if pair is None:
            continue
        key, value = pair
        data[key] = value
    return data


def read_env_file(
    path: Path,
    *,
    encoding: str = "utf-8",
    trim: str = FILE_TRIM_CHARACTERS,
) -> dict[str, str]:
    """Read and parse an env file.

    Raises:
        FileNotFoundError: The file does not exist.
        OSError: Any other open/read failure.
    """
    with path.open("r", encoding=encoding, errors="surrogateescape") as f:
        return parse_env_lines(f, trim)
