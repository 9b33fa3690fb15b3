#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Line-level helpers for flat KEY=VALUE configuration files.

No quoting, escaping or comments are recognized. A line belongs to KEY
only if it starts with the literal text ``KEY=``, so ``FOO`` never
matches a ``FOOBAR=...`` line.
"""

from __future__ import annotations

import os
from tempfile import NamedTemporaryFile
from typing import Iterable, Optional

from envmanager.envmanager_constants import CONFIG_FILE_MODE
from envmanager.utils.exceptions import InvalidKeyError


def validate_env_entry(key: str, value: Optional[str] = None) -> None:
    """Raise InvalidKeyError if key/value can't be stored as a single KEY=VALUE line."""
    if not key:
        raise InvalidKeyError(key, "key must not be empty")
    if "=" in key:
        raise InvalidKeyError(key, "key must not contain '='")
    if "\n" in key or "\r" in key:
        raise InvalidKeyError(key, "key must not contain a line break")
    if "\x00" in key:
        raise InvalidKeyError(key, "key must not contain a null character")
    if value is not None:
        if "\n" in value or "\r" in value:
            raise InvalidKeyError(key, "value must not contain a line break")
        if "\x00" in value:
            raise InvalidKeyError(key, "value must not contain a null character")


def format_env_line(key: str, value: str) -> str:
    return f"{key}={value}"


def line_matches_key(line: str, key: str) -> bool:
    return line.startswith(f"{key}=")


def split_env_line(line: str) -> Optional[tuple[str, str]]:
    """Return (key, value) for a KEY=VALUE line, or None for anything else."""
    key, sep, value = line.partition("=")
    if not sep or not key:
        return None
    return key, value


def filter_key_lines(lines: Iterable[str], key: str) -> tuple[list[str], bool]:
    """Drop blank lines and every line belonging to key.

    Returns the surviving lines (original order) and whether key was present.
    """
    kept: list[str] = []
    found = False
    for line in lines:
        if line_matches_key(line, key):
            found = True
            continue
        if line != "":
            kept.append(line)
    return kept, found


def read_env_lines(file_path: str) -> list[str]:
    """Read a configuration file as a list of lines (without line terminators)."""
    with open(file_path, "r", encoding="utf-8", newline="") as f:
        content = f.read()
    return content.split("\n")


def has_trailing_newline(lines: list[str]) -> bool:
    """Whether lines, as returned by read_env_lines, came from content ending in a newline."""
    return len(lines) > 1 and lines[-1] == ""


def write_env_lines(file_path: str, lines: list[str], trailing_newline: bool = False) -> None:
    """Replace file_path with lines, atomically.

    Lines are joined with newlines; a final newline is added only when
    trailing_newline is set, so an existing file keeps its convention.

    The new content goes to a temporary file in the same directory which is
    then renamed over the original, so a reader sees either the old file or
    the new one.
    """
    directory = os.path.dirname(os.path.abspath(file_path))
    try:
        mode = os.stat(file_path).st_mode & 0o777
    except FileNotFoundError:
        mode = CONFIG_FILE_MODE

    content = "\n".join(lines)
    if lines and trailing_newline:
        content += "\n"
    with NamedTemporaryFile(
        mode="w",
        dir=directory,
        prefix=".envmanager-",
        suffix=".tmp",
        encoding="utf-8",
        newline="",
        delete=False,
    ) as f:
        tmp_name = f.name
        try:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        except BaseException:
            f.close()
            os.unlink(tmp_name)
            raise

    try:
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, file_path)
    except BaseException:
        os.unlink(tmp_name)
        raise
