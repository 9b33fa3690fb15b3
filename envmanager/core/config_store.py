#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Persistence of KEY=VALUE entries in the managed .env file."""

import os
from collections.abc import Mapping
from typing import Optional

from envmanager.core.settings import ManagerSettings
from envmanager.utils.env_file_utils import (
    filter_key_lines,
    format_env_line,
    has_trailing_newline,
    line_matches_key,
    read_env_lines,
    split_env_line,
    validate_env_entry,
    write_env_lines,
)
from envmanager.utils.exceptions import StoreError
from envmanager.utils.logger_utils import EnvManagerLogger


class ConfigStore:
    """Reads and rewrites the configuration file.

    The file lives in the directory named by the base-directory variable,
    which is looked up on every call. Rewrites drop blank lines and keep
    every unrelated line in its original order; a written key always ends
    up as the single last line for that key. A rewrite ends in a newline
    only if the file it replaces did.
    """

    def __init__(self, environ: Mapping, settings: Optional[ManagerSettings] = None):
        self.environ = environ
        self.settings = settings or ManagerSettings()

    @property
    def file_path(self) -> str:
        base_dir = self.environ.get(self.settings.base_dir_key, "")
        if not base_dir:
            raise StoreError(f"{self.settings.base_dir_key} is not set, unable to locate {self.settings.config_file_name}")
        return os.path.join(base_dir, self.settings.config_file_name)

    def read_lines(self) -> list[str]:
        file_path = self.file_path
        try:
            return read_env_lines(file_path)
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Failed to read {file_path}: {e}") from e

    def _write_lines(self, lines: list[str], trailing_newline: bool = False) -> None:
        file_path = self.file_path
        try:
            write_env_lines(file_path, lines, trailing_newline)
        except OSError as e:
            raise StoreError(f"Failed to write {file_path}: {e}") from e

    def update(self, key: str, value: str) -> bool:
        """Persist key=value, replacing any previous entry for key.

        An empty value is stored as an explicit ``KEY=`` line.

        Returns:
            True if key was already present
        """
        validate_env_entry(key, value)
        current = self.read_lines()
        lines, found = filter_key_lines(current, key)
        lines.append(format_env_line(key, value))
        self._write_lines(lines, has_trailing_newline(current))
        EnvManagerLogger.debug(f"Wrote {key}={value} to {self.file_path}")
        return found

    def remove(self, key: str) -> bool:
        """Drop the entry for key; the file is left untouched if there is none.

        Returns:
            True if an entry was removed
        """
        validate_env_entry(key)
        current = self.read_lines()
        lines, found = filter_key_lines(current, key)
        if not found:
            return False
        self._write_lines(lines, has_trailing_newline(current))
        EnvManagerLogger.debug(f"Removed {key} from {self.file_path}")
        return True

    def get(self, key: str) -> Optional[str]:
        """Return the persisted value for key, or None."""
        validate_env_entry(key)
        value = None
        for line in self.read_lines():
            if line_matches_key(line, key):
                value = line[len(key) + 1 :]
        return value

    def items(self) -> list[tuple[str, str]]:
        """Return every persisted (key, value) pair in file order."""
        return [entry for entry in map(split_env_line, self.read_lines()) if entry is not None]
