#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Tunable names and locations used by the environment manager."""

import dataclasses
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

from envmanager.envmanager_constants import (
    BASE_DIR_ENV_KEY,
    COMPONENT_DIR_KEY_SUFFIX,
    COMPONENT_LOCAL_SUBDIR,
    COMPONENT_NAME,
    COMPONENT_UPDATE_SCRIPT,
    CONFIG_FILE_NAME,
    ENV_OVERRIDE_BASE_DIR_KEY,
    ENV_OVERRIDE_COMPONENT_NAME,
    ENV_OVERRIDE_INSTALL_DIR,
    ENV_OVERRIDE_SHELL,
    ENV_OVERRIDE_SHELL_STARTUP_FILE,
    SEARCH_PATH_ENV_KEY,
    SELF_CHECK_KEY,
    SELF_CHECK_VALUE,
    SHELL_BIN,
    SHELL_STARTUP_FILE,
)


def default_install_dir() -> str:
    """Directory of the installed envmanager package."""
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


@dataclass(frozen=True)
class ManagerSettings:
    component_name: str = COMPONENT_NAME
    install_dir: str = field(default_factory=default_install_dir)
    base_dir_key: str = BASE_DIR_ENV_KEY
    config_file_name: str = CONFIG_FILE_NAME
    search_path_key: str = SEARCH_PATH_ENV_KEY
    shell: str = SHELL_BIN
    shell_startup_file: str = SHELL_STARTUP_FILE
    self_check_key: str = SELF_CHECK_KEY
    self_check_value: str = SELF_CHECK_VALUE

    @property
    def component_dir_key(self) -> str:
        """Variable that remembers the directory the component was found in."""
        return f"{self.component_name}{COMPONENT_DIR_KEY_SUFFIX}"

    @property
    def local_component_path(self) -> str:
        return os.path.join(self.install_dir, COMPONENT_LOCAL_SUBDIR, self.component_name)

    @property
    def update_script_path(self) -> str:
        return os.path.join(self.install_dir, COMPONENT_LOCAL_SUBDIR, COMPONENT_UPDATE_SCRIPT)

    def replace(self, **changes) -> "ManagerSettings":
        """Return a copy with the given fields changed; None values are ignored."""
        return dataclasses.replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> "ManagerSettings":
        """Build settings from defaults plus ENVMANAGER_* overrides found in environ."""
        environ = os.environ if environ is None else environ
        return cls().replace(
            component_name=environ.get(ENV_OVERRIDE_COMPONENT_NAME) or None,
            install_dir=environ.get(ENV_OVERRIDE_INSTALL_DIR) or None,
            base_dir_key=environ.get(ENV_OVERRIDE_BASE_DIR_KEY) or None,
            shell=environ.get(ENV_OVERRIDE_SHELL) or None,
            shell_startup_file=environ.get(ENV_OVERRIDE_SHELL_STARTUP_FILE) or None,
        )
