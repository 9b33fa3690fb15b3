#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Keep a directory on the search path."""

import os
from collections.abc import MutableMapping

from envmanager.envmanager_constants import SEARCH_PATH_ENV_KEY
from envmanager.utils.exceptions import RegistrarError
from envmanager.utils.logger_utils import EnvManagerLogger


def register_directory(
    directory: str,
    environ: MutableMapping,
    path_key: str = SEARCH_PATH_ENV_KEY,
) -> bool:
    """Append directory to the search path unless it already occurs in it.

    The presence check is a plain substring test, so directory should be a
    normalized absolute path.

    Returns:
        True if the search path was changed
    """
    current_path = environ.get(path_key, "")
    if directory in current_path:
        EnvManagerLogger.debug(f"{directory} already in {path_key}")
        return False

    new_path = f"{current_path}{os.pathsep}{directory}" if current_path else directory
    try:
        environ[path_key] = new_path
    except (OSError, TypeError, ValueError) as e:
        raise RegistrarError(f"Failed to update {path_key}: {e}") from e

    EnvManagerLogger.info(f"Added {directory} to {path_key}")
    return True
