#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Manage environment variables persisted in a .env file and applied by an external loader."""

from envmanager.core.env_manager import (
    EnvManager,
    delete_variable,
    reload,
    set_variable,
    verify_installation,
)
from envmanager.core.settings import ManagerSettings
from envmanager.utils.exceptions import (
    CheckError,
    EnvManagerError,
    LocatorError,
    RegistrarError,
    ReloadError,
    StoreError,
    VerificationError,
)

__version__ = "1.0.0"

__all__ = [
    "EnvManager",
    "ManagerSettings",
    "verify_installation",
    "set_variable",
    "delete_variable",
    "reload",
    "CheckError",
    "EnvManagerError",
    "LocatorError",
    "RegistrarError",
    "ReloadError",
    "StoreError",
    "VerificationError",
]
