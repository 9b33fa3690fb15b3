#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""
Utility helpers shared by the core components:

1. The static operation logger
2. The exception hierarchy
3. Line-level handling of KEY=VALUE configuration files
"""

from .logger_utils import EnvManagerLogger

from .exceptions import (
    CheckError,
    ComponentCommandError,
    EnvManagerError,
    InvalidKeyError,
    LocatorError,
    RegistrarError,
    ReloadError,
    StoreError,
    VerificationError,
)

__all__ = [
    "EnvManagerLogger",
    "CheckError",
    "ComponentCommandError",
    "EnvManagerError",
    "InvalidKeyError",
    "LocatorError",
    "RegistrarError",
    "ReloadError",
    "StoreError",
    "VerificationError",
]
