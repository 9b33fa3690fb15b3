#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Custom exceptions for the environment manager."""

from typing import Optional


class EnvManagerError(Exception):
    """Base class for environment manager errors."""

    pass


class VerificationError(EnvManagerError):
    """Raised when a component does not answer a version query with output."""

    def __init__(self, reference: str, message: str):
        super().__init__(f"Component verification failed for '{reference}': {message}")
        self.reference = reference


class ComponentCommandError(EnvManagerError):
    """Raised when a component subcommand can't be run or exits non-zero."""

    def __init__(
        self,
        reference: str,
        command: str,
        returncode: int,
        output: Optional[list[str]] = None,
    ):
        detail = "; ".join(line for line in (output or []) if line)
        message = f"'{reference} {command}' returned {returncode}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.reference = reference
        self.command = command
        self.returncode = returncode
        self.output = output or []


class LocatorError(EnvManagerError):
    """Raised when no usable component is found after every fallback."""

    pass


class RegistrarError(EnvManagerError):
    """Raised when the search path can't be updated."""

    pass


class StoreError(EnvManagerError):
    """Raised for configuration file errors and failed read-back checks."""

    pass


class InvalidKeyError(StoreError):
    """Raised when a key or value can't be represented as a KEY=VALUE line."""

    def __init__(self, key: str, message: str):
        super().__init__(f"Invalid entry for '{key}': {message}")
        self.key = key


class ReloadError(EnvManagerError):
    """Raised when the reload sequence fails at any step."""

    pass


class CheckError(EnvManagerError):
    """Raised when the self-verification sentinel doesn't round-trip."""

    pass
