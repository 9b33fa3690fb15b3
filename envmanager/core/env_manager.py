#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Public operations of the environment manager.

Every mutating operation persists to the configuration file, applies the
change to the live environment, reloads through the environment loader
component, and finally reads the variable back to confirm the change.
"""

import contextlib
import os
from collections.abc import MutableMapping
from typing import Optional

from envmanager.core.component import ComponentFactory, ProcessComponent
from envmanager.core.config_store import ConfigStore
from envmanager.core.locator import ComponentLocator
from envmanager.core.reload_orchestrator import ReloadOrchestrator
from envmanager.core.settings import ManagerSettings
from envmanager.envmanager_constants import OperationResult
from envmanager.utils.exceptions import (
    CheckError,
    EnvManagerError,
    InvalidKeyError,
    ReloadError,
    StoreError,
)
from envmanager.utils.logger_utils import EnvManagerLogger


@contextlib.contextmanager
def _logged_operation(label: str):
    EnvManagerLogger.start(label)
    try:
        yield
    except EnvManagerError as e:
        EnvManagerLogger.end(label, OperationResult.FAILURE, str(e))
        raise


class EnvManager:
    """Set, delete and reload environment variables backed by a .env file.

    Args:
        environ: the live environment to manage (os.environ by default)
        settings: names and locations; read from environ when omitted
        component_factory: builds a HelperComponent for a path or bare name
    """

    def __init__(
        self,
        environ: Optional[MutableMapping] = None,
        settings: Optional[ManagerSettings] = None,
        component_factory: ComponentFactory = ProcessComponent,
    ):
        self.environ = os.environ if environ is None else environ
        self.settings = settings or ManagerSettings.from_environment(self.environ)
        self.store = ConfigStore(self.environ, self.settings)
        self.locator = ComponentLocator(self.environ, self.store, self.settings, component_factory)
        self.orchestrator = ReloadOrchestrator(self.environ, self.locator, self.settings, component_factory)

    def verify_installation(self) -> None:
        """Confirm the whole write/reload/read-back path works.

        Raises:
            CheckError
        """
        self.self_check()

    def set_variable(self, key: str, value: str) -> None:
        """Persist key=value and make it live.

        An empty value is stored as ``KEY=``; use delete_variable to remove a key.
        The self-verification key is reserved.

        Raises:
            StoreError
        """
        self._reject_reserved_key(key)
        self._set_variable(key, value)

    def _set_variable(self, key: str, value: str) -> None:
        with _logged_operation(f"set {key}"):
            existed = self.store.update(key, value)
            self.environ[key] = value
            self._reload_after_write(key)

            if (observed := self.environ.get(key)) != value:
                raise StoreError(f"Failed to update {key}: expected '{value}', found '{observed}'")

            EnvManagerLogger.end(
                f"set {key}",
                OperationResult.SUCCESS,
                f"{'Updated' if existed else 'Added'} {key}={value}",
            )

    def delete_variable(self, key: str) -> bool:
        """Remove key from the configuration file and the live environment.

        Runs self-verification first. A key that isn't persisted is a no-op.
        The self-verification key is reserved.

        Returns:
            True if the key was removed

        Raises:
            StoreError
        """
        self._reject_reserved_key(key)
        with _logged_operation(f"delete {key}"):
            try:
                self.self_check()
            except CheckError as e:
                raise StoreError(f"Environment loader verification failed: {e}") from e

            removed = self._remove_variable(key)
            if removed:
                EnvManagerLogger.end(f"delete {key}", OperationResult.SUCCESS, f"Deleted {key}")
            else:
                EnvManagerLogger.end(f"delete {key}", OperationResult.SKIPPED, f"{key} not found")
            return removed

    def reload(self) -> None:
        """Raises ReloadError."""
        self.orchestrator.reload()

    def self_check(self) -> None:
        """Write, read back, and remove a sentinel variable.

        Raises:
            CheckError
        """
        key = self.settings.self_check_key
        value = self.settings.self_check_value
        with _logged_operation("self check"):
            try:
                self._set_variable(key, value)
            except EnvManagerError as e:
                raise CheckError(f"Failed to write test variable {key}: {e}") from e

            if (observed := self.environ.get(key)) != value:
                raise CheckError(f"Verification failed: expected '{value}', found '{observed}'")

            try:
                self._remove_variable(key)
            except EnvManagerError as e:
                raise CheckError(f"Failed to clean up test variable {key}: {e}") from e

            EnvManagerLogger.end("self check", OperationResult.SUCCESS)

    def get_variable(self, key: str) -> Optional[str]:
        """Return the persisted value of key, or None."""
        return self.store.get(key)

    def list_variables(self) -> list[tuple[str, str]]:
        """Return every persisted (key, value) pair in file order."""
        return self.store.items()

    def _reject_reserved_key(self, key: str) -> None:
        if key == self.settings.self_check_key:
            raise InvalidKeyError(key, "key is reserved for self-verification")

    def _remove_variable(self, key: str) -> bool:
        if not self.store.remove(key):
            EnvManagerLogger.warning(f"Environment variable to delete not found: {key}")
            return False

        self.environ.pop(key, None)
        self._reload_after_write(key)

        if key in self.environ:
            raise StoreError(f"Failed to delete {key}: still present with value '{self.environ[key]}'")
        return True

    def _reload_after_write(self, key: str) -> None:
        try:
            self.orchestrator.reload()
        except ReloadError as e:
            raise StoreError(f"Failed to reload environment after writing {key}: {e}") from e


###################################################################################################
# operations on the process environment with settings taken from it


def verify_installation() -> None:
    EnvManager().verify_installation()


def set_variable(key: str, value: str) -> None:
    EnvManager().set_variable(key, value)


def delete_variable(key: str) -> bool:
    return EnvManager().delete_variable(key)


def reload() -> None:
    EnvManager().reload()
