#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Bring persisted configuration into effect."""

import os
import shlex
from collections.abc import MutableMapping
from typing import Optional

from envmanager.core.component import (
    ComponentFactory,
    HelperComponent,
    ProcessComponent,
    verify_component_name,
    verify_component_path,
)
from envmanager.core.locator import ComponentLocator
from envmanager.core.settings import ManagerSettings
from envmanager.envmanager_constants import OperationResult
from envmanager.envmanager_utils import run_process
from envmanager.utils.exceptions import (
    ComponentCommandError,
    LocatorError,
    ReloadError,
    VerificationError,
)
from envmanager.utils.logger_utils import EnvManagerLogger


class ReloadOrchestrator:
    """Runs the component's reload, then re-sources the user's shell startup file.

    Re-sourcing happens in a child shell, which can't change this process's
    environment; callers that need the live values must apply them
    themselves.
    """

    def __init__(
        self,
        environ: MutableMapping,
        locator: ComponentLocator,
        settings: Optional[ManagerSettings] = None,
        component_factory: ComponentFactory = ProcessComponent,
    ):
        self.environ = environ
        self.locator = locator
        self.settings = settings or ManagerSettings()
        self.component_factory = component_factory

    def reload(self) -> None:
        EnvManagerLogger.start("reload")
        try:
            component = self._reload()
        except ReloadError as e:
            EnvManagerLogger.end("reload", OperationResult.FAILURE, str(e))
            raise
        EnvManagerLogger.end("reload", OperationResult.SUCCESS, f"via {component.reference}")

    def _reload(self) -> HelperComponent:
        try:
            component_path = self.locator.locate()
        except LocatorError as e:
            raise ReloadError(f"Failed to locate {self.settings.component_name}: {e}") from e

        component = self.select_component(component_path)
        try:
            component.reload()
        except ComponentCommandError as e:
            raise ReloadError(f"Failed to reload environment: {e}") from e

        self.resource_startup_file()
        return component

    def select_component(self, component_path: str) -> HelperComponent:
        """Prefer the located path, falling back to the bare name."""
        try:
            return verify_component_path(component_path, self.environ, self.component_factory)
        except VerificationError as path_error:
            EnvManagerLogger.debug(f"{path_error}, trying {self.settings.component_name} by name")
            try:
                return verify_component_name(self.settings.component_name, self.environ, self.component_factory)
            except VerificationError as name_error:
                raise ReloadError(
                    f"Component verification failed by path ({path_error}) and by name ({name_error})"
                ) from name_error

    def resource_startup_file(self) -> None:
        startup_file = os.path.expanduser(self.settings.shell_startup_file)
        if not os.path.isfile(startup_file):
            EnvManagerLogger.warning(f"{startup_file} does not exist, not re-sourcing it")
            return

        retcode, output = run_process(
            [self.settings.shell, "-c", f". {shlex.quote(startup_file)}"],
            env=dict(self.environ),
            logger=EnvManagerLogger,
        )
        if retcode != 0:
            detail = "; ".join(line for line in output if line)
            raise ReloadError(
                f"Failed to source {startup_file} (returned {retcode}){': ' + detail if detail else ''}"
            )
