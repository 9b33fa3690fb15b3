#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Find a usable environment loader component.

Candidates are tried in order, stopping at the first that verifies:

1. the bare component name, resolved through the search path
2. the copy bundled under the package's ``env_loader`` directory
3. the bundled copy again, after running the bundled update script once

A component found through tier 2 or 3 has its directory appended to the
search path and remembered under ``<component>Dir`` in both the
environment and the configuration file.
"""

import os
import shutil
from collections.abc import MutableMapping
from typing import Optional

from envmanager.core.component import (
    ComponentFactory,
    ProcessComponent,
    verify_component_name,
    verify_component_path,
)
from envmanager.core.config_store import ConfigStore
from envmanager.core.path_registrar import register_directory
from envmanager.core.settings import ManagerSettings
from envmanager.envmanager_utils import run_process
from envmanager.utils.exceptions import (
    LocatorError,
    RegistrarError,
    StoreError,
    VerificationError,
)
from envmanager.utils.logger_utils import EnvManagerLogger


class ComponentLocator:

    def __init__(
        self,
        environ: MutableMapping,
        store: ConfigStore,
        settings: Optional[ManagerSettings] = None,
        component_factory: ComponentFactory = ProcessComponent,
    ):
        self.environ = environ
        self.store = store
        self.settings = settings or ManagerSettings()
        self.component_factory = component_factory

    def locate(self) -> str:
        """Return the path of a verified component.

        Raises:
            LocatorError: no tier produced a usable component
        """
        path = self.locate_on_search_path()
        if path:
            return path

        path = self.locate_local()
        if path:
            return path

        EnvManagerLogger.info("No usable component found, attempting to download the latest version")
        if self.run_self_repair():
            path = self.locate_local()
            if path:
                return path

        raise LocatorError(f"{self.settings.component_name} component not found, auto-update failed")

    def locate_on_search_path(self) -> Optional[str]:
        name = self.settings.component_name
        try:
            verify_component_name(name, self.environ, self.component_factory)
        except VerificationError as e:
            EnvManagerLogger.debug(f"{name} not usable from {self.settings.search_path_key}: {e}")
            return None

        resolved = shutil.which(name, path=self.environ.get(self.settings.search_path_key))
        if not resolved:
            EnvManagerLogger.debug(f"{name} answers by name but its path could not be resolved")
            return None

        EnvManagerLogger.debug(f"Found {name} at {resolved}")
        return os.path.abspath(resolved)

    def locate_local(self) -> Optional[str]:
        candidate = self.settings.local_component_path
        if not os.path.isfile(candidate):
            EnvManagerLogger.debug(f"No bundled component at {candidate}")
            return None

        try:
            verify_component_path(candidate, self.environ, self.component_factory)
        except VerificationError as e:
            EnvManagerLogger.warning(f"Bundled component is not usable: {e}")
            return None

        try:
            self.adopt(candidate)
        except (RegistrarError, StoreError) as e:
            EnvManagerLogger.warning(f"Unable to register {candidate}: {e}")
            return None

        EnvManagerLogger.info(f"Using bundled component {candidate}")
        return candidate

    def adopt(self, component_path: str) -> None:
        """Put the component's directory on the search path and remember it."""
        component_dir = os.path.dirname(os.path.abspath(component_path))
        register_directory(component_dir, self.environ, self.settings.search_path_key)
        self.store.update(self.settings.component_dir_key, component_dir)
        self.environ[self.settings.component_dir_key] = component_dir

    def run_self_repair(self) -> bool:
        """Run the bundled update script.

        Its exit status is only logged; what matters is whether the bundled
        component verifies afterwards.

        Returns:
            True if the script exists and was run
        """
        script = self.settings.update_script_path
        if not os.path.isfile(script):
            EnvManagerLogger.warning(f"Update script {script} not found")
            return False

        retcode, _ = run_process(
            [self.settings.shell, script],
            env=dict(self.environ),
            logger=EnvManagerLogger,
        )
        if retcode != 0:
            EnvManagerLogger.warning(f"Update script {script} returned {retcode}")
        else:
            EnvManagerLogger.info(f"Update script {script} completed")
        return True
