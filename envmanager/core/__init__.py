#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Core components of the environment manager.

Leaves first: component verification, search path registration, the
configuration store, the component locator, the reload orchestrator, and
the EnvManager facade tying them together.
"""

from .settings import ManagerSettings
from .component import (
    HelperComponent,
    ProcessComponent,
    verify_component,
    verify_component_name,
    verify_component_path,
)
from .path_registrar import register_directory
from .config_store import ConfigStore
from .locator import ComponentLocator
from .reload_orchestrator import ReloadOrchestrator
from .env_manager import EnvManager

__all__ = [
    "ManagerSettings",
    "HelperComponent",
    "ProcessComponent",
    "verify_component",
    "verify_component_name",
    "verify_component_path",
    "register_directory",
    "ConfigStore",
    "ComponentLocator",
    "ReloadOrchestrator",
    "EnvManager",
]
