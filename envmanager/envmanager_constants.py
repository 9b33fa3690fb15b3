#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

from enum import Enum, auto


###################################################################################################
# the external environment loader component and its command-line contract
COMPONENT_NAME = "aspnmy_envloader"
COMPONENT_DIR_KEY_SUFFIX = "Dir"
COMPONENT_LOCAL_SUBDIR = "env_loader"
COMPONENT_UPDATE_SCRIPT = "update.sh"
COMPONENT_CMD_VERSION = "ver"
COMPONENT_CMD_RELOAD = "reload"

###################################################################################################
# environment variables consumed and produced
BASE_DIR_ENV_KEY = "ollama_scannerBaseDir"
SEARCH_PATH_ENV_KEY = "PATH"
CONFIG_FILE_NAME = ".env"
CONFIG_FILE_MODE = 0o644

###################################################################################################
# shell used for self-repair and for re-sourcing the user's startup file
SHELL_BIN = "bash"
SHELL_STARTUP_FILE = "~/.bashrc"

###################################################################################################
# sentinel written and removed during self-verification
SELF_CHECK_KEY = "testenv"
SELF_CHECK_VALUE = "test_value_123"

###################################################################################################
# overrides for ManagerSettings read from the environment
ENV_OVERRIDE_COMPONENT_NAME = "ENVMANAGER_COMPONENT_NAME"
ENV_OVERRIDE_INSTALL_DIR = "ENVMANAGER_INSTALL_DIR"
ENV_OVERRIDE_BASE_DIR_KEY = "ENVMANAGER_BASE_DIR_KEY"
ENV_OVERRIDE_SHELL = "ENVMANAGER_SHELL"
ENV_OVERRIDE_SHELL_STARTUP_FILE = "ENVMANAGER_SHELL_STARTUP_FILE"
ENV_VERBOSITY = "ENVMANAGER_VERBOSITY"

###################################################################################################
# variable used by the demonstration flow
DEMO_KEY = "TEST_VAR"
DEMO_VALUE = "test_value"


# Used for getting status from discrete operations and subsequently logging
class OperationResult(Enum):
    """Return status for an environment manager operation."""

    SUCCESS = auto()
    FAILURE = auto()
    SKIPPED = auto()
