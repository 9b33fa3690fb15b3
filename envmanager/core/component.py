#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""The external environment loader component and its verification.

A component is usable only if it answers ``ver`` with a zero exit status
and at least one byte of output. Higher-level code talks to it through
``HelperComponent`` so tests can substitute an in-memory implementation
for the process-spawning one.
"""

import abc
import os
import sys
from collections.abc import MutableMapping
from typing import Callable

from envmanager.envmanager_constants import COMPONENT_CMD_RELOAD, COMPONENT_CMD_VERSION
from envmanager.envmanager_utils import check_output_input, run_process
from envmanager.utils.exceptions import ComponentCommandError, VerificationError
from envmanager.utils.logger_utils import EnvManagerLogger


class HelperComponent(abc.ABC):
    """Capability offered by an environment loader component."""

    def __init__(self, reference: str, environ: MutableMapping):
        self.reference = reference
        self.environ = environ

    @abc.abstractmethod
    def query_version(self) -> str:
        """Return whatever the component prints for its version query.

        Raises:
            ComponentCommandError: the query couldn't be run or exited non-zero
        """
        raise NotImplementedError

    @abc.abstractmethod
    def reload(self) -> None:
        """Re-apply the persisted configuration.

        Raises:
            ComponentCommandError: the reload couldn't be run or exited non-zero
        """
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}({self.reference!r})"


class ProcessComponent(HelperComponent):
    """A component executable run as a child process.

    The child gets a copy of the injected environment, and a bare reference
    is resolved against that environment's search path.
    """

    def query_version(self) -> str:
        command = [self.reference, COMPONENT_CMD_VERSION]
        try:
            retcode, cmdout, cmderr = check_output_input(command, env=dict(self.environ))
        except OSError as e:
            raise ComponentCommandError(self.reference, COMPONENT_CMD_VERSION, -1, [str(e)]) from e

        EnvManagerLogger.debug(f"{command} returned {retcode}: {cmdout!r}")
        if retcode != 0:
            raise ComponentCommandError(
                self.reference,
                COMPONENT_CMD_VERSION,
                retcode,
                cmderr.decode(sys.getdefaultencoding(), errors="replace").split("\n"),
            )
        return cmdout.decode(sys.getdefaultencoding(), errors="replace")

    def reload(self) -> None:
        retcode, output = run_process(
            [self.reference, COMPONENT_CMD_RELOAD],
            env=dict(self.environ),
            logger=EnvManagerLogger,
        )
        if retcode != 0:
            raise ComponentCommandError(self.reference, COMPONENT_CMD_RELOAD, retcode, output)


ComponentFactory = Callable[[str, MutableMapping], HelperComponent]


def verify_component(component: HelperComponent) -> str:
    """Return the component's version string, or raise VerificationError."""
    try:
        version = component.query_version()
    except ComponentCommandError as e:
        raise VerificationError(component.reference, str(e)) from e

    if len(version) == 0:
        raise VerificationError(component.reference, "no version information returned")

    EnvManagerLogger.debug(f"{component.reference} reports version {version.strip()}")
    return version


def verify_component_path(
    path: str,
    environ: MutableMapping,
    component_factory: ComponentFactory = ProcessComponent,
) -> HelperComponent:
    """Verify the component at a filesystem path and return it."""
    component = component_factory(os.path.abspath(path), environ)
    verify_component(component)
    return component


def verify_component_name(
    name: str,
    environ: MutableMapping,
    component_factory: ComponentFactory = ProcessComponent,
) -> HelperComponent:
    """Verify a component by bare name, resolved through the search path, and return it."""
    component = component_factory(os.path.basename(name), environ)
    verify_component(component)
    return component
