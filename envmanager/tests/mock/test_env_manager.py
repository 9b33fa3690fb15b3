#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""End-to-end scenarios for the public operations, driven through mock loader scripts."""

import os
import unittest
from unittest.mock import patch

import envmanager
from envmanager.core.env_manager import EnvManager
from envmanager.envmanager_constants import (
    BASE_DIR_ENV_KEY,
    ENV_OVERRIDE_INSTALL_DIR,
    ENV_OVERRIDE_SHELL,
    ENV_OVERRIDE_SHELL_STARTUP_FILE,
    SELF_CHECK_KEY,
)
from envmanager.utils.exceptions import (
    CheckError,
    InvalidKeyError,
    ReloadError,
    StoreError,
)
from envmanager.tests.mock.test_framework import (
    BaseEnvManagerTest,
    FAILING_RELOAD_SCRIPT,
    FakeComponentFactory,
    SHELL,
)


class TestEnvManager(BaseEnvManagerTest):

    def _manager(self, component_factory=None):
        if component_factory is None:
            return EnvManager(self.environ, self.settings)
        return EnvManager(self.environ, self.settings, component_factory)

    def test_set_variable_end_to_end(self):
        # empty .env, PATH=/usr/bin, healthy loader bundled at the local path
        self.environ["PATH"] = "/usr/bin"
        component_dir = os.path.dirname(self.install_local_component())

        self._manager().set_variable("NEW_VAR", "x")

        self.assertIn("NEW_VAR=x", self.read_env_file().splitlines())
        self.assertEqual(1, self.environ["PATH"].split(os.pathsep).count(component_dir))
        self.assertEqual("x", self.environ["NEW_VAR"])

    def test_second_set_finds_component_by_name(self):
        self.environ["PATH"] = "/usr/bin"
        component_dir = os.path.dirname(self.install_local_component())
        manager = self._manager()
        manager.set_variable("FIRST", "1")
        manager.set_variable("SECOND", "2")
        self.assertEqual(1, self.environ["PATH"].split(os.pathsep).count(component_dir))
        self.assertEqual(1, self.read_env_file().count(self.settings.component_dir_key))

    def test_update_existing_variable(self):
        self.install_path_component()
        self.write_env_file("A=1\nB=2\n")
        self.environ["A"] = "1"
        self._manager().set_variable("A", "3")
        self.assertEqual("B=2\nA=3\n", self.read_env_file())
        self.assertEqual("3", self.environ["A"])

    def test_set_empty_value_keeps_key(self):
        self.install_path_component()
        self.write_env_file("A=1\n")
        self._manager().set_variable("A", "")
        self.assertEqual("A=\n", self.read_env_file())
        self.assertEqual("", self.environ["A"])

    def test_delete_variable(self):
        self.install_path_component()
        self.write_env_file("A=1\nB=2\n")
        self.environ["A"] = "1"
        self.assertTrue(self._manager().delete_variable("A"))
        self.assertEqual("B=2\n", self.read_env_file())
        self.assertNotIn("A", self.environ)

    def test_delete_missing_variable_is_noop(self):
        self.install_path_component()
        self.write_env_file("A=1\nB=2\n")
        before = self.read_env_bytes()
        self.assertFalse(self._manager().delete_variable("C"))
        self.assertEqual(before, self.read_env_bytes())

    def test_delete_missing_variable_keeps_file_without_final_newline(self):
        self.install_path_component()
        self.write_env_file("A=1\nB=2")
        before = self.read_env_bytes()
        self.assertFalse(self._manager().delete_variable("C"))
        self.assertEqual(b"A=1\nB=2", self.read_env_bytes())
        self.assertEqual(before, self.read_env_bytes())

    def test_sentinel_key_is_reserved(self):
        self.install_path_component()
        self.write_env_file(f"{SELF_CHECK_KEY}=mine\nA=1\n")
        manager = self._manager()
        with self.assertRaises(InvalidKeyError):
            manager.delete_variable(SELF_CHECK_KEY)
        with self.assertRaises(InvalidKeyError):
            manager.set_variable(SELF_CHECK_KEY, "other")
        self.assertEqual(f"{SELF_CHECK_KEY}=mine\nA=1\n", self.read_env_file())

    def test_self_check_leaves_no_sentinel(self):
        self.install_path_component()
        self.write_env_file("A=1\n")
        self._manager().verify_installation()
        self.assertEqual("A=1\n", self.read_env_file())
        self.assertNotIn(SELF_CHECK_KEY, self.environ)

    def test_self_check_without_component(self):
        with self.assertRaises(CheckError):
            self._manager().verify_installation()

    def test_delete_requires_working_loader(self):
        self.write_env_file("A=1\n")
        with self.assertRaises(StoreError) as ctx:
            self._manager().delete_variable("A")
        self.assertIsInstance(ctx.exception.__cause__, CheckError)
        self.assertIn("A=1", self.read_env_file().splitlines())

    def test_reload_failure_fails_set(self):
        self.install_local_component(FAILING_RELOAD_SCRIPT)
        with self.assertRaises(StoreError) as ctx:
            self._manager().set_variable("A", "1")
        self.assertIsInstance(ctx.exception.__cause__, ReloadError)
        # the write itself is not rolled back
        self.assertIn("A=1", self.read_env_file().splitlines())

    def test_read_back_mismatch(self):
        local = self.install_local_component()

        def clobber(component):
            component.environ["NEW_VAR"] = "something else"

        factory = FakeComponentFactory(versions={local: "1.0.0"}, on_reload=clobber)
        with self.assertRaises(StoreError) as ctx:
            self._manager(factory).set_variable("NEW_VAR", "x")
        self.assertIn("expected 'x'", str(ctx.exception))

    def test_delete_read_back_mismatch(self):
        local = self.install_local_component()
        self.write_env_file("A=1\n")

        def restore_a(component):
            component.environ["A"] = "1"

        factory = FakeComponentFactory(versions={local: "1.0.0"}, on_reload=restore_a)
        with self.assertRaises(StoreError) as ctx:
            self._manager(factory).delete_variable("A")
        self.assertIn("still present", str(ctx.exception))

    def test_invalid_key(self):
        self.install_path_component()
        with self.assertRaises(InvalidKeyError):
            self._manager().set_variable("BAD=KEY", "1")
        self.assertEqual("", self.read_env_file())
        self.assertNotIn("BAD=KEY", self.environ)

    def test_get_and_list(self):
        self.write_env_file("A=1\nB=2\n")
        manager = self._manager()
        self.assertEqual("2", manager.get_variable("B"))
        self.assertIsNone(manager.get_variable("C"))
        self.assertEqual([("A", "1"), ("B", "2")], manager.list_variables())

    def test_reload(self):
        local = self.install_local_component()
        factory = FakeComponentFactory(versions={local: "1.0.0"})
        self._manager(factory).reload()
        self.assertEqual([local], factory.reload_calls)

    def test_module_functions_use_process_environment(self):
        self.install_local_component()
        overrides = {
            BASE_DIR_ENV_KEY: self.base_dir,
            ENV_OVERRIDE_INSTALL_DIR: self.install_dir,
            ENV_OVERRIDE_SHELL: SHELL,
            ENV_OVERRIDE_SHELL_STARTUP_FILE: self.settings.shell_startup_file,
        }
        with patch.dict(os.environ, overrides):
            envmanager.set_variable("ENVMANAGER_TEST_VAR", "value")
            self.assertEqual("value", os.environ["ENVMANAGER_TEST_VAR"])
            self.assertTrue(envmanager.delete_variable("ENVMANAGER_TEST_VAR"))
            self.assertNotIn("ENVMANAGER_TEST_VAR", os.environ)
            envmanager.reload()
            envmanager.verify_installation()
        self.assertNotIn("ENVMANAGER_TEST_VAR", self.read_env_file())


if __name__ == "__main__":
    unittest.main()
