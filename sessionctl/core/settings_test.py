"""
Tests for the configuration store.
"""

import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from sessionctl.core import settings as S


class TestConvert(unittest.TestCase):
    def test_strbool(self):
        self.assertTrue(S._strbool("yes"))
        self.assertTrue(S._strbool("True"))
        self.assertTrue(S._strbool("1"))
        self.assertFalse(S._strbool("no"))
        self.assertFalse(S._strbool("false"))
        self.assertFalse(S._strbool(False))
        self.assertTrue(S._strbool("garbage", True))

    def test_convert(self):
        self.assertEqual(S._convert(None, True), True)
        self.assertEqual(S._convert("False", True), False)
        self.assertEqual(S._convert(False, True), False)
        self.assertEqual(S._convert("abc", ""), "abc")
        self.assertEqual(S._convert(None, None), None)


class TestSettingsController(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "sessionctl.cfg")
        self.setctl = S.SettingsController(S.ConfigparserAdapter(self.path))
        self.changes = []
        self.setctl.connect("value-changed", self._on_changed)

    def tearDown(self):
        self.tmpdir.cleanup()

    def _on_changed(self, _setctl, key, value):
        self.changes.append((key, value))

    def _reload(self):
        return S.SettingsController(S.ConfigparserAdapter(self.path))

    def test_defaults(self):
        self.assertEqual(self.setctl.get("lock_enabled", True), True)
        self.assertEqual(self.setctl.get("title_lock", ""), "")
        self.assertIsNone(self.setctl.get("title_lock"))
        self.assertFalse(os.path.exists(self.path))

    def test_set_persists(self):
        self.setctl.set("lock_enabled", False)
        self.setctl.set("command_lock", "slock && echo 'locked'")

        setctl = self._reload()
        self.assertIs(setctl.get("lock_enabled", True), False)
        self.assertEqual(
            setctl.get("command_lock", ""), "slock && echo 'locked'"
        )

    def test_remove(self):
        self.setctl.set("title_lock", "Bye")
        self.setctl.remove("title_lock")
        self.assertNotIn("title_lock", self.setctl)
        self.assertNotIn("title_lock", self._reload())

    def test_signals(self):
        self.setctl.set("title_lock", "Bye")
        self.setctl.set("title_lock", "Bye")
        self.setctl.remove("title_lock")
        self.setctl.remove("title_lock")
        self.assertEqual(
            self.changes, [("title_lock", "Bye"), ("title_lock", None)]
        )

    def test_set_none_removes(self):
        self.setctl.set("title_lock", "Bye")
        self.setctl.set("title_lock", None)
        self.assertNotIn("title_lock", self.setctl)

    def test_load_garbage(self):
        with open(self.path, "w", encoding="UTF-8") as out:
            out.write("this is not [an ini file\n")

        setctl = self._reload()
        self.assertEqual(setctl.get("lock_enabled", True), True)

    def test_load_other_section(self):
        with open(self.path, "w", encoding="UTF-8") as out:
            out.write("[Other]\nlock_enabled = no\n")

        self.assertNotIn("lock_enabled", self._reload())


class TestSaveFailure(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.err = io.StringIO()
        self.out = io.StringIO()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _set(self, adapter):
        setctl = S.SettingsController(adapter)
        with redirect_stderr(self.err), redirect_stdout(self.out):
            setctl.set("title_lock", "Bye")

        return setctl

    def test_no_config_dir_keeps_value(self):
        with mock.patch.object(
            S.config, "get_config_file", return_value=None
        ), mock.patch.object(S.config, "save_config_file", return_value=None):
            setctl = self._set(S.ConfigparserAdapter())

        self.assertEqual(setctl.get("title_lock", ""), "Bye")
        self.assertIn("Unable to save settings", self.out.getvalue())

    def test_unwritable_dir_keeps_value(self):
        path = os.path.join(self.tmpdir.name, "missing", "sessionctl.cfg")
        setctl = self._set(S.ConfigparserAdapter(path))

        self.assertEqual(setctl.get("title_lock", ""), "Bye")
        self.assertFalse(os.path.exists(path))
        self.assertIn("Error saving configuration", self.err.getvalue())

    def test_failed_rename_removes_temp_file(self):
        path = os.path.join(self.tmpdir.name, "sessionctl.cfg")
        with mock.patch.object(
            S.os, "rename", side_effect=OSError("read-only file system")
        ):
            setctl = self._set(S.ConfigparserAdapter(path))

        self.assertEqual(setctl.get("title_lock", ""), "Bye")
        self.assertEqual(os.listdir(self.tmpdir.name), [])
