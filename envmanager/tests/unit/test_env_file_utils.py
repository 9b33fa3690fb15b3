import os
import tempfile
import unittest

from envmanager.utils.env_file_utils import (
    filter_key_lines,
    format_env_line,
    has_trailing_newline,
    line_matches_key,
    read_env_lines,
    split_env_line,
    validate_env_entry,
    write_env_lines,
)
from envmanager.utils.exceptions import InvalidKeyError, StoreError


class TestEnvFileUtils(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.temp_dir.name, ".env")

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_prefix_match_requires_equals(self):
        self.assertTrue(line_matches_key("FOO=1", "FOO"))
        self.assertFalse(line_matches_key("FOOBAR=1", "FOO"))
        self.assertFalse(line_matches_key(" FOO=1", "FOO"))
        self.assertFalse(line_matches_key("FOO", "FOO"))

    def test_filter_drops_key_and_blank_lines(self):
        lines = ["A=1", "", "FOO=old", "FOOBAR=2", "", "B=3"]
        kept, found = filter_key_lines(lines, "FOO")
        self.assertTrue(found)
        self.assertEqual(["A=1", "FOOBAR=2", "B=3"], kept)

    def test_filter_reports_missing_key(self):
        kept, found = filter_key_lines(["A=1", "B=2"], "C")
        self.assertFalse(found)
        self.assertEqual(["A=1", "B=2"], kept)

    def test_filter_removes_duplicates(self):
        kept, found = filter_key_lines(["A=1", "A=2", "B=3", "A=4"], "A")
        self.assertTrue(found)
        self.assertEqual(["B=3"], kept)

    def test_format_and_split(self):
        self.assertEqual("KEY=value", format_env_line("KEY", "value"))
        self.assertEqual("KEY=", format_env_line("KEY", ""))
        self.assertEqual(("KEY", "a=b"), split_env_line("KEY=a=b"))
        self.assertEqual(("KEY", ""), split_env_line("KEY="))
        self.assertIsNone(split_env_line("no separator"))
        self.assertIsNone(split_env_line("=value"))

    def test_validate_entry(self):
        validate_env_entry("KEY", "value with spaces")
        validate_env_entry("KEY", "")
        for key in ("", "A=B", "A\nB", "A\x00"):
            with self.assertRaises(InvalidKeyError):
                validate_env_entry(key, "value")
        with self.assertRaises(InvalidKeyError):
            validate_env_entry("KEY", "two\nlines")

    def test_invalid_key_is_a_store_error(self):
        with self.assertRaises(StoreError):
            validate_env_entry("A=B")

    def test_write_then_read(self):
        write_env_lines(self.path, ["A=1", "B=2"])
        with open(self.path) as f:
            self.assertEqual("A=1\nB=2", f.read())
        lines = read_env_lines(self.path)
        self.assertEqual(["A=1", "B=2"], lines)
        self.assertFalse(has_trailing_newline(lines))

    def test_write_with_trailing_newline(self):
        write_env_lines(self.path, ["A=1", "B=2"], trailing_newline=True)
        with open(self.path) as f:
            self.assertEqual("A=1\nB=2\n", f.read())
        lines = read_env_lines(self.path)
        self.assertEqual(["A=1", "B=2", ""], lines)
        self.assertTrue(has_trailing_newline(lines))

    def test_trailing_newline_detection(self):
        self.assertFalse(has_trailing_newline([""]))
        self.assertFalse(has_trailing_newline(["A=1"]))
        self.assertTrue(has_trailing_newline(["A=1", ""]))

    def test_write_empty(self):
        write_env_lines(self.path, [])
        self.assertEqual(0, os.path.getsize(self.path))

    def test_write_preserves_mode_and_leaves_no_temp_files(self):
        with open(self.path, "w") as f:
            f.write("A=1\n")
        os.chmod(self.path, 0o600)
        write_env_lines(self.path, ["A=2"])
        self.assertEqual(0o600, os.stat(self.path).st_mode & 0o777)
        self.assertEqual([".env"], os.listdir(self.temp_dir.name))

    def test_failed_write_keeps_old_content(self):
        with open(self.path, "w") as f:
            f.write("A=1\n")
        with self.assertRaises(OSError):
            write_env_lines(os.path.join(self.temp_dir.name, "missing", ".env"), ["A=2"])
        with open(self.path) as f:
            self.assertEqual("A=1\n", f.read())


if __name__ == "__main__":
    unittest.main()
