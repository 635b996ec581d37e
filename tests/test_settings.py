import os
import unittest
from contextlib import contextmanager

from bars.settings import load_settings


@contextmanager
def temp_environ(update: dict[str, str | None]):
    old = dict(os.environ)
    try:
        for k, v in update.items():
            if v is None:
                os.environ.pop(k, None)
            else:
                os.environ[k] = v
        yield
    finally:
        os.environ.clear()
        os.environ.update(old)


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        with temp_environ(
            {
                "BARS_LOG_LEVEL": None,
                "LOG_LEVEL": None,
                "BARS_LOG_JSON": None,
                "BARS_LOG_PATH": None,
                "BARS_MAX_INPUT_MB": None,
            }
        ):
            s = load_settings()
            self.assertEqual(s.log_level, "INFO")
            self.assertFalse(s.log_json)
            self.assertIsNone(s.log_path)
            self.assertEqual(s.max_input_bytes, 1024 * 1024)

    def test_legacy_log_level_still_works(self) -> None:
        with temp_environ({"BARS_LOG_LEVEL": None, "LOG_LEVEL": "debug"}):
            self.assertEqual(load_settings().log_level, "DEBUG")

    def test_empty_string_is_unset(self) -> None:
        with temp_environ({"BARS_LOG_LEVEL": "  ", "LOG_LEVEL": None, "BARS_LOG_PATH": ""}):
            s = load_settings()
            self.assertEqual(s.log_level, "INFO")
            self.assertIsNone(s.log_path)

    def test_bad_numbers_fall_back(self) -> None:
        with temp_environ({"BARS_MAX_INPUT_MB": "0", "BARS_LOG_ROTATION_MB": "abc"}):
            s = load_settings()
            self.assertEqual(s.max_input_bytes, 1024 * 1024)
            self.assertEqual(s.log_rotation_mb, 10)

    def test_bool_parsing(self) -> None:
        with temp_environ({"BARS_LOG_JSON": "yes", "BARS_MAX_INPUT_MB": "5"}):
            s = load_settings()
            self.assertTrue(s.log_json)
            self.assertEqual(s.max_input_bytes, 5 * 1024 * 1024)
