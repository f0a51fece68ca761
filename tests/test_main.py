import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr
from unittest import mock

import twinpane.__main__ as main_mod
from twinpane.core.errors import DirectoryError, DirectoryErrorKind


class MainTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.missing_config = os.path.join(self.tmp.name, "none.toml")

    def test_parser_accepts_path_and_config(self):
        args = main_mod.build_parser().parse_args(["/srv", "--config", "cfg.toml"])
        self.assertEqual(args.path, "/srv")
        self.assertEqual(args.config, "cfg.toml")

        args = main_mod.build_parser().parse_args([])
        self.assertIsNone(args.path)

    def test_run_returns_zero_after_clean_exit(self):
        with mock.patch.object(main_mod.curses, "wrapper") as wrapper:
            code = main_mod.run([self.tmp.name, "--config", self.missing_config])

        self.assertEqual(code, 0)
        wrapper.assert_called_once()

    def test_wrapped_main_starts_app_in_resolved_directory(self):
        def fake_wrapper(func):
            func("screen")

        with (
            mock.patch.object(main_mod.curses, "wrapper", side_effect=fake_wrapper),
            mock.patch.object(main_mod, "TwinpaneApp") as app_cls,
        ):
            main_mod.run([self.tmp.name, "--config", self.missing_config])

        app_cls.assert_called_once()
        stdscr, _config, start_path = app_cls.call_args.args
        self.assertEqual(stdscr, "screen")
        self.assertEqual(start_path, os.path.realpath(self.tmp.name))
        app_cls.return_value.run.assert_called_once_with()

    def test_unreadable_start_directory_exits_with_one(self):
        error = DirectoryError(DirectoryErrorKind.NOT_FOUND, "/nope")
        stderr = io.StringIO()

        with mock.patch.object(main_mod.curses, "wrapper", side_effect=error), redirect_stderr(stderr):
            code = main_mod.run(["/nope", "--config", self.missing_config])

        self.assertEqual(code, 1)
        self.assertIn("No such directory: /nope", stderr.getvalue())

    def test_keyboard_interrupt_exits_with_130(self):
        with mock.patch.object(main_mod.curses, "wrapper", side_effect=KeyboardInterrupt):
            code = main_mod.run([self.tmp.name, "--config", self.missing_config])
        self.assertEqual(code, 130)

    def test_debug_logging_only_when_requested(self):
        with (
            mock.patch.dict(os.environ, {"TWINPANE_DEBUG": ""}),
            mock.patch.object(main_mod.logging, "basicConfig") as basic,
        ):
            main_mod.configure_logging()
        basic.assert_not_called()

        log_file = os.path.join(self.tmp.name, "twinpane.log")
        with (
            mock.patch.dict(os.environ, {"TWINPANE_DEBUG": "1", "TWINPANE_LOG_FILE": log_file}),
            mock.patch.object(main_mod.logging, "basicConfig") as basic,
        ):
            main_mod.configure_logging()
        self.assertEqual(basic.call_args.kwargs["level"], main_mod.logging.DEBUG)
        self.assertEqual(basic.call_args.kwargs["filename"], log_file)


if __name__ == "__main__":
    unittest.main()
