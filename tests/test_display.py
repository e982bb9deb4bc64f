import io
import sys
import unittest
from unittest.mock import patch

import display
from command import INFO, SUCCESS, ERROR


class TestConsoleDisplay(unittest.TestCase):
    def setUp(self):
        self.out = io.StringIO()
        self.err = io.StringIO()
        patcher = patch.multiple(sys, stdout=self.out, stderr=self.err)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_info_and_success_go_to_stdout(self):
        d = display.ConsoleDisplay(color=False)
        d.emit("hello", INFO)
        d.emit("done", SUCCESS)
        self.assertEqual("hello\ndone\n", self.out.getvalue())
        self.assertEqual("", self.err.getvalue())

    def test_errors_go_to_stderr(self):
        d = display.ConsoleDisplay(color=False)
        d.emit("ERROR: FILE NOT FOUND", ERROR)
        self.assertEqual("", self.out.getvalue())
        self.assertEqual("ERROR: FILE NOT FOUND\n", self.err.getvalue())

    def test_color(self):
        d = display.ConsoleDisplay(color=True)
        d.emit("ok", SUCCESS)
        self.assertEqual("\033[32mok\033[0m\n", self.out.getvalue())

    def test_color_disabled_off_tty(self):
        self.assertFalse(display.ConsoleDisplay().color)

    def test_clear_does_nothing_off_tty(self):
        display.ConsoleDisplay(color=False).clear()
        self.assertEqual("", self.out.getvalue())

    def test_show_and_hide_file(self):
        d = display.ConsoleDisplay(color=False)
        d.show_file("A.TXT", "line")
        self.assertEqual("A.TXT", d.viewing)
        self.assertIn("line", self.out.getvalue())

        d.hide_file("OTHER.TXT")
        self.assertEqual("A.TXT", d.viewing)
        d.hide_file("A.TXT")
        self.assertIsNone(d.viewing)

    def test_hide_any_file(self):
        d = display.ConsoleDisplay(color=False)
        d.show_file("A.TXT", "")
        d.hide_file()
        self.assertIsNone(d.viewing)


if __name__ == "__main__":
    unittest.main()
