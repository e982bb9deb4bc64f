import os
import unittest
from unittest.mock import patch

import editor


class TestBufferEditor(unittest.TestCase):
    def test_open_text_close(self):
        ed = editor.BufferEditor()
        ed.open("A.TXT", "hello")
        self.assertEqual("A.TXT", ed.filename)
        self.assertEqual("hello", ed.text())

        ed.buffer = "changed"
        self.assertEqual("changed", ed.text())

        ed.close()
        self.assertIsNone(ed.filename)
        self.assertEqual("", ed.text())


class TestExternalEditor(unittest.TestCase):
    def test_without_command_writes_temp_file(self):
        ed = editor.ExternalEditor(command="")
        with patch("builtins.print"), patch.object(editor.subprocess, "run") as mock_run:
            ed.open("NOTES.TXT", "first draft")

        mock_run.assert_not_called()
        self.addCleanup(ed.close)
        self.assertTrue(ed.path.endswith(".txt"))
        with open(ed.path, "r", encoding="utf-8") as f:
            self.assertEqual("first draft", f.read())

    def test_text_reads_back_changes(self):
        ed = editor.ExternalEditor(command="")
        with patch("builtins.print"):
            ed.open("NOTES.TXT", "old")
        self.addCleanup(ed.close)

        with open(ed.path, "w", encoding="utf-8") as f:
            f.write("new")
        self.assertEqual("new", ed.text())

    def test_launches_configured_editor(self):
        ed = editor.ExternalEditor(command="vim -n")
        with patch.object(editor.subprocess, "run") as mock_run:
            ed.open("GO.ISH", "ECHO hi")
        self.addCleanup(ed.close)

        args, kwargs = mock_run.call_args
        self.assertEqual(["vim", "-n", ed.path], args[0])

    def test_missing_editor_program_is_reported(self):
        ed = editor.ExternalEditor(command="no-such-editor")
        with patch.object(editor.subprocess, "run", side_effect=FileNotFoundError), \
             patch("builtins.print") as mock_print:
            ed.open("A.TXT", "")
        self.addCleanup(ed.close)

        self.assertIn("command not found", mock_print.call_args[0][0])

    def test_failed_launch_removes_temp_file(self):
        ed = editor.ExternalEditor(command="vim")
        with patch.object(editor.subprocess, "run", side_effect=PermissionError("denied")) as mock_run:
            with self.assertRaises(PermissionError):
                ed.open("A.TXT", "x")

        path = mock_run.call_args[0][0][-1]
        self.assertFalse(os.path.exists(path))
        self.assertIsNone(ed.path)
        self.assertIsNone(ed.filename)

    def test_interrupted_editor_removes_temp_file(self):
        ed = editor.ExternalEditor(command="vim")
        with patch.object(editor.subprocess, "run", side_effect=KeyboardInterrupt) as mock_run:
            with self.assertRaises(KeyboardInterrupt):
                ed.open("A.TXT", "x")

        self.assertFalse(os.path.exists(mock_run.call_args[0][0][-1]))
        self.assertIsNone(ed.path)

    def test_close_removes_temp_file(self):
        ed = editor.ExternalEditor(command="")
        with patch("builtins.print"):
            ed.open("A.TXT", "x")
        path = ed.path
        ed.close()

        self.assertFalse(os.path.exists(path))
        self.assertIsNone(ed.path)
        self.assertEqual("", ed.text())

    def test_command_defaults_to_environment(self):
        with patch.dict(os.environ, {"VISUAL": "", "EDITOR": "nano"}):
            self.assertEqual("nano", editor.ExternalEditor().command)


if __name__ == "__main__":
    unittest.main()
