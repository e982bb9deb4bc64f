""" Editing surfaces that hold a file's text between EDIT and SAVE/CLOSE. """
import logging
import os
import shlex
import subprocess
import sys
import tempfile

logger = logging.getLogger(__name__)


class BufferEditor:
    """ Keep the text being edited in memory. """
    def __init__(self):
        self.filename = None
        self.buffer = ""

    def open(self, filename, content):
        self.filename = filename
        self.buffer = content

    def text(self) -> str:
        return self.buffer

    def close(self):
        self.filename = None
        self.buffer = ""


class ExternalEditor(BufferEditor):
    """
    Write the text to a temporary file and, when $VISUAL or $EDITOR is set,
    open it there. SAVE reads the temporary file back.
    """
    def __init__(self, command=None):
        super().__init__()
        if command is None:
            command = os.environ.get("VISUAL") or os.environ.get("EDITOR")
        self.command = command
        self.path = None

    def open(self, filename, content):
        super().open(filename, content)
        suffix = os.path.splitext(filename)[1].lower()
        fd, self.path = tempfile.mkstemp(prefix="iqsh-", suffix=suffix)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)

        if not self.command:
            print(f"Edit {self.path}, then SAVE or CLOSE.")
            return

        try:
            subprocess.run(shlex.split(self.command) + [self.path])
        except FileNotFoundError:
            print(f"{self.command}: command not found; edit {self.path} instead",
                  file=sys.stderr)
        except BaseException:
            self.close()
            raise

    def text(self) -> str:
        if self.path is None:
            return self.buffer
        with open(self.path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

    def close(self):
        if self.path is not None:
            try:
                os.remove(self.path)
            except FileNotFoundError:
                logger.debug("editor file %s already removed", self.path)
            self.path = None
        super().close()
