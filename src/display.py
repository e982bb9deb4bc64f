""" Terminal output for result lines and viewed files. """
import os
import sys

from command import INFO, SUCCESS, ERROR

COLORS = {
    INFO: "",
    SUCCESS: "\033[32m",
    ERROR: "\033[31m",
}
RESET = "\033[0m"
CLEAR_SCREEN = "\033[2J\033[H"


class ConsoleDisplay:
    """
    Print result lines to stdout, error lines to stderr.
    Colour is used only on a tty and when NO_COLOR is unset.
    """
    def __init__(self, color=None):
        if color is None:
            color = sys.stdout.isatty() and "NO_COLOR" not in os.environ
        self.color = color
        self.viewing = None       # filename last shown with show_file

    def emit(self, text, category=INFO):
        stream = sys.stderr if category == ERROR else sys.stdout
        prefix = COLORS.get(category, "") if self.color else ""
        suffix = RESET if prefix else ""
        print(f"{prefix}{text}{suffix}", file=stream)

    def clear(self):
        if sys.stdout.isatty():
            print(CLEAR_SCREEN, end="", flush=True)

    def show_file(self, name, content):
        self.viewing = name
        print(f"=== {name} ===")
        if content:
            print(content)
        print(f"=== end of {name} ===")

    def hide_file(self, name=None):
        """ Forget the viewed file; with a name, only if it is that file. """
        if name is None or name == self.viewing:
            self.viewing = None
