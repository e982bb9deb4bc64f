""" Execute a shell command, or a whole script of them. """
import logging

from command import Command, Result, INFO, SUCCESS
from constants import DEFAULT_MAX_DEPTH
from exceptions import ScriptDepthExceeded
from shell_builtins import BUILTINS

logger = logging.getLogger(__name__)


def execute_command(cmd: Command, shell) -> Result|None:
    if cmd.name in BUILTINS:
        return BUILTINS[cmd.name](cmd, shell)
    return Result.error(f"UNKNOWN COMMAND: {cmd.name}")


def script_lines(content: str) -> list[str]:
    """ Lines of a script in order, blank ones dropped. """
    lines = (line.removesuffix("\r") for line in content.split("\n"))
    return [line for line in lines if line.strip()]


class ScriptRunner:
    """
    Feed each line of a .ISH file back through the shell.

    A failing line never stops the script. `pause` is called between lines
    so output can be watched as it happens; None runs the lines back to back.
    """
    def __init__(self, shell, pause=None, max_depth=DEFAULT_MAX_DEPTH):
        self.shell = shell
        self.pause = pause
        self.max_depth = max_depth
        self.depth = 0

    def run(self, filename) -> Result:
        if self.depth >= self.max_depth:
            raise ScriptDepthExceeded(self.max_depth)

        lines = script_lines(self.shell.store.get(filename) or "")
        display = self.shell.display
        display.emit(f"--- RUNNING SCRIPT {filename} ---", SUCCESS)
        logger.debug("running %s (%d lines, depth %d)", filename, len(lines), self.depth + 1)

        self.depth += 1
        try:
            for i, line in enumerate(lines):
                if i and self.pause is not None:
                    self.pause()
                display.emit(f"> {line}", INFO)
                self.shell.dispatch(line)
        finally:
            self.depth -= 1

        return Result.success(f"--- SCRIPT {filename} FINISHED ---")
