""" Implement the core of the shell. """
import logging

from command import Result
from constants import AUTOEXEC, DEFAULT_FILES, DEFAULT_MAX_DEPTH, EDITOR_VERBS
from display import ConsoleDisplay
from editor import BufferEditor
from exceptions import ShellError
from file_store import MemoryFileStore
from lexer import tokenize
from parser import parse_command, parse_top_level
from runner import ScriptRunner, execute_command
from shell_state import ShellState

logger = logging.getLogger(__name__)

PROMPT = "CMD> "


def read_command(prompt=PROMPT):
    """ Read one line; a trailing backslash is part of the command. """
    return input(prompt)


class Shell:
    """
    One interpreter session: variables and mode live in `state`, files in
    `store`. Results go to `display`.
    """
    def __init__(self, store=None, display=None, editor=None, pause=None,
                 max_depth=DEFAULT_MAX_DEPTH):
        self.state = ShellState()
        self.store = store if store is not None else MemoryFileStore(DEFAULT_FILES)
        self.display = display if display is not None else ConsoleDisplay()
        self.editor = editor if editor is not None else BufferEditor()
        self.runner = ScriptRunner(self, pause=pause, max_depth=max_depth)
        self.last_result = None

    def execute(self, line: str) -> Result|None:
        """
        Run one line and return its result without displaying it.
        Blank lines do nothing and return None.
        """
        cmd = parse_command(tokenize(line))
        if cmd is None:
            return None
        logger.debug("Executing command: %s", line.strip())

        if self.state.is_editing and cmd.name not in EDITOR_VERBS:
            return Result.error("Currently in editor mode. Use SAVE or CLOSE.")

        try:
            node = parse_top_level(cmd, execute_command)
            return node.execute(self)
        except (SyntaxError, ShellError) as e:
            return Result.error(f"ERROR: {e}")
        except Exception as e:
            logger.exception("command failed: %s", line.strip())
            return Result.error(f"An unexpected error occurred: {e}")

    def dispatch(self, line: str) -> Result|None:
        result = self.execute(line)
        if result is not None:
            self.display.emit(result.text, result.category)
            self.last_result = result
        return result

    def boot(self):
        """ Run AUTOEXEC.ISH when the store has one. """
        if AUTOEXEC in self.store:
            return self.dispatch(f"RUN {AUTOEXEC}")
        return None

    def close(self):
        """ End the session, discarding any unsaved editor buffer. """
        if self.state.is_editing:
            self.editor.close()
            self.state.leave_edit()

    def run(self):
        while True:
            try:
                line = read_command()
                self.dispatch(line)
            except EOFError:
                print()
                self.close()
                return 0

            except KeyboardInterrupt:
                print()
