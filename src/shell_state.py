""" Current state of the shell. """
import logging

from exceptions import UndefinedVariable

logger = logging.getLogger(__name__)


class ShellState:
    def __init__(self):
        self.vars = {}
        self.editing = None       # filename open in the editor, or None

    def set_var(self, name, value):
        self.vars[name.upper()] = str(value)

    def get_var(self, name):
        return self.vars.get(name.upper())

    def lookup(self, name):
        """ Like get_var, but a missing variable is an error. """
        name = name.upper()
        if name not in self.vars:
            raise UndefinedVariable(name)
        return self.vars[name]

    def resolve(self, token: str) -> str:
        """
        Dereference a single $NAME token.
        Anything not starting with '$' is a literal and resolves to itself.
        """
        if not token.startswith("$"):
            return token
        return self.lookup(token[1:])

    @property
    def is_editing(self) -> bool:
        return self.editing is not None

    def enter_edit(self, filename):
        logger.debug("mode: editing %s", filename)
        self.editing = filename

    def leave_edit(self):
        logger.debug("mode: normal (was editing %s)", self.editing)
        self.editing = None
