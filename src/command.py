""" Command to be executed and the result it reports. """

INFO = "info"
SUCCESS = "success"
ERROR = "error"

CATEGORIES = (INFO, SUCCESS, ERROR)


class Executable:
    """ Base class for executable types. """
    def execute(self, shell):
        raise NotImplementedError


class Command:
    def __init__(self, name, args):
        self.name = name          # verb, uppercased
        self.args = args          # remaining tokens, case preserved

    @property
    def argument_string(self) -> str:
        return " ".join(self.args)

    @property
    def filename(self) -> str:
        """ Argument string canonicalized for file store lookups. """
        return self.argument_string.upper()


class Result:
    """ One line reported back to the display. """
    def __init__(self, text, category=INFO):
        if category not in CATEGORIES:
            raise ValueError(f"unknown result category: {category}")
        self.text = text
        self.category = category

    def __eq__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        return (self.text, self.category) == (other.text, other.category)

    def __repr__(self):
        return f"Result({self.text!r}, {self.category!r})"

    @classmethod
    def error(cls, text):
        return cls(text, ERROR)

    @classmethod
    def success(cls, text):
        return cls(text, SUCCESS)


class CommandNode(Executable):
    """ Implement a simple command as a parsed node. """
    def __init__(self, cmd: Command, executor):
        self.cmd = cmd
        self.executor = executor

    def execute(self, shell):
        return self.executor(self.cmd, shell)
