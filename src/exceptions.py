""" Errors raised while executing a command. """


class ShellError(Exception):
    """ Base class for failures reported to the user as an error line. """


class UndefinedVariable(ShellError):
    def __init__(self, name):
        super().__init__(f"Variable '{name}' not found.")
        self.name = name


class ScriptDepthExceeded(ShellError):
    def __init__(self, limit):
        super().__init__(f"Script nesting too deep (limit {limit}).")
        self.limit = limit
