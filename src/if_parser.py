""" Parse IF (<condition>) {<command>} statements. """
import logging

from command import Executable, Result, SUCCESS
from constants import IF_RX, OPERATORS
from exceptions import ShellError, UndefinedVariable

logger = logging.getLogger(__name__)

IF_USAGE = "Invalid IF command. Usage: IF (<condition>) {<command>}"


class Literal:
    """ Operand taken as written. """
    def __init__(self, text):
        self.text = text

    def __eq__(self, other):
        return isinstance(other, Literal) and self.text == other.text

    def __repr__(self):
        return f"Literal({self.text!r})"


class Reference:
    """ $NAME operand, looked up when the condition is evaluated. """
    def __init__(self, name):
        self.name = name

    def __eq__(self, other):
        return isinstance(other, Reference) and self.name == other.name

    def __repr__(self):
        return f"Reference({self.name!r})"


class Condition:
    def __init__(self, left, operator, right):
        self.left = left
        self.operator = operator
        self.right = right


class IfStatement:
    """ A single condition guarding a single command. """
    def __init__(self, condition: Condition, body: str):
        self.condition = condition
        self.body = body


class IfNode(Executable):
    """ Implement IF as an executable node. """
    def __init__(self, stmt: IfStatement, evaluate, executor):
        self.stmt = stmt
        self.evaluate = evaluate  # e.g., evaluate_condition
        self.executor = executor  # runs the body line, e.g., Shell.execute

    def execute(self, shell):
        try:
            met = self.evaluate(self.stmt.condition, shell.state)
        except UndefinedVariable as e:
            raise ShellError(f"Undefined variable '{e.name}' in IF condition.") from e

        if not met:
            return Result("IF condition not met.")

        shell.display.emit(f"IF condition met. Executing: {self.stmt.body}", SUCCESS)
        return self.executor(self.stmt.body, shell)


def parse_operand(text: str):
    if text.startswith("$"):
        return Reference(text[1:])
    return Literal(text)


def parse_condition(text: str) -> Condition:
    """
    Split a condition on the first operator found, trying '===', '>', '<'
    in that order. The operator may also match inside an operand.
    """
    for op in OPERATORS:
        if op in text:
            break
    else:
        raise SyntaxError("No valid operator found in IF condition. Use ===, >, or <.")

    left, right = text.split(op, 1)
    return Condition(parse_operand(left.strip()), op, parse_operand(right.strip()))


def parse_if(argument_string: str) -> IfStatement:
    m = IF_RX.match(argument_string.strip())
    if not m:
        raise SyntaxError(IF_USAGE)

    condition_text = m.group(1).strip()
    body = m.group(2).strip()
    if not condition_text or not body:
        raise SyntaxError(IF_USAGE)

    return IfStatement(parse_condition(condition_text), body)


def parse_if_to_node(argument_string: str, evaluate, executor) -> Executable:
    stmt = parse_if(argument_string)
    logger.debug("IF %s %s %s -> %s", stmt.condition.left, stmt.condition.operator,
                  stmt.condition.right, stmt.body)
    return IfNode(stmt, evaluate, executor)
