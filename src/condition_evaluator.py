""" Evaluate IF conditions. """
import math

from constants import NUMBER_RX
from if_parser import Condition, Reference
from shell_state import ShellState


class Number:
    def __init__(self, value: float, source: str):
        self.value = value
        self.source = source      # text it was parsed from

    def __repr__(self):
        return f"Number({self.value!r})"


class Text:
    def __init__(self, value: str):
        self.value = value
        self.source = value

    def __repr__(self):
        return f"Text({self.value!r})"


def resolve_operand(operand, state: ShellState) -> str:
    if isinstance(operand, Reference):
        return state.lookup(operand.name)
    return operand.text


def coerce(value: str):
    """ Number for finite decimal strings, Text for everything else. """
    if NUMBER_RX.match(value):
        number = float(value)
        if math.isfinite(number):
            return Number(number, value)
    return Text(value)


def compare(left, operator: str, right) -> bool:
    # Numeric only when both sides are numbers; otherwise compare the strings.
    if isinstance(left, Number) and isinstance(right, Number):
        a, b = left.value, right.value
    else:
        a, b = left.source, right.source

    if operator == "===":
        return a == b
    elif operator == ">":
        return a > b
    elif operator == "<":
        return a < b
    raise ValueError(f"unsupported operator: {operator}")


def evaluate_condition(condition: Condition, state: ShellState) -> bool:
    """
    Resolve both operands, then compare them.
    An undefined $NAME on either side raises before anything is compared.
    """
    left = resolve_operand(condition.left, state)
    right = resolve_operand(condition.right, state)
    return compare(coerce(left), condition.operator, coerce(right))
