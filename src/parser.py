""" Parse shell commands. """
from command import Command, Executable, CommandNode
from condition_evaluator import evaluate_condition
from if_parser import parse_if_to_node


def parse_command(tokens: list[str]) -> Command|None:
    """ First token is the verb (uppercased), the rest are its arguments. """
    if not tokens:
        return None
    return Command(tokens[0].upper(), tokens[1:])


def execute_line(line: str, shell):
    """ Run an IF body through the same entry point as typed input. """
    return shell.execute(line)


def parse_top_level(cmd: Command, executor) -> Executable:
    if cmd.name == "IF":
        return parse_if_to_node(cmd.argument_string, evaluate_condition, execute_line)
    return CommandNode(cmd, executor)
