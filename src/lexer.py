""" Lexical analysis for shell commands. """


def tokenize(line: str) -> list[str]:
    # No quoting or escapes: ECHO "hi" prints the quotes.
    return line.split()
