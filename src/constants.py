import os
import re

VERSION = "3.1.0"

ALLOWED_EXTENSIONS = (".TXT", ".ISH")
SCRIPT_EXTENSION = ".ISH"
AUTOEXEC = "AUTOEXEC.ISH"

# checked in this order; the first one found anywhere in the condition wins
OPERATORS = ("===", ">", "<")

# verbs accepted while a file is open in the editor
EDITOR_VERBS = {"SAVE", "CLOSE"}

# IF (<condition>) {<command>}
IF_RX = re.compile(r"^\(([^)]+)\)\s*\{(.*)\}$")
NUMBER_RX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")

DEFAULT_FILES = {
    AUTOEXEC: 'ECHO "Welcome to IQsystem v3.1"\nECHO "Type HELP for command list."',
    "EXAMPLE.TXT": "This is a standard text file.",
}

DEFAULT_STORE = os.path.join(os.path.expanduser("~"), ".iqsh.json")
DEFAULT_DELAY = 0.3
DEFAULT_MAX_DEPTH = 16
