""" Registry of builtin commands. """
from command import Result
from constants import ALLOWED_EXTENSIONS, SCRIPT_EXTENSION

BUILTINS = {}

VAR_USAGE = "Invalid VAR command. Usage: VAR <variable_name> = <value>"

HELP_TEXT = """--- AVAILABLE COMMANDS ---
VAR [NAME] = [VALUE] - Define or update a variable. [VALUE] may be $NAME.
IF (<CONDITION>) {<COMMAND>} - Execute command based on condition (===, >, <).
VIEW [F]   - Displays a file in the viewer.
EDIT [F]   - Edits a file. Allowed extensions: .TXT, .ISH
SAVE       - Saves the file being edited.
CLOSE      - Closes the editor without saving.
RUN [F.ISH]- Executes an IQ-System Shell script.
LS         - Lists all files.
RM [F]     - Deletes a file.
CLS        - Clears the terminal.
FORMAT     - Wipes all local files.
ECHO [MSG] - Prints a message."""


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


def is_valid_filename(filename) -> bool:
    if not filename:
        return False
    return filename.upper().endswith(ALLOWED_EXTENSIONS)


@builtin("VAR")
def builtin_var(cmd, shell):
    parts = [p.strip() for p in cmd.argument_string.split("=")]
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise SyntaxError(VAR_USAGE)

    name = parts[0].upper()
    # resolve before touching the store so a bad $REF leaves nothing behind
    value = shell.state.resolve(parts[1])
    shell.state.set_var(name, value)
    return Result.success(f"Variable '{name}' set to '{value}'.")


@builtin("HELP")
def builtin_help(cmd, shell):
    return Result(HELP_TEXT)


@builtin("ECHO")
def builtin_echo(cmd, shell):
    return Result(cmd.argument_string)


@builtin("CLS")
def builtin_cls(cmd, shell):
    shell.display.clear()
    return None


@builtin("LS")
def builtin_ls(cmd, shell):
    files = shell.store.list()
    return Result("\n".join(files) if files else "No files found.")


@builtin("VIEW")
def builtin_view(cmd, shell):
    filename = cmd.filename
    if not filename or filename not in shell.store:
        return Result.error("ERROR: FILE NOT FOUND")

    shell.display.show_file(filename, shell.store.get(filename))
    return Result(f"Viewing file '{filename}'.")


@builtin("RM")
def builtin_rm(cmd, shell):
    filename = cmd.filename
    if not filename or filename not in shell.store:
        return Result.error("ERROR: FILE NOT FOUND")

    shell.store.delete(filename)
    shell.display.hide_file(filename)
    return Result.success(f"File '{filename}' deleted.")


@builtin("EDIT")
def builtin_edit(cmd, shell):
    filename = cmd.filename
    if not is_valid_filename(filename):
        return Result.error("ERROR: Filename must end with .TXT or .ISH")

    shell.editor.open(filename, shell.store.get(filename) or "")
    shell.state.enter_edit(filename)
    return Result(f"Editing file '{filename}'. Use SAVE or CLOSE when done.")


@builtin("SAVE")
def builtin_save(cmd, shell):
    if not shell.state.is_editing:
        return Result.error("ERROR: NOT IN EDIT MODE")

    filename = shell.state.editing
    shell.store.put(filename, shell.editor.text())
    shell.editor.close()
    shell.state.leave_edit()
    return Result.success(f"File '{filename}' saved.")


@builtin("CLOSE")
def builtin_close(cmd, shell):
    if not shell.state.is_editing:
        return Result.error("ERROR: NOT IN EDIT MODE")

    filename = shell.state.editing
    shell.editor.close()
    shell.state.leave_edit()
    return Result(f"Closed editor for '{filename}' without saving.")


@builtin("RUN")
def builtin_run(cmd, shell):
    filename = cmd.filename
    if not filename.endswith(SCRIPT_EXTENSION) or filename not in shell.store:
        return Result.error("ERROR: Can only run .ISH script files.")
    return shell.runner.run(filename)


@builtin("FORMAT")
def builtin_format(cmd, shell):
    """
    FORMAT YES   wipe every file
    FORMAT       only warn
    """
    if cmd.args and cmd.args[0].upper() == "YES":
        shell.store.clear()
        shell.display.hide_file()
        return Result.success("Local storage formatted.")

    return Result.error("WARNING: This will delete all files. Type 'FORMAT YES' to confirm.")
