#!/usr/bin/env python3
""" Command-line entry point for iqsh. """
import argparse
import functools
import logging
import os
import sys
import time

from command import ERROR
from constants import (AUTOEXEC, DEFAULT_DELAY, DEFAULT_FILES, DEFAULT_MAX_DEPTH,
                       DEFAULT_STORE, VERSION)
from editor import ExternalEditor
from file_store import JsonFileStore, MemoryFileStore
from shell import Shell


def positive_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{text}'")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, not {value}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog="iqsh",
        description="IQ-System shell: a tiny command and .ISH script interpreter",
    )
    parser.add_argument(
        "script",
        nargs="?",
        metavar="FILE.ISH",
        help="Run this script from the store instead of starting the prompt"
    )
    parser.add_argument(
        "-c",
        dest="command",
        metavar="COMMAND",
        help="Run a single command and exit"
    )
    parser.add_argument(
        "--store",
        metavar="PATH",
        default=os.environ.get("IQSH_STORE", DEFAULT_STORE),
        help="JSON file holding the files (default: $IQSH_STORE or ~/.iqsh.json)"
    )
    parser.add_argument(
        "--memory",
        action="store_true",
        help="Keep files in memory only; nothing is saved"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=DEFAULT_DELAY,
        metavar="SECONDS",
        help=f"Pause between script lines (default: {DEFAULT_DELAY}, 0 disables)"
    )
    parser.add_argument(
        "--max-depth",
        type=positive_int,
        default=DEFAULT_MAX_DEPTH,
        metavar="N",
        help=f"Limit on scripts RUN from inside scripts (default: {DEFAULT_MAX_DEPTH})"
    )
    parser.add_argument(
        "--no-autoexec",
        action="store_true",
        help=f"Do not run {AUTOEXEC} at startup"
    )
    parser.add_argument("--debug", action="store_true", help="Log every command to stderr")
    parser.add_argument("--version", action="version", version=f"iqsh {VERSION}")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.memory:
        store = MemoryFileStore(DEFAULT_FILES)
    else:
        try:
            store = JsonFileStore(args.store)
        except (OSError, ValueError) as e:
            print(f"iqsh: cannot open store: {e}", file=sys.stderr)
            return 2

    pause = functools.partial(time.sleep, args.delay) if args.delay > 0 else None
    shell = Shell(store=store, editor=ExternalEditor(), pause=pause,
                  max_depth=args.max_depth)

    if args.command is not None or args.script is not None:
        line = args.command if args.command is not None else f"RUN {args.script}"
        try:
            result = shell.dispatch(line)
        except KeyboardInterrupt:
            return 130
        finally:
            shell.close()
        return 1 if result is not None and result.category == ERROR else 0

    if not args.no_autoexec:
        try:
            shell.boot()
        except KeyboardInterrupt:
            print()
    return shell.run()


if __name__ == "__main__":
    sys.exit(main())
