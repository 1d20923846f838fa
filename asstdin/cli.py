# SPDX-FileCopyrightText: 2024 Aleksandr Mezin <mezin.alexander@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Run a command with its standard input redirected from a file.

Equivalent to `command args... < input`, for harnesses that launch commands
without a shell (hyperfine, for example). Everything after the command name is
passed to it verbatim, so `asstdin` has no options of its own.
"""

import argparse
import pathlib
import sys

from .redirect import run_with_stdin


def make_parser():
    description, epilog = __doc__.split('\n\n', 1)

    parser = argparse.ArgumentParser(
        prog='asstdin',
        description=description,
        epilog=epilog,
        add_help=False,
    )

    parser.add_argument(
        'input_file',
        metavar='input',
        type=pathlib.Path,
        help='File to use as standard input',
    )

    parser.add_argument('command', help='Command to execute, looked up in PATH')
    parser.add_argument('args', nargs=argparse.REMAINDER, help='Command arguments')

    return parser


def cli(args=None):
    if args is None:
        args = sys.argv[1:]

    # Not parse_args(): it would strip "--" and reject names starting with "-"
    if len(args) < 2:
        make_parser().error('the following arguments are required: input, command')

    input_file, *argv = args

    run_with_stdin(pathlib.Path(input_file), argv)
