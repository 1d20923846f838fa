# SPDX-FileCopyrightText: 2024 Aleksandr Mezin <mezin.alexander@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Make a file the standard input of a command, then hand the process over to it.
"""

import logging
import os
import subprocess
import sys


LOGGER = logging.getLogger(__name__)

STDIN_FILENO = 0


def redirect_stdin(path, target_fd=STDIN_FILENO):
    LOGGER.debug('Opening %r as fd %r', os.fspath(path), target_fd)

    fd = os.open(path, os.O_RDONLY)

    if fd == target_fd:
        # Slot was free, and the kernel reused it. os.open() sets O_CLOEXEC.
        os.set_inheritable(fd, True)

    else:
        try:
            os.dup2(fd, target_fd, inheritable=True)
        finally:
            os.close(fd)

    return target_fd


def exec_command(argv):
    LOGGER.debug('Executing %r', argv)

    # Buffered output would be lost after exec
    sys.stdout.flush()
    sys.stderr.flush()

    os.execvp(argv[0], argv)


def spawn_command(argv, path):
    LOGGER.debug('Spawning %r with stdin from %r', argv, os.fspath(path))

    with open(path, 'rb') as stdin:
        returncode = subprocess.run(argv, stdin=stdin).returncode

    LOGGER.debug('Process %r exited with code %s', argv, returncode)

    return returncode


def run_with_stdin(path, argv, replace=None):
    if replace is None:
        replace = os.name == 'posix'

    if replace:
        redirect_stdin(path)
        exec_command(argv)

    else:
        sys.exit(spawn_command(argv, path))
