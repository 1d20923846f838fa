# SPDX-FileCopyrightText: 2024 Aleksandr Mezin <mezin.alexander@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

from .redirect import exec_command, redirect_stdin, run_with_stdin, spawn_command


__all__ = ('exec_command', 'redirect_stdin', 'run_with_stdin', 'spawn_command')
