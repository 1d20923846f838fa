# SPDX-FileCopyrightText: 2024 Aleksandr Mezin <mezin.alexander@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

import os
import pathlib
import shutil
import sys

import pytest

from . import procutil


THIS_FILE = pathlib.Path(__file__).resolve()
THIS_DIR = THIS_FILE.parent
SRC_DIR = THIS_DIR.parent


def pytest_addoption(parser):
    parser.addoption(
        '--asstdin',
        default=None,
        help='asstdin executable to test. '
             'Will run the package from the source tree (python -m asstdin) if not specified.',
    )


@pytest.fixture(scope='session')
def asstdin_launcher(request):
    if executable := request.config.option.asstdin:
        resolved = shutil.which(executable)

        if resolved is None:
            raise pytest.UsageError(f'--asstdin executable {executable!r} not found')

        return procutil.Launcher(resolved)

    return procutil.Launcher(sys.executable, '-m', 'asstdin')


@pytest.fixture(autouse=True)
def source_tree_on_pythonpath(monkeypatch):
    pythonpath = os.environ.get('PYTHONPATH')
    paths = [str(SRC_DIR), pythonpath] if pythonpath else [str(SRC_DIR)]

    monkeypatch.setenv('PYTHONPATH', os.pathsep.join(paths))


@pytest.fixture
def input_file(tmp_path):
    path = tmp_path / 'input.txt'
    path.write_bytes(b'hello\n')

    return path
