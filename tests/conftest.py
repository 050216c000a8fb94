"""
Shared fixtures for pyshell tests
"""

import pytest

from pyshell.config import Config
from pyshell.history import History
from pyshell.shell import Shell


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside an empty temporary directory"""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def shell(workdir):
    """A shell with default settings and an empty history"""
    return Shell(Config(), History())
