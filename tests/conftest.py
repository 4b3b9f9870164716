"""Shared test fixtures and configuration"""

import os
import sys
import shutil
import tempfile
import threading
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from src.shellprompt.config import PromptConfig
from src.shellprompt.context import Context, Shell
from src.shellprompt.scan import DirContents, DirectoryCache
from src.shellprompt.utils import CommandOutput

from tests.fixtures.data import COMMAND_OUTPUTS


class CountingLister:
    """Directory lister that records every filesystem read"""

    def __init__(self):
        self.calls = []
        self._lock = threading.Lock()

    def __call__(self, directory):
        with self._lock:
            self.calls.append(Path(directory))
        return DirContents.from_path(directory)

    @property
    def count(self):
        return len(self.calls)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    temp_dir = tempfile.mkdtemp(prefix="shellprompt_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def counting_lister():
    """Lister with call-count instrumentation"""
    return CountingLister()


@pytest.fixture
def dir_cache(counting_lister):
    """Directory cache that reads through the counting lister"""
    return DirectoryCache(lister=counting_lister)


@pytest.fixture
def make_context(temp_dir, dir_cache):
    """Build a context for the temp directory with optional config overrides"""
    def _make(shell_kind=Shell.UNKNOWN, path=None, **overrides):
        config = PromptConfig(**overrides)
        return Context(path=str(path or temp_dir), shell=shell_kind, config=config, dir_cache=dir_cache)
    return _make


@pytest.fixture
def mock_exec_cmd():
    """Replace external commands with canned outputs"""
    def fake_exec_cmd(cmd, args, timeout=0.5):
        key = ' '.join([cmd, *args])
        output = COMMAND_OUTPUTS.get(key)
        if output is None:
            return None
        return CommandOutput(stdout=output.get('stdout', ''), stderr=output.get('stderr', ''))

    with patch('src.shellprompt.utils.exec_cmd', side_effect=fake_exec_cmd) as mock:
        yield mock


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables for each test"""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
