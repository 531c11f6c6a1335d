import sys
import os
from tempfile import TemporaryDirectory
import pytest
# Ensure the project root is on sys.path for all tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

DEF_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "def")

@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with TemporaryDirectory() as dir_path:
        yield dir_path

@pytest.fixture
def in_def_dir(monkeypatch):
    """Run the test from tests/def, local includes are resolved against the working directory."""
    monkeypatch.chdir(DEF_DIR)
    return DEF_DIR
