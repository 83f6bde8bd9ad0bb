"""Shared fixtures for scaffold tests."""

import os
import sys

# Ensure tests/scaffold/ is on sys.path so test files can import the fakes
# unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_command_runner import FakeCommandRunner  # noqa: E402, F401
from fake_file_writer import FakeFileWriter  # noqa: E402, F401
