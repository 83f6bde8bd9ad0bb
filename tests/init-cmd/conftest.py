"""Shared fixtures for init-cmd tests."""

import os
import sys

# Make the scaffold fakes and the prompt helpers importable from test files.
sys.path.insert(0, os.path.dirname(__file__))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), os.pardir, "scaffold"))
