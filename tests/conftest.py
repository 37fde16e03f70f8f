"""Pytest configuration for wslgit tests."""

import sys
from pathlib import Path

import pytest

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Start every test without wslgit-related variables from the host"""
    for name in ('WSLGIT_MOUNT_ROOT', 'WSLGIT_USE_INTERACTIVE_SHELL', 'WSLGIT_ENABLE_LOGGING',
                 'WSLENV', 'BASH_ENV', 'FORK_RI_EXE_PATH'):
        # setenv first so the variable is restored (or removed) after the test
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
