"""Pytest configuration to ensure imports from the project root work.

This adds the repository root to `sys.path` so tests can import the
`ragchat` package regardless of the current working directory, and
provides shared fixtures.
"""
from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Resolve repository root (one level above the tests directory)
REPO_ROOT = Path(__file__).resolve().parents[1]
root_str = str(REPO_ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)


def _make_response(body, status_code=200):
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = body
    return response


@pytest.fixture
def make_response():
    """Factory for stand-ins of ``requests.Response`` with a raw text body."""
    return _make_response


@pytest.fixture(scope="session")
def qapp():
    """A QCoreApplication for tests that touch Qt objects."""
    from PySide6.QtCore import QCoreApplication
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
