"""Shared fixtures for webpack scaffolder tests."""

import os
import sys

import pytest

# Ensure tests/webpack-cmd/ is on sys.path so test files can import
# fake_toolchain unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_toolchain import FakeEditor, FakeReporter, make_toolchain  # noqa: E402


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def toolchain():
    return make_toolchain()


@pytest.fixture
def editor():
    return FakeEditor()


@pytest.fixture
def reporter():
    return FakeReporter()
