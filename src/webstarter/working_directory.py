"""Scoped current-directory handling."""

import os
from contextlib import contextmanager


@contextmanager
def preserved_working_directory():
    """Record the current directory and restore it on every exit path."""
    original = os.getcwd()
    try:
        yield original
    finally:
        os.chdir(original)
