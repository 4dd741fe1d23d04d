import os
import sys

import pytest

# The recording fakes live beside the webpack tests.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "webpack-cmd"))


def pytest_collection_modifyitems(items):
    for item in items:
        if "static-cmd" in str(item.path):
            item.add_marker(pytest.mark.unit)
