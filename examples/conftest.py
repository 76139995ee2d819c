"""Shared pytest configuration for kida-ajax examples.

Each example directory holds an ``app.py`` and its tests. The
``example_app`` fixture executes the sibling ``app.py`` as a fresh module
so tests see the page and FastAPI app it builds at import time.
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest):
    """Load the app.py next to the requesting test file."""
    app_path = Path(request.path).parent / "app.py"
    module_name = f"kida_ajax_example_{app_path.parent.name}"
    spec = importlib.util.spec_from_file_location(module_name, app_path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
