"""Shared pytest configuration for jinx examples.

``example_app`` runs the ``app.py`` next to the requesting test and exposes
its globals as attributes, so each test sees freshly rendered output.
"""

from pathlib import Path
from runpy import run_path
from types import SimpleNamespace

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest) -> SimpleNamespace:
    """Execute the sibling app.py and return its namespace."""
    app_path = Path(request.path).parent / "app.py"
    return SimpleNamespace(**run_path(str(app_path), run_name=f"example_{app_path.parent.name}"))
