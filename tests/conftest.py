"""
Pytest configuration and shared fixtures for ffgraph tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from ffgraph.config import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from FFGRAPH_* variables and cached settings."""
    for name in ("FFGRAPH_LOG_LEVEL", "FFGRAPH_SAFE_LOGGING"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def fade_scale_stage():
    """The fade + scale stage reading pad 0:v with no output pads."""
    from tests.fixtures.graph_factories import create_fade_scale_stage
    return create_fade_scale_stage()
