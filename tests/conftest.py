"""Shared fixtures for the Baluster Studio test suite."""
import sys
import os
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from baluster_calculator import DEFAULT_CONFIG


@pytest.fixture
def default_flat_config():
    """Returns a copy of the default configuration in flat rail mode."""
    config = DEFAULT_CONFIG.copy()
    config["mode"] = "flat"
    return config


@pytest.fixture
def default_triangle_config():
    """Returns a copy of the default configuration in triangle stair mode."""
    config = DEFAULT_CONFIG.copy()
    config["mode"] = "triangle"
    return config


@pytest.fixture
def angled_triangle_config():
    """45° stair over a 100cm run; the manual height must be ignored."""
    config = DEFAULT_CONFIG.copy()
    config.update({
        "mode": "triangle",
        "triangle_base": 100.0,
        "triangle_height": 12.0,
        "triangle_angle_deg": 45.0,
    })
    return config
