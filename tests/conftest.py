"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_flat_json():
    """Flat object JSON for testing."""
    return {"name": "Ada", "active": True}


@pytest.fixture
def sample_nested_json():
    """Nested mappings and sequences of scalars for testing."""
    return {
        "service": {
            "name": "api",
            "replicas": 3,
            "ratio": 0.75,
            "debug": False,
            "owner": None
        },
        "ports": [80, 443],
        "tags": ["web", "public"],
        "env": [
            {"name": "MODE", "value": "production"},
            {"name": "LEVEL", "value": "info"}
        ],
        "matrix": [[1, 2], [3, 4]],
        "empty_list": [],
        "empty_map": {}
    }


@pytest.fixture
def sample_list_json():
    """Sample list JSON for testing."""
    return [
        {"id": 1, "name": "Item 1", "value": 100},
        {"id": 2, "name": "Item 2", "value": 200},
        {"id": 3, "name": "Item 3", "value": 300},
    ]


@pytest.fixture
def hand_written_yaml():
    """Hand-authored block YAML with comments and indentless sequences."""
    return "\n".join([
        "# deployment settings",
        "name: web",
        "",
        "replicas: 2   # scaled by hand",
        "labels:",
        "    tier: frontend",
        "    team: platform",
        "containers:",
        "- name: nginx",
        "  ports:",
        "  - 80",
        "  - 443",
        "- name: sidecar",
        "  image: 'envoy'",
        "enabled: true",
    ])
