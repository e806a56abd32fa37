"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest
import yaml

from blokhouse.models import Asset, AssetStatus, AssetType
from blokhouse.workspace import Workspace


@pytest.fixture
def temp_workspace():
    """Create a temporary workspace for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        workspace = Workspace(Path(tmpdir))
        workspace.initialize()
        yield workspace


@pytest.fixture
def make_asset():
    """Factory for assets with sensible defaults."""

    def _make(**overrides):
        fields = {
            "id": "id-1",
            "name": "host-01",
            "ip": "192.168.1.1",
            "mac": "00:11:22:33:44:55",
            "description": "Test host",
            "status": AssetStatus.ACTIVE,
            "item_type": None,
        }
        fields.update(overrides)
        return Asset(**fields)

    return _make


@pytest.fixture
def mixed_assets(make_asset):
    """Two type1 hosts, one type2 host, one asset without IP, one untyped host."""
    return [
        make_asset(id="a1", name="web-01", ip="10.0.0.1", item_type=AssetType("type1")),
        make_asset(id="a2", name="web-02", ip="10.0.0.2", item_type=AssetType("type1")),
        make_asset(id="a3", name="db-01", ip="10.0.0.3", item_type=AssetType("type2")),
        make_asset(id="a4", name="offline", ip=None, item_type=AssetType("type2")),
        make_asset(id="a5", name="loose", ip="10.0.0.5", item_type=None),
    ]


@pytest.fixture
def sample_records():
    """Raw asset records as exported by the CMDB."""
    return [
        {
            "id": "ck1",
            "name": "web-01",
            "ip": "10.0.0.1",
            "mac": "AA:BB:CC:DD:EE:01",
            "description": "Frontend",
            "status": "ACTIVE",
            "itemType": {"name": "Web Server"},
            "createdAt": "2024-01-01T00:00:00Z",
        },
        {
            "id": "ck2",
            "name": "db-01",
            "ip": "10.0.0.2",
            "mac": None,
            "description": "",
            "status": "MAINTENANCE",
            "itemType": {"name": "Database"},
        },
        {
            "id": "ck3",
            "name": "spare",
            "ip": None,
            "status": "DEPRECATED",
            "itemType": None,
        },
    ]


@pytest.fixture
def populated_workspace(temp_workspace, sample_records):
    """Workspace whose asset file holds sample_records."""
    temp_workspace.assets_file.write_text(yaml.safe_dump({"assets": sample_records}))
    return temp_workspace
