"""
Data models.

This package contains the asset records read from CMDB exports and handed to
the export builders.

Modules:
- asset: Asset, AssetType and AssetStatus
"""

from blokhouse.models.asset import Asset, AssetStatus, AssetType, has_value

__all__ = ["Asset", "AssetStatus", "AssetType", "has_value"]
