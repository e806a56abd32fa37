"""
Node resolution helpers.

Puppet and Chef ask for a single node by the name they know it under, which
is either the asset name or its IP address.
"""

from collections.abc import Iterable

from blokhouse.models import Asset


def find_asset(assets: Iterable[Asset], node: str) -> Asset | None:
    """
    Find the first asset whose name or IP equals the node query.

    Args:
        assets: Assets in source order
        node: Hostname or IP address

    Returns:
        Matching asset, or None
    """
    if not node:
        return None
    for asset in assets:
        if asset.name == node or asset.ip == node:
            return asset
    return None


def sort_by_name(assets: Iterable[Asset]) -> list[Asset]:
    """Return assets ordered by name (stable for equal names)."""
    return sorted(assets, key=lambda asset: asset.name)
