"""
Ansible dynamic inventory generation.

Inventory layout:
    {
      "all": {"hosts": [...], "vars": {}},
      "<group>": {"hosts": [...], "vars": {}},
      "_meta": {"hostvars": {"<hostname>": {...}}}
    }

Only assets with an IP address become hosts. Each host lands in the group
named after its type, verbatim, or in "ungrouped" when it has no type.
"""

from collections.abc import Iterable
from typing import Any

from blokhouse.models import Asset, has_value

UNGROUPED = "ungrouped"


def _is_host(asset: Asset) -> bool:
    return has_value(asset.ip)


def _group_name(asset: Asset) -> str:
    if asset.item_type is not None and asset.item_type.name:
        return asset.item_type.name
    return UNGROUPED


def _hostvars(asset: Asset) -> dict[str, Any]:
    hostvars: dict[str, Any] = {"ansible_host": asset.ip}
    if has_value(asset.mac):
        hostvars["mac"] = asset.mac
    if has_value(asset.description):
        hostvars["description"] = asset.description
    hostvars["status"] = asset.status.value
    return hostvars


def build_ansible_inventory(assets: Iterable[Asset]) -> dict[str, Any]:
    """
    Build an Ansible dynamic inventory from assets.

    Hosts keep source order in ``all`` and in their group. When two hosts
    share a name, the later one's hostvars replace the earlier one's.

    Args:
        assets: Assets in source order

    Returns:
        Inventory document ready for JSON serialization
    """
    hosts = [asset for asset in assets if _is_host(asset)]

    groups: dict[str, dict[str, Any]] = {}
    hostvars: dict[str, dict[str, Any]] = {}
    for asset in hosts:
        group = groups.setdefault(_group_name(asset), {"hosts": [], "vars": {}})
        group["hosts"].append(asset.name)
        hostvars[asset.name] = _hostvars(asset)

    return {
        "all": {"hosts": [asset.name for asset in hosts], "vars": {}},
        **groups,
        "_meta": {"hostvars": hostvars},
    }


def build_host_vars(assets: Iterable[Asset], host: str) -> dict[str, Any]:
    """
    Hostvars for a single host, as returned by ``inventory --host <name>``.

    Returns an empty dict for unknown hosts, which is what Ansible expects.
    """
    inventory = build_ansible_inventory(assets)
    return inventory["_meta"]["hostvars"].get(host, {})
