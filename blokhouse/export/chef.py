"""
Chef Infra node and data bag output.

Two shapes are produced from the same assets:
- Chef::Node documents (run list, environment and attributes per node)
- Data bag items for the "blokhouse" data bag, for recipes that look assets
  up with ``data_bag_item("blokhouse", id)``
"""

from collections.abc import Iterable
from typing import Any

from blokhouse.exceptions import NodeNotFoundError
from blokhouse.export.identifiers import slugify, to_chef_identifier
from blokhouse.export.lookup import find_asset, sort_by_name
from blokhouse.models import Asset, has_value

DEFAULT_ENVIRONMENT = "_default"
DEFAULT_ROLE = "base"
DATA_BAG = "blokhouse"


def _environment(asset: Asset) -> str:
    if asset.item_type is not None:
        return to_chef_identifier(asset.item_type.name)
    return DEFAULT_ENVIRONMENT


def _role(asset: Asset) -> str:
    if asset.item_type is not None:
        return f"role[{to_chef_identifier(asset.item_type.name)}]"
    return f"role[{DEFAULT_ROLE}]"


def build_chef_node(asset: Asset) -> dict[str, Any]:
    """
    Build a Chef::Node document for one asset.

    Network facts go under ``automatic``; CMDB metadata goes under
    ``normal.blokhouse``. Missing optional fields are left out entirely.
    """
    automatic: dict[str, Any] = {}
    if has_value(asset.ip):
        automatic["ipaddress"] = asset.ip
    if has_value(asset.mac):
        automatic["macaddress"] = asset.mac
    automatic["hostname"] = asset.name
    automatic["fqdn"] = asset.name

    blokhouse: dict[str, Any] = {"id": asset.id, "name": asset.name}
    if has_value(asset.description):
        blokhouse["description"] = asset.description
    if asset.item_type is not None:
        blokhouse["item_type"] = asset.item_type.name
    blokhouse["managed"] = True

    return {
        "name": asset.name,
        "chef_type": "node",
        "json_class": "Chef::Node",
        "chef_environment": _environment(asset),
        "run_list": [_role(asset)],
        "automatic": automatic,
        "normal": {"blokhouse": blokhouse},
        "default": {},
        "override": {},
    }


def build_data_bag_item(asset: Asset) -> dict[str, Any]:
    """Build a data bag item for one asset, keyed by a slug of its name."""
    item: dict[str, Any] = {
        "id": slugify(asset.name),
        "blokhouse_id": asset.id,
        "name": asset.name,
    }
    if has_value(asset.description):
        item["description"] = asset.description
    if has_value(asset.ip):
        item["ip_address"] = asset.ip
    if has_value(asset.mac):
        item["mac_address"] = asset.mac
    if asset.item_type is not None:
        item["item_type"] = asset.item_type.name
    item["chef_type"] = "data_bag_item"
    item["data_bag"] = DATA_BAG
    return item


def build_data_bag(assets: Iterable[Asset]) -> dict[str, Any]:
    """Build the whole "blokhouse" data bag, items sorted by asset name."""
    return {
        "name": DATA_BAG,
        "chef_type": "data_bag",
        "json_class": "Chef::DataBag",
        "items": [build_data_bag_item(asset) for asset in sort_by_name(assets)],
    }


def build_node_list(assets: Iterable[Asset]) -> dict[str, Any]:
    """
    Build every Chef::Node plus an environment index.

    Returns:
        {"total": n, "environments": {env: [names]}, "nodes": [...]}
    """
    environments: dict[str, list[str]] = {}
    nodes = []
    for asset in sort_by_name(assets):
        node = build_chef_node(asset)
        environments.setdefault(node["chef_environment"], []).append(asset.name)
        nodes.append(node)

    return {"total": len(nodes), "environments": environments, "nodes": nodes}


def find_node(assets: Iterable[Asset], node: str) -> dict[str, Any]:
    """
    Resolve a node query (hostname or IP) to its Chef::Node.

    Raises:
        NodeNotFoundError: If no asset matches
    """
    asset = find_asset(assets, node)
    if asset is None:
        raise NodeNotFoundError(node)
    return build_chef_node(asset)
