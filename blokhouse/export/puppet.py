"""
Puppet External Node Classifier (ENC) output.

Puppet runs the ENC once per node and reads YAML of the form:

    ---
    classes:
      <class>:
    parameters:
      <key>: "<value>"
    environment: <env>

The YAML is assembled line by line rather than through a YAML emitter so the
layout stays byte-stable for existing Puppet configurations. String values
only have their double quotes escaped; other YAML-significant characters are
passed through unchanged.

puppet.conf (the wrapper runs ``blokhouse puppet "$1"``):
    [master]
    external_nodes = /usr/local/bin/blokhouse-enc
    node_terminus = exec
"""

from collections.abc import Iterable
from typing import Any
from urllib.parse import quote

from blokhouse.export.identifiers import to_puppet_identifier
from blokhouse.export.lookup import find_asset, sort_by_name
from blokhouse.models import Asset, has_value

DEFAULT_CLASS = "base"
DEFAULT_ENVIRONMENT = "production"
MANAGED_BY = "blokhouse"
ENC_URL = "/api/puppet?node={node}"


def _escape(value: str) -> str:
    return value.replace('"', '\\"')


def _class_name(asset: Asset) -> str:
    if asset.item_type is not None:
        return to_puppet_identifier(asset.item_type.name)
    return DEFAULT_CLASS


def _environment(asset: Asset) -> str:
    if asset.item_type is not None:
        return to_puppet_identifier(asset.item_type.name)
    return DEFAULT_ENVIRONMENT


def build_enc_yaml(asset: Asset) -> str:
    """
    Build the ENC YAML document for one asset.

    Args:
        asset: Asset to classify

    Returns:
        YAML text ending with a newline
    """
    lines = ["---"]

    lines.append("classes:")
    lines.append(f"  {_class_name(asset)}:")

    lines.append("parameters:")
    lines.append(f'  blokhouse_id: "{asset.id}"')
    lines.append(f'  blokhouse_name: "{_escape(asset.name)}"')

    if has_value(asset.description):
        lines.append(f'  description: "{_escape(asset.description)}"')
    if has_value(asset.ip):
        lines.append(f'  ip_address: "{asset.ip}"')
    if has_value(asset.mac):
        lines.append(f'  mac_address: "{asset.mac}"')
    if asset.item_type is not None:
        lines.append(f'  item_type: "{_escape(asset.item_type.name)}"')
    lines.append(f'  managed_by: "{MANAGED_BY}"')

    lines.append(f"environment: {_environment(asset)}")

    return "\n".join(lines) + "\n"


def build_default_enc_yaml() -> str:
    """Build the ENC YAML returned for nodes unknown to the CMDB."""
    return "\n".join(
        [
            "---",
            "classes:",
            f"  {DEFAULT_CLASS}:",
            "parameters:",
            "  blokhouse_managed: false",
            f"environment: {DEFAULT_ENVIRONMENT}",
            "",
        ]
    )


def classify_node(assets: Iterable[Asset], node: str) -> str:
    """
    Resolve a node query (hostname or IP) to its ENC YAML.

    Falls back to the default ENC when no asset matches.
    """
    asset = find_asset(assets, node)
    return build_enc_yaml(asset) if asset else build_default_enc_yaml()


def build_node_list(assets: Iterable[Asset]) -> dict[str, Any]:
    """
    Build the JSON overview of every node known to the ENC.

    Returns:
        {"total": n, "nodes": [...]} with nodes sorted by name
    """
    nodes = [
        {
            "name": asset.name,
            "ip": asset.ip or None,
            "mac": asset.mac or None,
            "description": asset.description or None,
            "type": asset.item_type.name if asset.item_type is not None else None,
            "environment": _environment(asset),
            "enc_url": ENC_URL.format(node=quote(asset.name, safe="!~*'()")),
        }
        for asset in sort_by_name(assets)
    ]
    return {"total": len(nodes), "nodes": nodes}
