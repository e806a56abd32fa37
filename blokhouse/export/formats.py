"""
Output format handlers for the export targets.

Supports: Ansible (inventory JSON), Puppet (ENC YAML per node), Chef (node
list and chef-repo data bag layout)
"""

import json
import logging
from pathlib import Path
from typing import Any

from rich.console import Console

from blokhouse.exceptions import InvalidFormatError
from blokhouse.export import ansible, chef, puppet
from blokhouse.export.identifiers import slugify
from blokhouse.models import Asset
from blokhouse.util.files import write_text

console = Console()
logger = logging.getLogger(__name__)


def to_json(document: Any, indent: int = 2) -> str:
    """Serialize an export document as JSON text with a trailing newline."""
    return json.dumps(document, indent=indent, ensure_ascii=False) + "\n"


class OutputFormat:
    """Base class for output format handlers."""

    name = ""

    def __init__(self, output_dir: Path, indent: int = 2):
        """
        Initialize output format handler.

        Args:
            output_dir: Directory the files are written under
            indent: JSON indentation
        """
        self.output_dir = Path(output_dir)
        self.indent = indent

    def render(self, assets: list[Asset]) -> dict[str, str]:
        """
        Render assets into files.

        Args:
            assets: Assets in source order

        Returns:
            Dictionary of relative file path -> content
        """
        raise NotImplementedError

    def write(self, assets: list[Asset]) -> list[Path]:
        """Render and write all files, returning the written paths."""
        written = []
        for file_path, content in self.render(assets).items():
            written.append(write_text(self.output_dir / file_path, content))
            console.print(f"[dim]  Generated: {file_path}[/dim]")
        logger.info(f"{self.name}: wrote {len(written)} file(s) to {self.output_dir}")
        return written


class AnsibleFormat(OutputFormat):
    """Static copy of the dynamic inventory, usable with ``ansible -i``."""

    name = "ansible"

    def render(self, assets: list[Asset]) -> dict[str, str]:
        inventory = ansible.build_ansible_inventory(assets)
        return {"ansible/inventory.json": to_json(inventory, self.indent)}


class PuppetFormat(OutputFormat):
    """One ENC document per node plus the node overview."""

    name = "puppet"

    def render(self, assets: list[Asset]) -> dict[str, str]:
        content = {"puppet/nodes.json": to_json(puppet.build_node_list(assets), self.indent)}
        for asset in assets:
            filename = slugify(asset.name) or slugify(asset.id) or asset.id
            path = f"puppet/nodes/{filename}.yaml"
            if path in content:
                logger.warning(f"puppet: {path} already written, {asset.name!r} overwrites it")
            content[path] = puppet.build_enc_yaml(asset)
        return content


class ChefFormat(OutputFormat):
    """Chef node list plus data bag items in chef-repo layout."""

    name = "chef"

    def render(self, assets: list[Asset]) -> dict[str, str]:
        content = {"chef/nodes.json": to_json(chef.build_node_list(assets), self.indent)}
        for item in chef.build_data_bag(assets)["items"]:
            filename = item["id"] or slugify(item["blokhouse_id"]) or item["blokhouse_id"]
            path = f"chef/data_bags/{chef.DATA_BAG}/{filename}.json"
            if path in content:
                logger.warning(f"chef: {path} already written, {item['name']!r} overwrites it")
            content[path] = to_json(item, self.indent)
        return content


FORMATS: dict[str, type[OutputFormat]] = {
    "ansible": AnsibleFormat,
    "puppet": PuppetFormat,
    "chef": ChefFormat,
}


def get_format_handler(format_name: str, output_dir: Path, indent: int = 2) -> OutputFormat:
    """
    Get output format handler by name.

    Args:
        format_name: Format name (ansible, puppet, chef)
        output_dir: Directory to write under
        indent: JSON indentation

    Returns:
        OutputFormat instance

    Raises:
        InvalidFormatError: If format name is invalid
    """
    if format_name not in FORMATS:
        raise InvalidFormatError(format_name, list(FORMATS))

    return FORMATS[format_name](output_dir, indent)
