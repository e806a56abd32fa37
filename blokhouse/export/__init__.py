"""
Asset projections for configuration management tools.

All builders are pure functions of the assets passed in.
"""

from blokhouse.export.ansible import build_ansible_inventory, build_host_vars
from blokhouse.export.chef import build_chef_node, build_data_bag, build_data_bag_item
from blokhouse.export.identifiers import normalize, slugify
from blokhouse.export.puppet import build_default_enc_yaml, build_enc_yaml

__all__ = [
    "build_ansible_inventory",
    "build_chef_node",
    "build_data_bag",
    "build_data_bag_item",
    "build_default_enc_yaml",
    "build_enc_yaml",
    "build_host_vars",
    "normalize",
    "slugify",
]
