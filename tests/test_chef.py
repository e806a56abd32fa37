"""
Tests for Chef node and data bag generation.
"""

import pytest

from blokhouse.exceptions import NodeNotFoundError
from blokhouse.export.chef import (
    build_chef_node,
    build_data_bag,
    build_data_bag_item,
    build_node_list,
    find_node,
)
from blokhouse.models import Asset, AssetType


def _asset(**overrides):
    fields = {"id": "item_abc", "name": "db-01"}
    fields.update(overrides)
    return Asset(**fields)


class TestChefNode:
    """Tests for Chef::Node documents."""

    def test_minimal_node(self):
        assert build_chef_node(_asset()) == {
            "name": "db-01",
            "chef_type": "node",
            "json_class": "Chef::Node",
            "chef_environment": "_default",
            "run_list": ["role[base]"],
            "automatic": {"hostname": "db-01", "fqdn": "db-01"},
            "normal": {"blokhouse": {"id": "item_abc", "name": "db-01", "managed": True}},
            "default": {},
            "override": {},
        }

    def test_type_drives_environment_and_role(self):
        node = build_chef_node(_asset(item_type=AssetType("WebServer")))

        assert node["chef_environment"] == "webserver"
        assert node["run_list"] == ["role[webserver]"]
        assert node["normal"]["blokhouse"]["item_type"] == "WebServer"

    def test_type_with_spaces(self):
        node = build_chef_node(_asset(item_type=AssetType("Load Balancer")))

        assert node["chef_environment"] == "load_balancer"
        assert node["run_list"] == ["role[load_balancer]"]

    def test_network_attributes(self):
        node = build_chef_node(_asset(ip="192.168.1.5", mac="AA:BB:CC:00:11:22"))

        assert node["automatic"] == {
            "ipaddress": "192.168.1.5",
            "macaddress": "AA:BB:CC:00:11:22",
            "hostname": "db-01",
            "fqdn": "db-01",
        }

    def test_empty_optional_fields_are_omitted(self):
        node = build_chef_node(_asset(ip="", mac="", description=""))

        assert "ipaddress" not in node["automatic"]
        assert "macaddress" not in node["automatic"]
        assert "description" not in node["normal"]["blokhouse"]
        assert "item_type" not in node["normal"]["blokhouse"]

    def test_description_in_normal_attributes(self):
        node = build_chef_node(_asset(description="Primary database"))
        assert node["normal"]["blokhouse"]["description"] == "Primary database"

    def test_name_not_normalized(self):
        node = build_chef_node(_asset(name="DB 01.example.com"))

        assert node["name"] == "DB 01.example.com"
        assert node["automatic"]["fqdn"] == "DB 01.example.com"


class TestDataBagItem:
    """Tests for data bag items."""

    def test_minimal_item(self):
        assert build_data_bag_item(_asset(id="item_xyz", name="cache-01")) == {
            "id": "cache-01",
            "blokhouse_id": "item_xyz",
            "name": "cache-01",
            "chef_type": "data_bag_item",
            "data_bag": "blokhouse",
        }

    def test_full_item_key_order(self):
        item = build_data_bag_item(
            _asset(
                description="Cache",
                ip="10.1.2.3",
                mac="DE:AD:BE:EF:00:01",
                item_type=AssetType("Redis"),
            )
        )

        assert list(item) == [
            "id",
            "blokhouse_id",
            "name",
            "description",
            "ip_address",
            "mac_address",
            "item_type",
            "chef_type",
            "data_bag",
        ]

    def test_id_lowercased(self):
        assert build_data_bag_item(_asset(name="WebServer-01"))["id"] == "webserver-01"

    def test_id_without_outer_hyphens(self):
        item_id = build_data_bag_item(_asset(name="---node---"))["id"]
        assert not item_id.startswith("-")
        assert not item_id.endswith("-")

    def test_omits_missing_ip(self):
        assert "ip_address" not in build_data_bag_item(_asset())


class TestCollections:
    """Tests for the node list and the data bag."""

    def test_data_bag(self, mixed_assets):
        bag = build_data_bag(mixed_assets)

        assert bag["name"] == "blokhouse"
        assert bag["chef_type"] == "data_bag"
        assert bag["json_class"] == "Chef::DataBag"
        assert [i["name"] for i in bag["items"]] == ["db-01", "loose", "offline", "web-01", "web-02"]

    def test_node_list_environments(self, mixed_assets):
        result = build_node_list(mixed_assets)

        assert result["total"] == 5
        assert result["environments"] == {
            "type2": ["db-01", "offline"],
            "_default": ["loose"],
            "type1": ["web-01", "web-02"],
        }
        assert all(n["json_class"] == "Chef::Node" for n in result["nodes"])

    def test_find_node_by_ip(self, mixed_assets):
        assert find_node(mixed_assets, "10.0.0.5")["name"] == "loose"

    def test_find_node_missing(self, mixed_assets):
        with pytest.raises(NodeNotFoundError) as exc_info:
            find_node(mixed_assets, "ghost")
        assert "Node 'ghost' not found" in str(exc_info.value)
