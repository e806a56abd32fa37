"""
Tests for asset schema validation messages.
"""

from blokhouse.validate import load_schema, validate_assets


class TestValidateAssets:
    """Tests for validate_assets."""

    def test_valid_records(self, sample_records):
        assert validate_assets(sample_records) == []

    def test_not_a_list(self):
        errors = validate_assets({"id": "1"})
        assert errors == ["Expected a list of assets, got dict"]

    def test_unquoted_mac_hint(self):
        # YAML 1.1 turns 10:20:30:40:50:59 into an integer
        errors = validate_assets([{"id": "1", "name": "n", "mac": 133943453459}])

        assert any("assets[0].mac" in e for e in errors)
        assert any("Quote MAC addresses" in e for e in errors)
        assert any("Add quotes around the value" in e for e in errors)

    def test_status_case_hint(self):
        errors = validate_assets([{"id": "1", "name": "n", "status": "active"}])
        assert any("Did you mean: ACTIVE?" in e for e in errors)

    def test_empty_name(self):
        errors = validate_assets([{"id": "1", "name": ""}])
        assert any("must not be empty" in e for e in errors)

    def test_bad_type_reference(self):
        errors = validate_assets([{"id": "1", "name": "n", "itemType": {"label": "x"}}])
        assert any("assets[0].itemType" in e for e in errors)

    def test_extra_fields_allowed(self):
        assert validate_assets([{"id": "1", "name": "n", "serialNumber": "XYZ"}]) == []


def test_schemas_are_packaged():
    assert load_schema("asset")["required"] == ["id", "name"]
    assert "source" in load_schema("config")["properties"]
