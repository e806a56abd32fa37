"""
Asset record validation with detailed error messages.
"""

import json
from pathlib import Path
from typing import Any

from jsonschema import ValidationError
from jsonschema.validators import validator_for

SCHEMA_DIR = Path(__file__).parent / "schema"


def load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema shipped with the package (e.g. "asset")."""
    schema_file = SCHEMA_DIR / f"{name}.schema.json"
    if not schema_file.exists():
        # Missing schema means a broken installation, not bad user input
        raise FileNotFoundError(
            f"Schema file not found: {schema_file}\n"
            f"This indicates an incomplete installation. Please reinstall blokhouse:\n"
            f"  pip install --force-reinstall blokhouse"
        )
    return json.loads(schema_file.read_text())


def validate_assets(records: Any) -> list[str]:
    """
    Validate raw asset records against the asset schema.

    Args:
        records: Parsed content of an asset file (expected: list of mappings)

    Returns:
        list: Formatted error messages, empty when valid
    """
    if not isinstance(records, list):
        return [f"Expected a list of assets, got {type(records).__name__}"]

    schema = load_schema("asset")
    validator = validator_for(schema)(schema)

    errors = []
    for index, record in enumerate(records):
        for error in sorted(validator.iter_errors(record), key=lambda e: list(e.path)):
            errors.extend(format_validation_error(error, prefix=f"assets[{index}]"))
    return errors


def format_validation_error(error: ValidationError, prefix: str = "") -> list[str]:
    """
    Format jsonschema ValidationError into user-friendly messages.

    Args:
        error: ValidationError from jsonschema
        prefix: Location of the validated record (e.g. "assets[3]")

    Returns:
        list: Formatted error messages with hints
    """
    errors = []

    parts = [prefix] if prefix else []
    parts.extend(str(p) for p in error.path)
    path = ".".join(parts) if parts else "root"

    errors.append(f"Validation error at '{path}': {error.message}")

    if error.validator == "required":
        missing_props = error.message.split("'")[1::2]
        errors.append(f"  Required properties missing: {', '.join(missing_props)}")

    elif error.validator == "type":
        errors.append(f"  Expected type: {error.validator_value}")
        errors.append(f"  Got: {type(error.instance).__name__}")

        expected = error.validator_value
        if isinstance(expected, str):
            expected = [expected]
        if "string" in expected and isinstance(error.instance, (int, float)):
            errors.append(
                f'  Hint: Add quotes around the value: {error.instance} → "{error.instance}"'
            )

    elif error.validator == "enum":
        validator_value = error.validator_value
        errors.append(f"  Allowed values: {', '.join(str(v) for v in validator_value)}")
        errors.append(f"  Got: {error.instance}")

        if isinstance(error.instance, str):
            close_matches = [
                v for v in validator_value if isinstance(v, str) and v == error.instance.upper()
            ]
            if close_matches:
                errors.append(f"  Did you mean: {close_matches[0]}?")

    elif error.validator == "minLength":
        errors.append("  Hint: Value must not be empty")

    field_name = str(error.path[-1]) if error.path else ""

    if field_name == "mac":
        # YAML 1.1 reads unquoted 10:20:30:40:50:59 as a base-60 integer
        errors.append("  Hint: Quote MAC addresses in YAML exports")
        errors.append('  Correct:   mac: "10:20:30:40:50:59"')
        errors.append("  Incorrect: mac: 10:20:30:40:50:59")

    elif field_name in ("itemType", "item_type", "type"):
        errors.append("  Hint: The type must be null, a name, or an object with a name")
        errors.append("  Example:")
        errors.append("    itemType:")
        errors.append("      name: WebServer")

    return errors
