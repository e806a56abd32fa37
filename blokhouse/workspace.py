"""
Workspace management for blokhouse.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validate

from blokhouse.exceptions import (
    AssetFileNotFoundError,
    AssetValidationError,
    InvalidConfigError,
    WorkspaceNotFoundError,
)
from blokhouse.models import Asset
from blokhouse.util.files import ensure_dir, load_yaml, write_text
from blokhouse.validate import load_schema, validate_assets

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "blokhouse.yaml"


class Workspace:
    """Manages the blokhouse workspace structure, configuration and asset export."""

    REQUIRED_DIRS = [
        "assets",
        "output",
    ]

    DEFAULT_CONFIG = {
        "source": {
            "assets_file": "assets/assets.yaml",
        },
        "output": {
            "directory": "output",
            "json_indent": 2,
        },
        "logging": {
            "level": "WARNING",
        },
    }

    def __init__(self, root: Path):
        self.root = Path(root)
        self.config_file = self.root / CONFIG_FILENAME
        self._config_cache: dict[str, Any] | None = None

    def initialize(self) -> None:
        """Initialize workspace directory structure, config and an empty asset file."""
        for dir_path in self.REQUIRED_DIRS:
            ensure_dir(self.root / dir_path)

        with open(self.config_file, "w") as f:
            yaml.dump(self.DEFAULT_CONFIG, f, default_flow_style=False, sort_keys=False)

        assets_file = self.root / self.DEFAULT_CONFIG["source"]["assets_file"]
        if not assets_file.exists():
            write_text(assets_file, "assets: []\n")

    def require(self) -> "Workspace":
        """Return self, raising WorkspaceNotFoundError if not initialized."""
        if not self.config_file.exists():
            raise WorkspaceNotFoundError(str(self.root))
        return self

    def load_config(self) -> dict[str, Any]:
        """Load and validate workspace configuration (cached after the first call)."""
        if self._config_cache is not None:
            return self._config_cache

        if not self.config_file.exists():
            raise WorkspaceNotFoundError(str(self.root))

        with open(self.config_file) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise InvalidConfigError(f"YAML parse error: {e}") from e

        if config is None:
            raise InvalidConfigError(f"Config file is empty: {self.config_file}")

        if not isinstance(config, dict):
            raise InvalidConfigError(f"expected mapping, got {type(config).__name__}")

        try:
            validate(instance=config, schema=load_schema("config"))
        except ValidationError as e:
            raise InvalidConfigError(
                f"{e.message} (at {'.'.join(str(p) for p in e.path) or 'root'})"
            ) from e

        self._config_cache = config
        return config

    @property
    def assets_file(self) -> Path:
        """Path of the asset export named in the configuration."""
        return self.root / self.load_config()["source"]["assets_file"]

    @property
    def output_dir(self) -> Path:
        """Directory the format handlers write into."""
        output = self.load_config().get("output", {})
        return self.root / output.get("directory", "output")

    @property
    def json_indent(self) -> int:
        return self.load_config().get("output", {}).get("json_indent", 2)

    @property
    def log_level(self) -> str:
        return self.load_config().get("logging", {}).get("level", "WARNING")

    def load_records(self) -> list[Any]:
        """
        Read raw asset records from the asset file.

        Accepts either a top-level list or a mapping with an ``assets`` list.
        """
        path = self.assets_file
        if not path.exists():
            raise AssetFileNotFoundError(str(path))

        try:
            data = load_yaml(path)
        except yaml.YAMLError as e:
            raise AssetValidationError([f"YAML parse error: {e}"], str(path)) from e

        if data is None:
            return []
        if isinstance(data, dict):
            if "assets" not in data:
                raise AssetValidationError(
                    ["Missing top-level 'assets' key (expected 'assets: [...]' or a list)"],
                    str(path),
                )
            data = data["assets"] or []
        return data

    def load_assets(self) -> list[Asset]:
        """
        Load and validate the asset export.

        Returns:
            Assets in file order

        Raises:
            AssetFileNotFoundError: If the asset file is missing
            AssetValidationError: If any record fails the schema
        """
        records = self.load_records()

        errors = validate_assets(records)
        if errors:
            raise AssetValidationError(errors, str(self.assets_file))

        assets = [Asset.from_dict(record) for record in records]
        logger.debug(f"Loaded {len(assets)} asset(s) from {self.assets_file}")
        return assets
