"""
File utility functions.
"""

from pathlib import Path
from typing import Any

import yaml


def ensure_dir(path: str | Path) -> Path:
    """Ensure directory exists, creating if necessary."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def write_text(path: str | Path, content: str) -> Path:
    """Write UTF-8 text to file, creating parent directories if needed."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")
    return p


def load_yaml(path: str | Path) -> Any:
    """
    Load a YAML or JSON file.

    JSON is valid YAML, so CMDB exports in either format go through
    ``yaml.safe_load``.
    """
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)
