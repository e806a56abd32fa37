"""Asset dataclasses for CMDB configuration items.

An asset is a read-only snapshot of one configuration item as exported by the
CMDB. Optional fields treat ``None``, a missing key and ``""`` the same way:
as no value. Builders check them with :func:`has_value` only.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from blokhouse.exceptions import AssetValidationError

TYPE_KEYS = ("itemType", "item_type", "type")


class AssetStatus(str, Enum):
    """Lifecycle status of a configuration item."""

    ACTIVE = "ACTIVE"
    DEPRECATED = "DEPRECATED"
    MAINTENANCE = "MAINTENANCE"


@dataclass(frozen=True)
class AssetType:
    """Category of a configuration item (e.g. "WebServer")."""

    name: str


@dataclass(frozen=True)
class Asset:
    """A single configuration item."""

    id: str
    name: str
    ip: str | None = None
    mac: str | None = None
    description: str | None = None
    status: AssetStatus = AssetStatus.ACTIVE
    item_type: AssetType | None = None

    def __post_init__(self):
        object.__setattr__(self, "status", AssetStatus(self.status))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Asset":
        """
        Build an asset from a CMDB export record.

        The type reference is read from ``itemType``, ``item_type`` or
        ``type``, whichever is present first. Unknown extra keys are ignored.

        Args:
            data: Mapping with at least ``id`` and ``name``

        Returns:
            Asset instance

        Raises:
            AssetValidationError: If id/name are missing or status is unknown
        """
        errors = []
        for key in ("id", "name"):
            if not data.get(key):
                errors.append(f"Missing required field '{key}'")

        raw_status = data.get("status") or AssetStatus.ACTIVE.value
        try:
            status = AssetStatus(raw_status)
        except ValueError:
            allowed = ", ".join(s.value for s in AssetStatus)
            errors.append(f"Invalid status '{raw_status}' (allowed: {allowed})")
            status = None

        if errors:
            raise AssetValidationError(errors)

        item_type = None
        for key in TYPE_KEYS:
            if key in data:
                type_data = data[key]
                if isinstance(type_data, dict):
                    item_type = AssetType(name=type_data.get("name") or "")
                elif isinstance(type_data, str) and type_data:
                    item_type = AssetType(name=type_data)
                break

        return cls(
            id=data["id"],
            name=data["name"],
            ip=data.get("ip"),
            mac=data.get("mac"),
            description=data.get("description"),
            status=status,
            item_type=item_type,
        )


def has_value(value: str | None) -> bool:
    """Return True if an optional field is present and non-empty."""
    return bool(value)
