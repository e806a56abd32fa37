"""
Identifier normalization shared by the Puppet and Chef exports.

Asset and type names are free text. Puppet class/environment names and Chef
environment/role names only accept a restricted alphabet, so names are folded
into lowercase identifiers before use. None of these functions substitute a
default for an empty result; callers decide the fallback.

Example:
    >>> normalize("DB-Primary (01)")
    'db_primary_01'
    >>> slugify("WebServer-01")
    'webserver-01'
"""

import re

_NON_IDENTIFIER = re.compile(r"[^a-z0-9]+")
_NON_SLUG = re.compile(r"[^a-z0-9_-]+")


def normalize(name: str) -> str:
    """
    Fold a name into an underscore-separated lowercase identifier.

    Every run of characters outside [a-z0-9] becomes a single underscore and
    leading/trailing underscores are stripped. Idempotent.

    Args:
        name: Human-readable name (e.g. "Web Server")

    Returns:
        Identifier such as "web_server" (possibly empty)
    """
    return _NON_IDENTIFIER.sub("_", name.lower()).strip("_")


def to_puppet_identifier(name: str) -> str:
    """Puppet class/environment name for a type name."""
    return normalize(name)


def to_chef_identifier(name: str) -> str:
    """Chef environment/role name for a type name."""
    return normalize(name)


def slugify(name: str) -> str:
    """
    Fold a name into a hyphenated slug for Chef data bag item ids.

    Unlike :func:`normalize`, hyphens and underscores are kept; every run of
    other characters becomes a single hyphen and leading/trailing hyphens
    are stripped.
    """
    return _NON_SLUG.sub("-", name.lower()).strip("-")
