"""
Custom exceptions for blokhouse with helpful error messages.
"""


class BlokhouseError(Exception):
    """Base exception for blokhouse errors."""

    def __init__(self, message: str, suggestion: str = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.message)

    def __str__(self):
        if self.suggestion:
            return f"{self.message}\n\nSuggestion: {self.suggestion}"
        return self.message


class WorkspaceError(BlokhouseError):
    """Errors related to workspace management."""

    pass


class WorkspaceNotFoundError(WorkspaceError):
    """Workspace not found or not initialized."""

    def __init__(self, path: str = None):
        message = "Not in a blokhouse workspace."
        if path:
            message = f"No blokhouse workspace found at: {path}"

        suggestion = (
            "Initialize a new workspace with:\n"
            "  blokhouse init <workspace-dir>\n\n"
            "Or point at an existing one:\n"
            "  blokhouse --workspace <workspace-dir> ...\n"
            "  export BLOKHOUSE_WORKSPACE=<workspace-dir>"
        )
        super().__init__(message, suggestion)


class AssetSourceError(BlokhouseError):
    """Errors while reading the asset export."""

    pass


class AssetFileNotFoundError(AssetSourceError):
    """Asset file referenced by the configuration does not exist."""

    def __init__(self, file_path: str):
        message = f"Asset file not found: {file_path}"
        suggestion = (
            "Export the configuration items from the CMDB to this path, or change\n"
            "source.assets_file in blokhouse.yaml:\n"
            "  source:\n"
            "    assets_file: assets/assets.yaml"
        )
        super().__init__(message, suggestion)


class AssetValidationError(AssetSourceError):
    """Asset records failed validation."""

    def __init__(self, errors: list[str], file_path: str = None):
        error_list = "\n  - ".join(errors)
        message = f"Asset validation failed with {len(errors)} error(s):\n  - {error_list}"

        if file_path:
            message = f"Asset validation failed for {file_path}:\n  - {error_list}"

        suggestion = (
            "Fix the asset records in your export.\n"
            "Common issues:\n"
            "  - Missing id or name\n"
            "  - status not one of ACTIVE, DEPRECATED, MAINTENANCE\n"
            "  - Unquoted MAC addresses parsed as numbers by YAML\n\n"
            "Check the file with:\n"
            "  blokhouse validate"
        )
        super().__init__(message, suggestion)


class ExportError(BlokhouseError):
    """Errors while producing an export."""

    pass


class InvalidFormatError(ExportError):
    """Unknown export format requested."""

    def __init__(self, format_name: str, valid_formats: list[str]):
        message = f"Invalid format: {format_name}"
        formats_list = "\n  - ".join(valid_formats)
        suggestion = (
            f"Format must be one of:\n  - {formats_list}\n\n"
            "Example:\n"
            f"  blokhouse export --format {valid_formats[0]}"
        )
        super().__init__(message, suggestion)


class NodeNotFoundError(ExportError):
    """No asset matches a node query."""

    def __init__(self, node: str):
        message = f"Node '{node}' not found in Blokhouse"
        suggestion = (
            "Nodes are matched by exact name or IP address.\n"
            "List the known nodes with:\n"
            "  blokhouse chef"
        )
        super().__init__(message, suggestion)


class ConfigurationError(BlokhouseError):
    """Configuration file errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Configuration file is invalid."""

    def __init__(self, error_details: str):
        message = f"Invalid configuration file: {error_details}"

        suggestion = (
            "Fix the blokhouse.yaml file.\n"
            "You can regenerate the default configuration:\n"
            "  mv blokhouse.yaml blokhouse.yaml.backup\n"
            "  blokhouse init .\n\n"
            "Then merge your settings back from the backup."
        )
        super().__init__(message, suggestion)


def format_error_for_cli(error: Exception) -> str:
    """
    Format an exception for CLI display with helpful information.

    Args:
        error: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(error, BlokhouseError):
        output = f"[red]Error:[/red] {error.message}"
        if error.suggestion:
            output += f"\n\n[yellow]{error.suggestion}[/yellow]"
        return output
    else:
        return f"[red]Error:[/red] {str(error)}"
