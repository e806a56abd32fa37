"""
CLI entry point for blokhouse.

The ``ansible`` and ``puppet`` commands follow the script protocols of the
respective tools, so they can be wired in directly:

    # Ansible inventory script (inventory/blokhouse.sh)
    #!/bin/sh
    exec blokhouse --workspace /srv/blokhouse ansible "$@"

    # puppet.conf
    [master]
    external_nodes = /usr/local/bin/blokhouse-enc
    node_terminus = exec
"""

import logging
from collections import Counter
from functools import wraps
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from blokhouse.exceptions import BlokhouseError, format_error_for_cli
from blokhouse.export import ansible, chef, puppet
from blokhouse.export.formats import FORMATS, get_format_handler, to_json
from blokhouse.models import Asset
from blokhouse.util.logging import configure_logging
from blokhouse.util.progress import operation_status
from blokhouse.workspace import Workspace

app = typer.Typer(
    name="blokhouse",
    help="Export Blokhouse CMDB assets to Ansible, Puppet and Chef",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def handle_errors(func):
    """Decorator to handle exceptions in CLI commands with nice formatting."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except BlokhouseError as e:
            console.print(format_error_for_cli(e))
            raise typer.Exit(1)
        except Exception as e:
            logger.debug("Unexpected error", exc_info=True)
            console.print(f"[red]Unexpected error:[/red] {str(e)}")
            console.print("\n[yellow]This may be a bug. Run again with --verbose for details.[/yellow]")
            raise typer.Exit(1)

    return wrapper


@app.callback()
def main(
    ctx: typer.Context,
    workspace: Path = typer.Option(
        None,
        "--workspace",
        "-w",
        envvar="BLOKHOUSE_WORKSPACE",
        help="Workspace directory (default: current directory)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Export Blokhouse CMDB assets to Ansible, Puppet and Chef."""
    ctx.obj = {"workspace": Workspace(workspace or Path.cwd()), "verbose": verbose}
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


def _load(ctx: typer.Context) -> tuple[Workspace, list[Asset]]:
    """Open the workspace from the global options and load its assets."""
    workspace: Workspace = ctx.obj["workspace"].require()
    if not ctx.obj["verbose"]:
        configure_logging(workspace.log_level)
    return workspace, workspace.load_assets()


def _echo_json(document, indent: int) -> None:
    # Raw output: rich would wrap long lines and interpret [brackets]
    typer.echo(to_json(document, indent), nl=False)


@app.command()
def init(
    workspace_dir: str = typer.Argument(..., help="Workspace directory to initialize"),
):
    """Initialize a new blokhouse workspace."""
    console.print(f"[bold blue]Initializing workspace:[/bold blue] {workspace_dir}")

    workspace = Workspace(Path(workspace_dir))
    workspace.initialize()

    console.print(f"[green]✓ Created directory structure in {workspace_dir}[/green]")
    console.print("[green]✓ Wrote configuration to blokhouse.yaml[/green]")

    console.print("\n[dim]Next steps:[/dim]")
    console.print("  Export configuration items from the CMDB to assets/assets.yaml")
    console.print(f"  blokhouse --workspace {workspace_dir} validate")


@app.command()
@handle_errors
def validate(ctx: typer.Context):
    """Validate the asset export and summarize it."""
    workspace, assets = _load(ctx)

    console.print(f"[green]✓ {len(assets)} asset(s) valid in {workspace.assets_file}[/green]")
    if not assets:
        return

    def type_label(asset: Asset) -> str:
        return asset.item_type.name if asset.item_type is not None else "(none)"

    by_type = Counter(type_label(a) for a in assets)
    with_ip = Counter(type_label(a) for a in assets if a.ip)

    table = Table(title="Assets by type")
    table.add_column("Type")
    table.add_column("Assets", justify="right")
    table.add_column("With IP", justify="right")
    for type_name, count in sorted(by_type.items()):
        table.add_row(type_name, str(count), str(with_ip[type_name]))
    console.print(table)

    by_status = Counter(a.status.value for a in assets)
    console.print(
        "[bold]Status:[/bold] "
        + ", ".join(f"{status}={count}" for status, count in sorted(by_status.items()))
    )

    hosts_without_ip = [a.name for a in assets if not a.ip]
    if hosts_without_ip:
        console.print(
            f"[yellow]⚠ {len(hosts_without_ip)} asset(s) without IP are left out of "
            "the Ansible inventory[/yellow]"
        )


@app.command(name="ansible")
@handle_errors
def ansible_cmd(
    ctx: typer.Context,
    list_hosts: bool = typer.Option(False, "--list", help="Print the full inventory"),
    host: str = typer.Option(None, "--host", help="Print hostvars for one host"),
):
    """Ansible dynamic inventory script (--list / --host <name>)."""
    if list_hosts and host:
        console.print("[red]Error:[/red] --list and --host are mutually exclusive")
        raise typer.Exit(2)

    workspace, assets = _load(ctx)

    if host:
        _echo_json(ansible.build_host_vars(assets, host), workspace.json_indent)
    else:
        _echo_json(ansible.build_ansible_inventory(assets), workspace.json_indent)


@app.command(name="puppet")
@handle_errors
def puppet_cmd(
    ctx: typer.Context,
    node: str = typer.Argument(None, help="Node hostname or IP to classify"),
):
    """Puppet ENC: YAML for one node, or a JSON list of all nodes."""
    workspace, assets = _load(ctx)

    if node:
        typer.echo(puppet.classify_node(assets, node), nl=False)
    else:
        _echo_json(puppet.build_node_list(assets), workspace.json_indent)


@app.command(name="chef")
@handle_errors
def chef_cmd(
    ctx: typer.Context,
    node: str = typer.Option(None, "--node", help="Single node hostname or IP"),
    format: str = typer.Option("node", "--format", help="Output format: node, databag"),
):
    """Chef::Node documents or the blokhouse data bag as JSON."""
    if format not in ("node", "databag"):
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Use node or databag.")
        raise typer.Exit(2)

    workspace, assets = _load(ctx)

    if node:
        _echo_json(chef.find_node(assets, node), workspace.json_indent)
    elif format == "databag":
        _echo_json(chef.build_data_bag(assets), workspace.json_indent)
    else:
        _echo_json(chef.build_node_list(assets), workspace.json_indent)


@app.command()
@handle_errors
def export(
    ctx: typer.Context,
    format: str = typer.Option(
        "all",
        "--format",
        help="Export format: ansible, puppet, chef, all",
    ),
):
    """Write export files to the output directory."""
    workspace, assets = _load(ctx)

    names = list(FORMATS) if format == "all" else [format]
    handlers = [get_format_handler(name, workspace.output_dir, workspace.json_indent) for name in names]

    for handler in handlers:
        with operation_status(f"Exporting {handler.name}"):
            handler.write(assets)

    console.print(f"[green]✓ Exported {len(assets)} asset(s) to {workspace.output_dir}[/green]")


if __name__ == "__main__":
    app()
