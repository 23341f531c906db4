"""Config commands: manage connection profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt

from mgc_sdk.client.errors import error_handler
from mgc_sdk.config.constants import DEFAULT_REGION
from mgc_sdk.config.manager import ConfigManager
from mgc_sdk.config.models import Profile
from mgc_sdk.output.formatter import output

app = typer.Typer(name="config", help="Manage connection profiles and CLI configuration.")
console = Console()

_SECRET_FIELDS = ("api_key", "secret_key")


def _get_manager() -> ConfigManager:
    return ConfigManager()


def _mask(value: str) -> str:
    return value[:4] + "..." if len(value) > 8 else "***"


@app.command()
@error_handler
def init() -> None:
    """Interactive setup wizard: create your first profile."""
    mgr = _get_manager()
    console.print("[bold]Magalu Cloud CLI Setup Wizard[/]\n")

    name = Prompt.ask("Profile name", default="default")
    region = Prompt.ask("Region", default=DEFAULT_REGION)
    api_key = Prompt.ask("API key", default=None, password=True)
    access_key = Prompt.ask("Object storage access key (optional)", default=None)
    secret_key = Prompt.ask("Object storage secret key (optional)", default=None, password=True)

    profile = Profile(
        name=name,
        region=region,
        api_key=api_key or None,
        access_key=access_key or None,
        secret_key=secret_key or None,
    )
    mgr.add_profile(profile)
    console.print(f"\n[green]Profile '{name}' saved.[/]")
    console.print(f"Config file: {mgr.config_path}")


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    api_key: Annotated[Optional[str], typer.Option("--api-key", help="API key")] = None,
    region: Annotated[str, typer.Option("--region", help="Region")] = DEFAULT_REGION,
    base_url: Annotated[Optional[str], typer.Option("--base-url", help="API URL override")] = None,
    access_key: Annotated[Optional[str], typer.Option("--access-key", help="Object storage access key")] = None,
    secret_key: Annotated[Optional[str], typer.Option("--secret-key", help="Object storage secret key")] = None,
    endpoint: Annotated[Optional[str], typer.Option("--endpoint", help="Object storage endpoint")] = None,
    no_verify_ssl: Annotated[bool, typer.Option("--no-verify-ssl", help="Disable SSL verification")] = False,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add a profile."""
    mgr = _get_manager()
    profile = Profile(
        name=name,
        api_key=api_key,
        region=region,
        base_url=base_url,
        access_key=access_key,
        secret_key=secret_key,
        object_storage_endpoint=endpoint,
        verify_ssl=not no_verify_ssl,
    )
    mgr.add_profile(profile)
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List all configured profiles."""
    mgr = _get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'mgc config init' to get started.[/]")
        return

    default = mgr.config.default_profile
    rows = []
    for name, p in profiles.items():
        rows.append([
            name,
            p.region,
            "yes" if p.api_key else "no",
            "yes" if p.storage_configured else "no",
            "*" if name == default else "",
        ])

    output(
        {"profiles": [
            {k: (_mask(v) if k in _SECRET_FIELDS and v else v)
             for k, v in p.model_dump(exclude_none=True).items()}
            for p in profiles.values()
        ]},
        fmt,
        columns=["Name", "Region", "API Key", "Storage", "Default"],
        rows=rows,
        title="Profiles",
    )


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show profile details with secrets masked."""
    mgr = _get_manager()
    profile = mgr.get_profile(name)
    if not profile:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    data = profile.model_dump(exclude_none=True)
    for field in _SECRET_FIELDS:
        if field in data:
            data[field] = _mask(data[field])

    output(data, fmt, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default profile."""
    mgr = _get_manager()
    if mgr.set_default(name):
        console.print(f"[green]Default profile set to '{name}'.[/]")
    else:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
) -> None:
    """Remove a profile."""
    mgr = _get_manager()
    if not mgr.get_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    if not force:
        if not Confirm.ask(f"Remove profile '{name}'?"):
            console.print("Cancelled.")
            return

    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
