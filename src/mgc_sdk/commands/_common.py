"""Shared helpers for CLI commands: client factories and option types."""

from __future__ import annotations

from typing import Annotated

import typer

from mgc_sdk.client.core import CoreClient
from mgc_sdk.client.errors import ConfigurationError
from mgc_sdk.compute.client import VirtualMachineClient
from mgc_sdk.config.manager import ConfigManager
from mgc_sdk.config.models import Profile
from mgc_sdk.objectstorage.client import ObjectStorageClient

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Config profile"),
]
ApiKeyOpt = Annotated[
    str | None,
    typer.Option("--api-key", help="API key override"),
]
RegionOpt = Annotated[
    str | None,
    typer.Option("--region", help="Region override, e.g. br-se1"),
]
AccessKeyOpt = Annotated[
    str | None,
    typer.Option("--access-key", help="Object storage access key override"),
]
SecretKeyOpt = Annotated[
    str | None,
    typer.Option("--secret-key", help="Object storage secret key override"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: table, json, yaml, csv"),
]
LimitOpt = Annotated[
    int | None,
    typer.Option("--limit", help="Max items to return"),
]
OffsetOpt = Annotated[
    int | None,
    typer.Option("--offset", help="Offset for pagination"),
]


def resolve(
    profile: str | None,
    api_key: str | None = None,
    region: str | None = None,
    access_key: str | None = None,
    secret_key: str | None = None,
) -> Profile:
    return ConfigManager().resolve_profile(
        profile_name=profile,
        api_key=api_key,
        region=region,
        access_key=access_key,
        secret_key=secret_key,
    )


def make_compute_client(
    profile: str | None,
    api_key: str | None,
    region: str | None,
) -> VirtualMachineClient:
    """Create a VirtualMachineClient from CLI options, env vars, or config profile."""
    resolved = resolve(profile, api_key, region)
    return VirtualMachineClient(CoreClient(resolved))


def storage_endpoint(profile: Profile) -> str:
    return profile.object_storage_endpoint or f"https://{profile.region}.magaluobjects.com"


def make_storage_client(
    profile: str | None,
    api_key: str | None,
    region: str | None,
    access_key: str | None,
    secret_key: str | None,
) -> ObjectStorageClient:
    """Create an ObjectStorageClient; access and secret keys are required."""
    resolved = resolve(profile, api_key, region, access_key, secret_key)
    if not resolved.storage_configured:
        raise ConfigurationError(
            "Object storage needs an access key and a secret key. "
            "Use --access-key/--secret-key, MGC_ACCESS_KEY/MGC_SECRET_KEY "
            "or 'mgc config add'."
        )
    return ObjectStorageClient(
        CoreClient(resolved),
        resolved.access_key or "",
        resolved.secret_key or "",
        endpoint=storage_endpoint(resolved),
    )
