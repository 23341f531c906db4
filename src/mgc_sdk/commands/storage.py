"""Object storage commands: buckets, objects and presigned URLs."""

from __future__ import annotations

import mimetypes
from datetime import timedelta
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm

from mgc_sdk.client.errors import error_handler
from mgc_sdk.commands._common import (
    AccessKeyOpt,
    ApiKeyOpt,
    FormatOpt,
    LimitOpt,
    OffsetOpt,
    ProfileOpt,
    RegionOpt,
    SecretKeyOpt,
    make_storage_client,
)
from mgc_sdk.models.storage import ObjectListOptions
from mgc_sdk.output.formatter import output
from mgc_sdk.output.tables import model_rows

app = typer.Typer(name="storage", help="S3-compatible object storage.", no_args_is_help=True)
bucket_app = typer.Typer(name="bucket", help="Buckets.", no_args_is_help=True)
object_app = typer.Typer(name="object", help="Objects in a bucket.", no_args_is_help=True)

app.add_typer(bucket_app, name="bucket")
app.add_typer(object_app, name="object")

console = Console()

ForceOpt = Annotated[bool, typer.Option("--force", help="Skip confirmation")]

_OBJECT_FIELDS = ["key", "size", "last_modified", "content_type"]


# -- buckets ------------------------------------------------------------


@bucket_app.command("list")
@error_handler
def bucket_list(
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
    access_key: AccessKeyOpt = None,
    secret_key: SecretKeyOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List buckets."""
    with make_storage_client(profile, api_key, region, access_key, secret_key) as storage:
        buckets = storage.buckets.list()
    output(
        buckets, fmt,
        columns=["Name", "Created"],
        rows=model_rows(buckets, ["name", "creation_date"]),
        title="Buckets",
    )


@bucket_app.command("create")
@error_handler
def bucket_create(
    name: Annotated[str, typer.Argument(help="Bucket name")],
    object_lock: Annotated[bool, typer.Option("--object-lock", help="Enable object locking")] = False,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
    access_key: AccessKeyOpt = None,
    secret_key: SecretKeyOpt = None,
) -> None:
    """Create a bucket."""
    with make_storage_client(profile, api_key, region, access_key, secret_key) as storage:
        storage.buckets.create(name, object_lock=object_lock)
    console.print(f"[green]Bucket '{name}' created.[/]")


@bucket_app.command("delete")
@error_handler
def bucket_delete(
    name: Annotated[str, typer.Argument(help="Bucket name")],
    recursive: Annotated[bool, typer.Option("--recursive", "-r", help="Delete all objects first")] = False,
    force: ForceOpt = False,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
    access_key: AccessKeyOpt = None,
    secret_key: SecretKeyOpt = None,
) -> None:
    """Delete a bucket."""
    what = f"bucket '{name}'" + (" and all its objects" if recursive else "")
    if not force and not Confirm.ask(f"Delete {what}?"):
        console.print("Cancelled.")
        return
    with make_storage_client(profile, api_key, region, access_key, secret_key) as storage:
        storage.buckets.delete(name, recursive=recursive)
    console.print(f"[green]Bucket '{name}' deleted.[/]")


# -- objects ------------------------------------------------------------


@object_app.command("list")
@error_handler
def object_list(
    bucket: Annotated[str, typer.Argument(help="Bucket name")],
    prefix: Annotated[Optional[str], typer.Option("--prefix", help="Key prefix")] = None,
    recursive: Annotated[bool, typer.Option("--recursive", "-r", help="List nested keys")] = False,
    limit: LimitOpt = None,
    offset: OffsetOpt = None,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
    access_key: AccessKeyOpt = None,
    secret_key: SecretKeyOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List objects in a bucket."""
    opts = ObjectListOptions(prefix=prefix, recursive=recursive, limit=limit, offset=offset)
    with make_storage_client(profile, api_key, region, access_key, secret_key) as storage:
        objects = storage.objects.list(bucket, opts)
    output(
        objects, fmt,
        columns=["Key", "Size", "Last Modified", "Content Type"],
        rows=model_rows(objects, _OBJECT_FIELDS),
        title=f"Objects in {bucket}",
    )


@object_app.command("upload")
@error_handler
def object_upload(
    bucket: Annotated[str, typer.Argument(help="Bucket name")],
    path: Annotated[Path, typer.Argument(help="Local file", exists=True, dir_okay=False)],
    key: Annotated[Optional[str], typer.Option("--key", help="Object key (defaults to file name)")] = None,
    content_type: Annotated[Optional[str], typer.Option("--content-type")] = None,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
    access_key: AccessKeyOpt = None,
    secret_key: SecretKeyOpt = None,
) -> None:
    """Upload a local file."""
    key = key or path.name
    content_type = content_type or mimetypes.guess_type(path.name)[0]
    data = path.read_bytes()
    with make_storage_client(profile, api_key, region, access_key, secret_key) as storage:
        storage.objects.upload(bucket, key, data, content_type=content_type)
    console.print(f"[green]Uploaded {path} to {bucket}/{key} ({len(data)} bytes).[/]")


@object_app.command("download")
@error_handler
def object_download(
    bucket: Annotated[str, typer.Argument(help="Bucket name")],
    key: Annotated[str, typer.Argument(help="Object key")],
    dest: Annotated[Optional[Path], typer.Option("--output", "-o", help="Destination file")] = None,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
    access_key: AccessKeyOpt = None,
    secret_key: SecretKeyOpt = None,
) -> None:
    """Download an object to a local file."""
    dest = dest or Path(key.rsplit("/", 1)[-1])
    with make_storage_client(profile, api_key, region, access_key, secret_key) as storage:
        data = storage.objects.download(bucket, key)
    dest.write_bytes(data)
    console.print(f"[green]Downloaded {bucket}/{key} to {dest} ({len(data)} bytes).[/]")


@object_app.command("delete")
@error_handler
def object_delete(
    bucket: Annotated[str, typer.Argument(help="Bucket name")],
    key: Annotated[str, typer.Argument(help="Object key")],
    force: ForceOpt = False,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
    access_key: AccessKeyOpt = None,
    secret_key: SecretKeyOpt = None,
) -> None:
    """Delete an object."""
    if not force and not Confirm.ask(f"Delete {bucket}/{key}?"):
        console.print("Cancelled.")
        return
    with make_storage_client(profile, api_key, region, access_key, secret_key) as storage:
        storage.objects.delete(bucket, key)
    console.print(f"[green]Deleted {bucket}/{key}.[/]")


# -- presigned URLs -----------------------------------------------------


@app.command("presign")
@error_handler
def presign(
    method: Annotated[str, typer.Argument(help="GET, HEAD or PUT")],
    bucket: Annotated[str, typer.Argument(help="Bucket name")],
    key: Annotated[str, typer.Argument(help="Object key")],
    expiry: Annotated[int, typer.Option("--expiry", help="Validity in seconds", min=1)] = 3600,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
    access_key: AccessKeyOpt = None,
    secret_key: SecretKeyOpt = None,
) -> None:
    """Print a presigned URL for one object."""
    with make_storage_client(profile, api_key, region, access_key, secret_key) as storage:
        url = storage.presigner.generate_presigned_url(
            method, bucket, key, timedelta(seconds=expiry),
        )
    print(url)
