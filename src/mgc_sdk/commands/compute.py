"""Compute commands: images, custom images, instances, instance types, snapshots."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm

from mgc_sdk.client.errors import error_handler
from mgc_sdk.commands._common import (
    ApiKeyOpt,
    FormatOpt,
    LimitOpt,
    OffsetOpt,
    ProfileOpt,
    RegionOpt,
    make_compute_client,
)
from mgc_sdk.models.custom_image import (
    CreateCustomImageRequest,
    CustomImageListOptions,
)
from mgc_sdk.models.image import ImageFilterOptions, ImageListOptions
from mgc_sdk.models.instance import (
    INSTANCE_EXPAND_IMAGE,
    INSTANCE_EXPAND_MACHINE_TYPE,
    InstanceListOptions,
)
from mgc_sdk.models.instance_type import InstanceTypeFilterOptions
from mgc_sdk.models.snapshot import SnapshotListOptions
from mgc_sdk.output.formatter import output
from mgc_sdk.output.tables import model_rows

app = typer.Typer(name="compute", help="Virtual machines, images and snapshots.", no_args_is_help=True)
image_app = typer.Typer(name="image", help="Public machine images.", no_args_is_help=True)
custom_image_app = typer.Typer(name="custom-image", help="Custom images imported from a URL.", no_args_is_help=True)
instance_app = typer.Typer(name="instance", help="Virtual machine instances.", no_args_is_help=True)
instance_type_app = typer.Typer(name="instance-type", help="Machine types.", no_args_is_help=True)
snapshot_app = typer.Typer(name="snapshot", help="Instance snapshots.", no_args_is_help=True)

app.add_typer(image_app, name="image")
app.add_typer(custom_image_app, name="custom-image")
app.add_typer(instance_app, name="instance")
app.add_typer(instance_type_app, name="instance-type")
app.add_typer(snapshot_app, name="snapshot")

console = Console()

SortOpt = Annotated[Optional[str], typer.Option("--sort", help="Sort expression, e.g. name:asc")]
ForceOpt = Annotated[bool, typer.Option("--force", help="Skip confirmation")]

_IMAGE_FIELDS = ["id", "name", "version", "platform", "status"]
_CUSTOM_IMAGE_FIELDS = ["id", "name", "platform", "architecture", "status"]
_INSTANCE_FIELDS = ["id", "name", "status", "state", "machine_type.name", "image.name"]
_INSTANCE_TYPE_FIELDS = ["id", "name", "vcpus", "ram", "disk", "gpu", "status"]
_SNAPSHOT_FIELDS = ["id", "name", "status", "state", "size", "created_at"]


def _columns(fields: list[str]) -> list[str]:
    return [f.replace(".name", "").replace("_", " ").title() for f in fields]


def _confirm(what: str, force: bool) -> bool:
    if force or Confirm.ask(f"Delete {what}?"):
        return True
    console.print("Cancelled.")
    return False


# -- images -------------------------------------------------------------


@image_app.command("list")
@error_handler
def image_list(
    limit: LimitOpt = None,
    offset: OffsetOpt = None,
    sort: SortOpt = None,
    az: Annotated[Optional[str], typer.Option("--az", help="Availability zone")] = None,
    fetch_all: Annotated[bool, typer.Option("--all", help="Follow pagination")] = False,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List public machine images."""
    with make_compute_client(profile, api_key, region) as vm:
        if fetch_all:
            images = vm.images.list_all(ImageFilterOptions(sort=sort, availability_zone=az))
        else:
            opts = ImageListOptions(limit=limit, offset=offset, sort=sort, availability_zone=az)
            images = vm.images.list(opts).images
    output(
        images, fmt,
        columns=_columns(_IMAGE_FIELDS), rows=model_rows(images, _IMAGE_FIELDS), title="Images",
    )


# -- custom images ------------------------------------------------------


@custom_image_app.command("create")
@error_handler
def custom_image_create(
    name: Annotated[str, typer.Argument(help="Image name")],
    url: Annotated[str, typer.Option("--url", help="URL of the disk image file")],
    platform: Annotated[str, typer.Option("--platform", help="linux or windows")] = "linux",
    architecture: Annotated[str, typer.Option("--architecture", help="CPU architecture")] = "x86/64",
    license_: Annotated[str, typer.Option("--license", help="licensed or unlicensed")] = "unlicensed",
    description: Annotated[Optional[str], typer.Option("--description")] = None,
    version: Annotated[Optional[str], typer.Option("--version")] = None,
    uefi: Annotated[Optional[bool], typer.Option("--uefi/--no-uefi")] = None,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
) -> None:
    """Import a custom image from a disk file URL."""
    req = CreateCustomImageRequest(
        name=name,
        url=url,
        platform=platform,
        architecture=architecture,
        license=license_,
        description=description,
        version=version,
        uefi=uefi,
    )
    with make_compute_client(profile, api_key, region) as vm:
        image_id = vm.custom_images.create(req)
    console.print(f"[green]Custom image '{name}' created:[/] {image_id}")


@custom_image_app.command("show")
@error_handler
def custom_image_show(
    image_id: Annotated[str, typer.Argument(help="Custom image ID")],
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a custom image."""
    with make_compute_client(profile, api_key, region) as vm:
        image = vm.custom_images.get(image_id)
    output(image, fmt, title=f"Custom image: {image.name}")


@custom_image_app.command("list")
@error_handler
def custom_image_list(
    limit: LimitOpt = None,
    offset: OffsetOpt = None,
    sort: SortOpt = None,
    fetch_all: Annotated[bool, typer.Option("--all", help="Follow pagination")] = False,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List custom images."""
    with make_compute_client(profile, api_key, region) as vm:
        if fetch_all:
            images = vm.custom_images.list_all()
        else:
            opts = CustomImageListOptions(limit=limit, offset=offset, sort=sort)
            images = vm.custom_images.list(opts).images
    output(
        images, fmt,
        columns=_columns(_CUSTOM_IMAGE_FIELDS),
        rows=model_rows(images, _CUSTOM_IMAGE_FIELDS),
        title="Custom images",
    )


@custom_image_app.command("delete")
@error_handler
def custom_image_delete(
    image_id: Annotated[str, typer.Argument(help="Custom image ID")],
    force: ForceOpt = False,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
) -> None:
    """Delete a custom image."""
    if not _confirm(f"custom image '{image_id}'", force):
        return
    with make_compute_client(profile, api_key, region) as vm:
        vm.custom_images.delete(image_id)
    console.print(f"[green]Custom image '{image_id}' deleted.[/]")


# -- instances ----------------------------------------------------------


@instance_app.command("list")
@error_handler
def instance_list(
    limit: LimitOpt = None,
    offset: OffsetOpt = None,
    sort: SortOpt = None,
    name: Annotated[Optional[str], typer.Option("--name", help="Filter by name")] = None,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List instances."""
    opts = InstanceListOptions(
        limit=limit,
        offset=offset,
        sort=sort,
        name=name,
        expand=[INSTANCE_EXPAND_MACHINE_TYPE, INSTANCE_EXPAND_IMAGE],
    )
    with make_compute_client(profile, api_key, region) as vm:
        instances = vm.instances.list(opts).instances
    output(
        instances, fmt,
        columns=_columns(_INSTANCE_FIELDS),
        rows=model_rows(instances, _INSTANCE_FIELDS),
        title="Instances",
    )


@instance_app.command("show")
@error_handler
def instance_show(
    instance_id: Annotated[str, typer.Argument(help="Instance ID")],
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show an instance."""
    with make_compute_client(profile, api_key, region) as vm:
        instance = vm.instances.get(
            instance_id, expand=[INSTANCE_EXPAND_MACHINE_TYPE, INSTANCE_EXPAND_IMAGE],
        )
    output(instance, fmt, title=f"Instance: {instance.name or instance.id}")


@instance_app.command("delete")
@error_handler
def instance_delete(
    instance_id: Annotated[str, typer.Argument(help="Instance ID")],
    delete_public_ip: Annotated[bool, typer.Option("--delete-public-ip", help="Release the public IP")] = False,
    force: ForceOpt = False,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
) -> None:
    """Delete an instance."""
    if not _confirm(f"instance '{instance_id}'", force):
        return
    with make_compute_client(profile, api_key, region) as vm:
        vm.instances.delete(instance_id, delete_public_ip)
    console.print(f"[green]Instance '{instance_id}' deleted.[/]")


@instance_app.command("start")
@error_handler
def instance_start(
    instance_id: Annotated[str, typer.Argument(help="Instance ID")],
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
) -> None:
    """Start a stopped instance."""
    with make_compute_client(profile, api_key, region) as vm:
        vm.instances.start(instance_id)
    console.print(f"[green]Instance '{instance_id}' starting.[/]")


@instance_app.command("stop")
@error_handler
def instance_stop(
    instance_id: Annotated[str, typer.Argument(help="Instance ID")],
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
) -> None:
    """Stop a running instance."""
    with make_compute_client(profile, api_key, region) as vm:
        vm.instances.stop(instance_id)
    console.print(f"[green]Instance '{instance_id}' stopping.[/]")


# -- instance types -----------------------------------------------------


@instance_type_app.command("list")
@error_handler
def instance_type_list(
    az: Annotated[Optional[str], typer.Option("--az", help="Availability zone")] = None,
    sort: SortOpt = None,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List every machine type."""
    with make_compute_client(profile, api_key, region) as vm:
        types = vm.instance_types.list_all(
            InstanceTypeFilterOptions(sort=sort, availability_zone=az),
        )
    output(
        types, fmt,
        columns=_columns(_INSTANCE_TYPE_FIELDS),
        rows=model_rows(types, _INSTANCE_TYPE_FIELDS),
        title="Instance types",
    )


# -- snapshots ----------------------------------------------------------


@snapshot_app.command("list")
@error_handler
def snapshot_list(
    limit: LimitOpt = None,
    offset: OffsetOpt = None,
    sort: SortOpt = None,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List snapshots."""
    with make_compute_client(profile, api_key, region) as vm:
        snapshots = vm.snapshots.list(
            SnapshotListOptions(limit=limit, offset=offset, sort=sort),
        ).snapshots
    output(
        snapshots, fmt,
        columns=_columns(_SNAPSHOT_FIELDS),
        rows=model_rows(snapshots, _SNAPSHOT_FIELDS),
        title="Snapshots",
    )


@snapshot_app.command("show")
@error_handler
def snapshot_show(
    snapshot_id: Annotated[str, typer.Argument(help="Snapshot ID")],
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a snapshot."""
    with make_compute_client(profile, api_key, region) as vm:
        snapshot = vm.snapshots.get(snapshot_id)
    output(snapshot, fmt, title=f"Snapshot: {snapshot.name or snapshot.id}")


@snapshot_app.command("delete")
@error_handler
def snapshot_delete(
    snapshot_id: Annotated[str, typer.Argument(help="Snapshot ID")],
    force: ForceOpt = False,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    region: RegionOpt = None,
) -> None:
    """Delete a snapshot."""
    if not _confirm(f"snapshot '{snapshot_id}'", force):
        return
    with make_compute_client(profile, api_key, region) as vm:
        vm.snapshots.delete(snapshot_id)
    console.print(f"[green]Snapshot '{snapshot_id}' deleted.[/]")
