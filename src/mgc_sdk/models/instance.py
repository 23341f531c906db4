"""Virtual machine instance models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mgc_sdk.models.common import IDOrName, Meta, PageOptions, SortOptions

INSTANCE_EXPAND_IMAGE = "image"
INSTANCE_EXPAND_MACHINE_TYPE = "machine-type"
INSTANCE_EXPAND_NETWORK = "network"


class InstanceMachineType(BaseModel):
    id: str
    name: str | None = None
    vcpus: int | None = None
    ram: int | None = None
    disk: int | None = None


class InstanceImage(BaseModel):
    id: str
    name: str | None = None
    platform: str | None = None


class IPAddress(BaseModel):
    private_ipv4: str | None = None
    public_ipv4: str | None = None
    public_ipv6: str | None = None


class NetworkInterface(BaseModel):
    id: str
    name: str | None = None
    primary: bool | None = None
    associated_public_ipv4: str | None = None
    ip_addresses: IPAddress | None = None
    security_groups: list[str] | None = None


class InstanceNetwork(BaseModel):
    vpc: IDOrName | None = None
    interfaces: list[NetworkInterface] | None = None


class InstanceError(BaseModel):
    message: str | None = None
    slug: str | None = None


class Instance(BaseModel):
    """A virtual machine instance."""

    id: str
    name: str | None = None
    status: str
    state: str
    created_at: str | None = None
    updated_at: str | None = None
    ssh_key_name: str | None = None
    availability_zone: str | None = None
    machine_type: InstanceMachineType | None = None
    image: InstanceImage | None = None
    network: InstanceNetwork | None = None
    labels: list[str] | None = None
    user_data: str | None = None
    error: InstanceError | None = None


class InstanceList(BaseModel):
    meta: Meta = Field(default_factory=Meta)
    instances: list[Instance] = Field(default_factory=list)


class InstanceListOptions(PageOptions):
    expand: list[str] | None = None
    name: str | None = None


class InstanceFilterOptions(SortOptions):
    expand: list[str] | None = None
    name: str | None = None


class CreateInstanceInterface(BaseModel):
    security_groups: list[IDOrName] | None = None


class CreateInstanceNetwork(BaseModel):
    associate_public_ip: bool | None = None
    vpc: IDOrName | None = None
    interface: CreateInstanceInterface | None = None


class CreateInstanceRequest(BaseModel):
    """Body of ``POST /v1/instances``."""

    name: str
    machine_type: IDOrName
    image: IDOrName
    ssh_key_name: str | None = None
    availability_zone: str | None = None
    network: CreateInstanceNetwork | None = None
    user_data: str | None = None
    labels: list[str] | None = None


class RenameRequest(BaseModel):
    name: str


class RetypeRequest(BaseModel):
    machine_type: IDOrName
