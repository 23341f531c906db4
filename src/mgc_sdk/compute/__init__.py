"""Magalu Cloud compute: instances, images, instance types and snapshots."""

from mgc_sdk.compute.client import VirtualMachineClient

__all__ = ["VirtualMachineClient"]
