"""Python SDK for Magalu Cloud compute and object storage."""

__version__ = "0.1.0"
