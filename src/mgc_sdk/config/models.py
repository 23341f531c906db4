"""Pydantic models for SDK and CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from mgc_sdk.config.constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_REGION,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    REGION_URLS,
)


class ClientConfig(BaseModel):
    """Connection settings for the Magalu Cloud REST API."""

    api_key: str | None = Field(default=None, description="API key (X-API-Key)")
    region: str = Field(default=DEFAULT_REGION, description="Region, e.g. br-se1")
    base_url: str | None = Field(
        default=None, description="Override the regional API URL",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )
    max_retries: int = Field(
        default=DEFAULT_MAX_RETRIES, ge=0, le=10,
        description="Connection retries performed by the transport",
    )
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    user_agent: str = Field(default=DEFAULT_USER_AGENT)

    @field_validator("region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        if v not in REGION_URLS:
            known = ", ".join(REGION_URLS)
            raise ValueError(f"Unknown region '{v}' (expected one of: {known})")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def url(self) -> str:
        """Effective API base URL."""
        return self.base_url or REGION_URLS[self.region]


class Profile(ClientConfig):
    """A named connection profile stored in the CLI config file."""

    name: str
    access_key: str | None = Field(default=None, description="Object storage access key")
    secret_key: str | None = Field(default=None, description="Object storage secret key")
    object_storage_endpoint: str | None = Field(
        default=None, description="Object storage endpoint URL",
    )

    @property
    def storage_configured(self) -> bool:
        return bool(self.access_key) and bool(self.secret_key)


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    default_format: str = "table"
    profiles: dict[str, Profile] = Field(default_factory=dict)
