"""Configuration manager: read/write TOML config, resolve profiles."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w

from mgc_sdk.client.errors import ConfigurationError
from mgc_sdk.config.constants import (
    CONFIG_FILE,
    DEFAULT_REGION,
    DEFAULT_TIMEOUT,
    ENV_ACCESS_KEY,
    ENV_API_KEY,
    ENV_PROFILE,
    ENV_REGION,
    ENV_SECRET_KEY,
)
from mgc_sdk.config.models import CLIConfig, Profile

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib

_MASKED_DEFAULTS: dict[str, Any] = {
    "region": DEFAULT_REGION,
    "timeout": DEFAULT_TIMEOUT,
    "verify_ssl": True,
}


class ConfigManager:
    """Manages CLI configuration on disk and resolves connection profiles."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        raw = self.config_path.read_bytes()
        data = tomllib.loads(raw.decode())
        profiles: dict[str, Profile] = {}
        for name, prof_data in data.get("profiles", {}).items():
            profiles[name] = Profile(name=name, **prof_data)
        return CLIConfig(
            default_profile=data.get("default_profile"),
            default_format=data.get("default_format", "table"),
            profiles=profiles,
        )

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        # Secure directory permissions (owner-only)
        os.chmod(self.config_path.parent, 0o700)
        data: dict[str, Any] = {}
        if self.config.default_profile:
            data["default_profile"] = self.config.default_profile
        if self.config.default_format != "table":
            data["default_format"] = self.config.default_format
        if self.config.profiles:
            data["profiles"] = {}
            for name, profile in self.config.profiles.items():
                prof_dict = profile.model_dump(
                    exclude={"name", "user_agent", "max_retries"}, exclude_none=True,
                )
                # Remove defaults to keep config clean
                for key, default in _MASKED_DEFAULTS.items():
                    if prof_dict.get(key) == default:
                        del prof_dict[key]
                data["profiles"][name] = prof_dict
        # Atomic write: write to temp file, then rename
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, tomli_w.dumps(data).encode())
        finally:
            os.close(fd)
        temp.replace(self.config_path)

    def add_profile(self, profile: Profile) -> None:
        self.config.profiles[profile.name] = profile
        if not self.config.default_profile:
            self.config.default_profile = profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        del self.config.profiles[name]
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def get_profile(self, name: str | None = None) -> Profile | None:
        if name:
            return self.config.profiles.get(name)
        default = self.config.default_profile
        if default:
            return self.config.profiles.get(default)
        return None

    def resolve_profile(
        self,
        profile_name: str | None = None,
        api_key: str | None = None,
        region: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
    ) -> Profile:
        """Resolve connection settings.

        Precedence: CLI flags > env vars > config profile.
        """
        env_profile = os.environ.get(ENV_PROFILE)
        wanted = profile_name or env_profile
        profile = self.get_profile(wanted)
        if wanted and profile is None:
            raise ConfigurationError(
                f"Profile '{wanted}' not found. Use 'mgc config list' to see profiles."
            )

        def pick(flag: str | None, env_name: str, attr: str) -> str | None:
            value = flag or os.environ.get(env_name)
            if value:
                return value
            return getattr(profile, attr) if profile else None

        if profile:
            base = profile.model_dump()
        else:
            base = {"name": "cli"}
        base.update(
            api_key=pick(api_key, ENV_API_KEY, "api_key"),
            region=pick(region, ENV_REGION, "region") or DEFAULT_REGION,
            access_key=pick(access_key, ENV_ACCESS_KEY, "access_key"),
            secret_key=pick(secret_key, ENV_SECRET_KEY, "secret_key"),
        )
        return Profile(**base)
