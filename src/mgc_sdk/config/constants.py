"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

from mgc_sdk import __version__

APP_NAME = "mgc-sdk"
APP_AUTHOR = "MagaluCloud"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_PROFILE = "MGC_PROFILE"
ENV_API_KEY = "MGC_API_KEY"
ENV_REGION = "MGC_REGION"
ENV_ACCESS_KEY = "MGC_ACCESS_KEY"
ENV_SECRET_KEY = "MGC_SECRET_KEY"

# API defaults
REGION_URLS = {
    "br-se1": "https://api.magalu.cloud/br-se1",
    "br-ne1": "https://api.magalu.cloud/br-ne1",
    "br-mgl1": "https://api.magalu.cloud/br-mgl1",
}
DEFAULT_REGION = "br-se1"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_USER_AGENT = f"mgc-sdk-python/{__version__}"
API_KEY_HEADER = "X-API-Key"

# Paginated listing
PAGE_SIZE = 50
