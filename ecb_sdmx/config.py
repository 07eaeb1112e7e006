"""
Client configuration and YAML I/O for ecb-sdmx.

``ClientConfig`` holds everything the Resource Fetcher needs to talk to
the service: base URL, user agent, timeout, the default language for
localized names, and the documentation pointer attached to HTTP errors.
The defaults target the public ECB Data Portal, so most callers never
touch this module.

Key functions:
- load_config(path) -> ClientConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ecb_sdmx.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://data-api.ecb.europa.eu/service/"
DEFAULT_USER_AGENT = "ecb-sdmx (https://github.com/ecb-sdmx/ecb-sdmx)"
DEFAULT_DOCS_URL = "https://data.ecb.europa.eu/help/api/status-codes"


class ClientConfig(BaseModel):
    """Settings for ``ecb_sdmx.client.Client``."""

    base_url: str = Field(DEFAULT_BASE_URL, description="Service root URL")
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent header")
    timeout: float = Field(60.0, gt=0, description="HTTP timeout in seconds")
    language: str = Field(
        "en", min_length=1, description="Language of localized names in metadata"
    )
    docs_url: str = Field(
        DEFAULT_DOCS_URL, description="Documentation pointer attached to HTTP errors"
    )

    @field_validator("base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        # Resource paths are appended, never joined with urljoin semantics
        return value if value.endswith("/") else value + "/"


def load_config(path: str | Path) -> ClientConfig:
    """Load and validate a YAML client config.

    Keys not present in the file fall back to the defaults.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigError: If the file is empty or fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    try:
        config = ClientConfig.model_validate(raw)
    except PydanticValidationError as exc:
        raise ConfigError(f"Invalid config in {path}:\n{exc}") from exc
    logger.info("Loaded config from %s", path)
    return config


def save_config(config: ClientConfig, path: str | Path) -> None:
    """Serialize a ClientConfig to YAML."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# ecb-sdmx client configuration\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)
