"""
Plugin configuration using Pydantic Settings.

This module provides typed and validated settings for the purchase adapter,
with support for environment variables, .env files and JSON config files.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal
from urllib.parse import urlparse

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

# Namespace under which items are registered with the market host
DEFAULT_NAMESPACE = "pointmintmarket-pic"
# Request timeout bounds, in milliseconds
DEFAULT_TIMEOUT_MS = 5000
MIN_TIMEOUT_MS = 1000
DEFAULT_PRICE = 10


class ApiEntry(BaseModel):
    """
    One configured good backed by an HTTP endpoint.

    Covers both configuration shapes: the basic one (name, description,
    tags, url, method, response) and the rich one that adds id, price
    and stock.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str | None = Field(default=None, description="Item identifier (optional)")
    name: str = Field(min_length=1, description="Item name (unique)")
    description: str = Field(default="", description="Item description")
    tags: list[str] = Field(default_factory=list, description="Keyword tags")
    price: float = Field(default=DEFAULT_PRICE, ge=1, description="Item price")
    stock: int | None = Field(default=None, ge=0, description="Available stock")
    url: str = Field(description="Full API request URL")
    method: Literal["GET", "POST"] = Field(default="GET", description="HTTP method")
    response: str = Field(
        default="",
        description="JSONPath to the image URL; empty sends the URL itself as the image",
    )

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, v: object) -> object:
        """Accept lowercase method names."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an absolute http(s) URL."""
        v = v.strip()
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            msg = f"url must be an absolute http(s) URL, got {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("response")
    @classmethod
    def strip_response(cls, v: str) -> str:
        """Treat a whitespace-only path as empty."""
        return v.strip()

    @property
    def extracts(self) -> bool:
        """Check if a JSONPath extraction is configured."""
        return bool(self.response)

    @property
    def key(self) -> str:
        """Return the key the market host stores this item under."""
        return self.id if self.id is not None else self.name


class Settings(BaseSettings):
    """
    Purchase adapter settings.

    Values come from keyword arguments, ``PICMARKET_*`` environment
    variables or a .env file. ``api_list`` is read from the environment
    as a JSON array and also accepts the camelCase key ``apiList``.
    """

    model_config = SettingsConfigDict(
        env_prefix="PICMARKET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    timeout: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        ge=MIN_TIMEOUT_MS,
        description="HTTP request timeout in milliseconds",
    )
    # Aliases replace the env prefix for this field, so the env name is listed too
    api_list: list[ApiEntry] = Field(
        default_factory=list,
        validation_alias=AliasChoices("api_list", "apiList", "PICMARKET_API_LIST"),
        description="Configured API items",
    )
    debug: bool = Field(default=False, description="Enable debug logging")
    namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        min_length=1,
        description="Market namespace owning the registered items",
    )
    log_json: bool = Field(default=False, description="Render logs as JSON")

    @model_validator(mode="after")
    def check_unique_names(self) -> Settings:
        """Reject configurations with duplicate item names or host keys."""
        names = [entry.name for entry in self.api_list]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            msg = f"Duplicate item names in api_list: {', '.join(duplicates)}"
            raise ValueError(msg)
        keys = [entry.key for entry in self.api_list]
        duplicate_keys = sorted({key for key in keys if keys.count(key) > 1})
        if duplicate_keys:
            msg = f"Duplicate item keys in api_list: {', '.join(duplicate_keys)}"
            raise ValueError(msg)
        return self

    @property
    def log_level(self) -> str:
        """Return the log level implied by the debug flag."""
        return "DEBUG" if self.debug else "INFO"

    def get_entry(self, name: str) -> ApiEntry | None:
        """Find a configured entry by name."""
        for entry in self.api_list:
            if entry.name == name:
                return entry
        return None


def load_settings(path: str | Path) -> Settings:
    """
    Load settings from a JSON file.

    The file uses the same keys as the environment (without prefix);
    ``apiList`` and ``api_list`` are both accepted.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        Validated Settings instance.
    """
    data: dict[str, Any] = json.loads(Path(path).read_text(encoding="utf-8"))
    return Settings(**data)
