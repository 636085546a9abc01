# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Client Configuration Model.

This module provides the frozen Pydantic model produced by VaultConfigBuilder.

Security Note:
    The token field uses SecretStr to prevent accidental logging of
    sensitive credentials. ``repr()`` and ``model_dump()`` never reveal it;
    only the transport reads it through ``get_secret_value()``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from omnibase_vault.enums import EnumVaultProtocol

HEALTH_ENDPOINT_PATH: str = "sys/health"
API_VERSION_PREFIX: str = "v1"

_URL_DELIMITERS: tuple[str, ...] = ("?", "#")


class ModelVaultConfig(BaseModel):
    """Resolved connection settings for a Vault client.

    Port 0 is accepted; a usable port is the caller's responsibility.

    Attributes:
        protocol: URL scheme (default http)
        host: Vault host name or IP address
        port: TCP port (0-65535)
        secret_path: Path under ``/v1/`` to read, e.g. ``secret/data/app``
        token: Vault token sent as ``X-Vault-Token``

    Example:
        >>> config = ModelVaultConfig(
        ...     protocol=EnumVaultProtocol.HTTPS,
        ...     host="vault.example.com",
        ...     port=8200,
        ...     secret_path="secret/data/app",
        ...     token=SecretStr("hvs.example"),
        ... )
        >>> config.secret_url
        'https://vault.example.com:8200/v1/secret/data/app'
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="forbid",
    )

    protocol: EnumVaultProtocol = Field(
        default=EnumVaultProtocol.HTTP,
        description="URL scheme used to reach Vault",
    )
    host: str = Field(
        min_length=1,
        description="Vault host name or IP address",
    )
    port: int = Field(
        ge=0,
        le=65535,
        description="Vault TCP port",
    )
    secret_path: str = Field(
        description="Secret path relative to /v1/",
    )
    token: SecretStr = Field(
        description="Vault token (SecretStr, never logged)",
    )

    @field_validator("secret_path")
    @classmethod
    def _normalize_secret_path(cls, value: str) -> str:
        path = value.strip().lstrip("/")
        if not path:
            raise ValueError("secret_path must not be empty")
        if any(char in path for char in _URL_DELIMITERS):
            raise ValueError("secret_path must not contain '?' or '#'")
        return path

    @field_validator("token")
    @classmethod
    def _require_token(cls, value: SecretStr) -> SecretStr:
        token = value.get_secret_value()
        if not token.strip():
            raise ValueError("token must not be empty")
        # Sent verbatim as an HTTP header value
        if not (token.isascii() and token.isprintable()):
            raise ValueError("token must contain only printable ASCII characters")
        return value

    @property
    def base_url(self) -> str:
        """Scheme, host and port, with IPv6 literals bracketed."""
        host = self.host
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        return f"{self.protocol.value}://{host}:{self.port}"

    @property
    def secret_url(self) -> str:
        return f"{self.base_url}/{API_VERSION_PREFIX}/{self.secret_path}"

    @property
    def health_url(self) -> str:
        return f"{self.base_url}/{API_VERSION_PREFIX}/{HEALTH_ENDPOINT_PATH}"


__all__: list[str] = ["ModelVaultConfig"]
