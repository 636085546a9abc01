# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Client Builder - explicit settings merged with VAULT_* environment.

Each field resolves lazily when ``build()`` runs, in this order:

    1. the value passed to the matching setter
    2. the environment variable (VAULT_ADDRESS, VAULT_PORT, VAULT_TOKEN,
       VAULT_SECRET_PATH, VAULT_PROTOCOL)
    3. a default (address 127.0.0.1, port 8200, protocol http)

Token and secret path have no default. A builder is single-use: once
``build()`` has been called every further call raises
ProtocolConfigurationError.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

import httpx
from pydantic import SecretStr, ValidationError

from omnibase_vault.enums import EnumInfraTransportType, EnumVaultProtocol
from omnibase_vault.errors import (
    InfraUnavailableError,
    MissingRequiredFieldError,
    ModelInfraErrorContext,
    ProtocolConfigurationError,
)
from omnibase_vault.handlers.handler_vault_transport import VaultHttpTransport
from omnibase_vault.models import ModelVaultConfig
from omnibase_vault.utils import (
    parse_env_int,
    parse_env_str,
    summarize_validation_error,
)

if TYPE_CHECKING:
    from omnibase_vault.handlers.handler_vault import VaultClient

logger = logging.getLogger(__name__)

ENV_ADDRESS: str = "VAULT_ADDRESS"
ENV_PORT: str = "VAULT_PORT"
ENV_TOKEN: str = "VAULT_TOKEN"
ENV_SECRET_PATH: str = "VAULT_SECRET_PATH"
ENV_PROTOCOL: str = "VAULT_PROTOCOL"

DEFAULT_ADDRESS: str = "127.0.0.1"
DEFAULT_PORT: int = 8200
DEFAULT_PROTOCOL: EnumVaultProtocol = EnumVaultProtocol.HTTP

_MIN_PORT: int = 0
_MAX_PORT: int = 65535


class VaultConfigBuilder:
    """Chainable accumulator for Vault client settings.

    Example:
        >>> client = await (
        ...     VaultConfigBuilder()
        ...     .address("vault.internal")
        ...     .port(8200)
        ...     .token("hvs.example")
        ...     .secret_path("secret/data/app")
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._address: Optional[str] = None
        self._port: Optional[int] = None
        self._token: Optional[str] = None
        self._secret_path: Optional[str] = None
        self._protocol: Optional[str | EnumVaultProtocol] = None
        self._http_client: Optional[httpx.AsyncClient] = None
        self._verify_on_build: bool = False
        self._consumed: bool = False

    def _ensure_not_consumed(self, operation: str) -> None:
        if self._consumed:
            raise ProtocolConfigurationError(
                "VaultConfigBuilder has already been used to build a client",
                context=ModelInfraErrorContext(
                    transport_type=EnumInfraTransportType.VAULT,
                    operation=operation,
                    target_name="vault_config_builder",
                ),
            )

    def address(self, address: str) -> VaultConfigBuilder:
        self._ensure_not_consumed("address")
        self._address = address
        return self

    def port(self, port: int) -> VaultConfigBuilder:
        self._ensure_not_consumed("port")
        self._port = port
        return self

    def token(self, token: str) -> VaultConfigBuilder:
        self._ensure_not_consumed("token")
        self._token = token
        return self

    def secret_path(self, secret_path: str) -> VaultConfigBuilder:
        self._ensure_not_consumed("secret_path")
        self._secret_path = secret_path
        return self

    def protocol(self, protocol: str | EnumVaultProtocol) -> VaultConfigBuilder:
        """Set the URL scheme; validated at build time."""
        self._ensure_not_consumed("protocol")
        self._protocol = protocol
        return self

    def https(self) -> VaultConfigBuilder:
        return self.protocol(EnumVaultProtocol.HTTPS)

    def http_client(self, client: httpx.AsyncClient) -> VaultConfigBuilder:
        """Use a caller-owned client instead of creating a pool.

        The client is not closed when the Vault client shuts down.
        """
        self._ensure_not_consumed("http_client")
        self._http_client = client
        return self

    def verify_on_build(self, enabled: bool = True) -> VaultConfigBuilder:
        """Run a health check during ``build()`` and fail if Vault is not serving."""
        self._ensure_not_consumed("verify_on_build")
        self._verify_on_build = enabled
        return self

    def _resolve_protocol(self, ctx: ModelInfraErrorContext) -> EnumVaultProtocol:
        if isinstance(self._protocol, EnumVaultProtocol):
            return self._protocol
        raw = self._protocol
        source = "protocol()"
        if raw is None:
            raw = parse_env_str(ENV_PROTOCOL)
            source = ENV_PROTOCOL
        if raw is None:
            return DEFAULT_PROTOCOL
        try:
            return EnumVaultProtocol.parse(raw)
        except ValueError as e:
            raise ProtocolConfigurationError(
                f"Invalid protocol {raw!r} from {source}: expected 'http' or 'https'",
                context=ctx,
                source=source,
            ) from e

    def _resolve_config(self, correlation_id: UUID) -> ModelVaultConfig:
        """Merge explicit values, environment and defaults into a frozen config.

        Raises:
            ProtocolConfigurationError: For malformed or out-of-range values.
            MissingRequiredFieldError: If token or secret path is unresolved.
        """
        ctx = ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.VAULT,
            operation="build",
            target_name="vault_config_builder",
            correlation_id=correlation_id,
        )

        protocol = self._resolve_protocol(ctx)
        address = self._address
        if address is None:
            address = parse_env_str(ENV_ADDRESS, DEFAULT_ADDRESS)
        port = self._port
        if port is None:
            port = parse_env_int(
                ENV_PORT,
                DEFAULT_PORT,
                min_value=_MIN_PORT,
                max_value=_MAX_PORT,
            )

        token = self._token if self._token is not None else parse_env_str(ENV_TOKEN)
        if not token or not token.strip():
            raise MissingRequiredFieldError("token", ENV_TOKEN, context=ctx)
        secret_path = (
            self._secret_path
            if self._secret_path is not None
            else parse_env_str(ENV_SECRET_PATH)
        )
        if not secret_path or not secret_path.strip():
            raise MissingRequiredFieldError("secret_path", ENV_SECRET_PATH, context=ctx)

        try:
            return ModelVaultConfig(
                protocol=protocol,
                host=address,
                port=port,
                secret_path=secret_path,
                token=SecretStr(token),
            )
        except ValidationError as e:
            raise ProtocolConfigurationError(
                f"Invalid Vault configuration: {summarize_validation_error(e)}",
                context=ctx,
            ) from e

    async def build(self) -> VaultClient:
        """Resolve the configuration and return a ready client.

        Returns:
            A VaultClient owning a connection pool for the resolved protocol
            (or wrapping the injected HTTP client).

        Raises:
            ProtocolConfigurationError: On invalid configuration, reuse of the
                builder, or failure to set up the TLS pool.
            MissingRequiredFieldError: If token or secret path is unresolved.
            InfraUnavailableError: If verification is enabled and Vault is
                sealed, uninitialized or a DR secondary.
            InfraConnectionError: If verification is enabled and Vault cannot
                be reached.
        """
        from omnibase_vault.handlers.handler_vault import VaultClient

        self._ensure_not_consumed("build")
        self._consumed = True
        correlation_id = uuid4()

        config = self._resolve_config(correlation_id)
        transport = VaultHttpTransport(
            config.protocol,
            http_client=self._http_client,
            correlation_id=correlation_id,
        )
        client = VaultClient(config, transport)

        if self._verify_on_build:
            await self._verify(client, correlation_id)

        logger.info(
            "VaultClient initialized",
            extra={
                "url": config.base_url,
                "secret_path": config.secret_path,
                "protocol": config.protocol.value,
                "verified": self._verify_on_build,
                "correlation_id": str(correlation_id),
            },
        )
        return client

    async def _verify(self, client: VaultClient, correlation_id: UUID) -> None:
        # Close the pool on any failure, including cancellation
        checked = False
        try:
            status = await client.health_check(correlation_id)
            checked = True
        finally:
            if not checked:
                await client.shutdown()

        if not status.is_serving:
            await client.shutdown()
            raise InfraUnavailableError(
                f"Vault is not serving requests: {status.state.value}",
                context=ModelInfraErrorContext(
                    transport_type=EnumInfraTransportType.VAULT,
                    operation="verify_on_build",
                    target_name=client.config.health_url,
                    correlation_id=correlation_id,
                ),
                state=status.state.value,
                status_code=status.status_code,
            )


__all__: list[str] = [
    "DEFAULT_ADDRESS",
    "DEFAULT_PORT",
    "DEFAULT_PROTOCOL",
    "ENV_ADDRESS",
    "ENV_PORT",
    "ENV_PROTOCOL",
    "ENV_SECRET_PATH",
    "ENV_TOKEN",
    "VaultConfigBuilder",
]
