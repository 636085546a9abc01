# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HashiCorp Vault Client - read-only secret retrieval over httpx.

Supports a health check and secret reads from the KV v1 and KV v2 secret
engines, decoding each secret into a caller-supplied type.

Security Features:
    - SecretStr protection for the token (never logged or put in errors)
    - Sanitized Vault error strings in exception messages
    - TLS verification against the platform trust store for https

Request Flow:
    config -> URL + X-Vault-Token -> VaultHttpTransport.get
    -> vault_response_classifier -> util_secret_decoding -> caller type

Every operation is read-only and idempotent. One client may be shared by
any number of concurrent tasks; the only shared state is the connection
pool owned by the transport.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING, TypeVar
from uuid import UUID, uuid4

from omnibase_vault.enums import EnumInfraTransportType, EnumVaultProtocol
from omnibase_vault.errors import ModelInfraErrorContext
from omnibase_vault.handlers.handler_vault_transport import VaultHttpTransport
from omnibase_vault.handlers.vault_response_classifier import (
    classify_health_response,
    classify_response,
)
from omnibase_vault.models import (
    ModelVaultConfig,
    ModelVaultHealthStatus,
    ModelVaultKvV2Secret,
)
from omnibase_vault.utils import (
    decode_secret,
    decode_secret_v2,
    decode_secret_v2_with_metadata,
)

if TYPE_CHECKING:
    from omnibase_vault.handlers.builder_vault_config import VaultConfigBuilder

T = TypeVar("T")

logger = logging.getLogger(__name__)


class VaultClient:
    """Async client for reading secrets from HashiCorp Vault.

    Instances are normally produced by ``VaultClient.builder().build()`` or
    ``VaultClient.connect(...)``.

    Example:
        >>> client = await (
        ...     VaultClient.builder()
        ...     .address("vault.example.com")
        ...     .https()
        ...     .secret_path("secret/data/app")
        ...     .build()
        ... )
        >>> async with client:
        ...     creds = await client.get_secret_v2(DatabaseCredentials)
    """

    def __init__(self, config: ModelVaultConfig, transport: VaultHttpTransport) -> None:
        self._config = config
        self._transport = transport

    @classmethod
    def builder(cls) -> VaultConfigBuilder:
        """Return a fresh builder; unset fields fall back to VAULT_* variables."""
        from omnibase_vault.handlers.builder_vault_config import VaultConfigBuilder

        return VaultConfigBuilder()

    @classmethod
    async def connect(
        cls,
        protocol: str | EnumVaultProtocol,
        address: str,
        port: int,
        token: str,
        secret_path: str,
    ) -> VaultClient:
        """Build a client from explicit settings.

        Equivalent to calling every builder setter followed by ``build()``.
        """
        return await (
            cls.builder()
            .protocol(protocol)
            .address(address)
            .port(port)
            .token(token)
            .secret_path(secret_path)
            .build()
        )

    @property
    def config(self) -> ModelVaultConfig:
        return self._config

    @property
    def transport(self) -> VaultHttpTransport:
        return self._transport

    def _error_context(
        self, operation: str, target_name: str, correlation_id: UUID
    ) -> ModelInfraErrorContext:
        return ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.VAULT,
            operation=operation,
            target_name=target_name,
            correlation_id=correlation_id,
        )

    async def health_check(
        self, correlation_id: UUID | None = None
    ) -> ModelVaultHealthStatus:
        """Query ``/v1/sys/health`` and report the node state.

        Sealed, standby, DR secondary and uninitialized nodes are returned as
        states rather than raised.

        Args:
            correlation_id: Optional correlation ID (generated when omitted)

        Returns:
            ModelVaultHealthStatus for 200/429/472/473/501/503.

        Raises:
            InfraConnectionError: If the request fails at the transport level.
            VaultStatusError: For any other status (e.g. 403, 404).
        """
        correlation_id = correlation_id or uuid4()
        url = self._config.health_url
        response = await self._transport.get(
            url,
            self._config.token.get_secret_value(),
            correlation_id,
            operation="health_check",
        )
        status = classify_health_response(
            response, self._error_context("health_check", url, correlation_id)
        )
        logger.debug(
            "Vault health check completed",
            extra={
                "state": status.state.value,
                "status_code": status.status_code,
                "correlation_id": str(correlation_id),
            },
        )
        return status

    async def _read_secret_body(
        self, operation: str, correlation_id: UUID
    ) -> tuple[bytes, ModelInfraErrorContext]:
        url = self._config.secret_url
        ctx = self._error_context(operation, url, correlation_id)
        response = await self._transport.get(
            url,
            self._config.token.get_secret_value(),
            correlation_id,
            operation=operation,
        )
        body = classify_response(response, ctx)
        logger.debug(
            "Retrieved secret from Vault",
            extra={
                "secret_path": self._config.secret_path,
                "operation": operation,
                "correlation_id": str(correlation_id),
            },
        )
        return body, ctx

    async def get_secret(
        self, secret_type: type[T], correlation_id: UUID | None = None
    ) -> T:
        """Read the configured path from a KV v1 engine.

        The whole response body is decoded as ``secret_type``.

        Args:
            secret_type: Type to decode the secret into
            correlation_id: Optional correlation ID (generated when omitted)

        Raises:
            InfraConnectionError: If the request fails at the transport level.
            VaultStatusError: If Vault answers with any status other than 200.
            VaultDecodeError: If the body does not match ``secret_type``.
        """
        body, ctx = await self._read_secret_body(
            "get_secret", correlation_id or uuid4()
        )
        return decode_secret(body, secret_type, ctx)

    async def get_secret_v2(
        self, secret_type: type[T], correlation_id: UUID | None = None
    ) -> T:
        """Read the configured path from a KV v2 engine.

        The body is unwrapped to its ``data.data`` value before decoding.

        Raises:
            InfraConnectionError: If the request fails at the transport level.
            VaultStatusError: If Vault answers with any status other than 200.
            VaultDecodeError: If ``data.data`` is missing or does not match
                ``secret_type``.
        """
        body, ctx = await self._read_secret_body(
            "get_secret_v2", correlation_id or uuid4()
        )
        return decode_secret_v2(body, secret_type, ctx)

    async def get_secret_v2_with_metadata(
        self, secret_type: type[T], correlation_id: UUID | None = None
    ) -> ModelVaultKvV2Secret[T]:
        """Like ``get_secret_v2`` but also returns the KV v2 version metadata."""
        body, ctx = await self._read_secret_body(
            "get_secret_v2_with_metadata", correlation_id or uuid4()
        )
        return decode_secret_v2_with_metadata(body, secret_type, ctx)

    async def shutdown(self) -> None:
        """Close the connection pool (injected HTTP clients are left open)."""
        await self._transport.shutdown()
        logger.info(
            "VaultClient shutdown complete",
            extra={"url": self._config.base_url},
        )

    async def __aenter__(self) -> VaultClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.shutdown()

    def __repr__(self) -> str:
        return (
            f"VaultClient(url={self._config.base_url!r}, "
            f"secret_path={self._config.secret_path!r})"
        )


__all__: list[str] = ["VaultClient"]
