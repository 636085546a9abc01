# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault HTTP Transport - pooled GET requests using httpx async client.

Performs a single authenticated GET per call and returns the raw status and
body. Classification of the status code happens in the caller; this layer
only turns transport failures (DNS, connect, TLS, read) into
InfraConnectionError. There is no retry and no per-request timeout.

Security Features:
    - TLS certificates verified against the platform trust store
    - The token is sent only as the X-Vault-Token header and never logged
    - Response bodies are read with a streaming size cap
"""

from __future__ import annotations

import logging
import ssl
from uuid import UUID

import httpx

from omnibase_vault.enums import EnumInfraTransportType, EnumVaultProtocol
from omnibase_vault.errors import (
    InfraConnectionError,
    ModelInfraErrorContext,
    ProtocolConfigurationError,
)
from omnibase_vault.models import ModelVaultHttpResponse

logger = logging.getLogger(__name__)

VAULT_TOKEN_HEADER: str = "X-Vault-Token"

# Idle pooled connections are evicted after this many seconds
_IDLE_CONNECTION_EXPIRY_SECONDS: float = 90.0
_DEFAULT_MAX_RESPONSE_SIZE: int = 10 * 1024 * 1024  # 10 MB
_STREAMING_CHUNK_SIZE: int = 8192  # 8 KB chunks


def create_pooled_client(protocol: EnumVaultProtocol) -> httpx.AsyncClient:
    """Create the connection pool used for one client instance.

    HTTPS pools verify certificates with ``ssl.create_default_context()``,
    which loads the platform's default CA store.
    """
    verify: ssl.SSLContext | bool = True
    if protocol.uses_tls:
        verify = ssl.create_default_context()
    return httpx.AsyncClient(
        verify=verify,
        timeout=httpx.Timeout(None),
        limits=httpx.Limits(keepalive_expiry=_IDLE_CONNECTION_EXPIRY_SECONDS),
        follow_redirects=False,
    )


class VaultHttpTransport:
    """Authenticated GET requests against a pooled httpx.AsyncClient.

    The pool is safe for any number of concurrent callers; this class holds
    no per-request state.

    Client Ownership:
        When ``http_client`` is None a pool is created for the resolved
        protocol and closed by ``shutdown()``. An injected client stays owned
        by the caller and is left open.
    """

    def __init__(
        self,
        protocol: EnumVaultProtocol,
        http_client: httpx.AsyncClient | None = None,
        max_response_size: int = _DEFAULT_MAX_RESPONSE_SIZE,
        correlation_id: UUID | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            protocol: Resolved URL scheme; selects plain or TLS pooling
            http_client: Optional caller-owned client
            max_response_size: Maximum accepted body size in bytes
            correlation_id: Correlation ID of the build that creates the pool

        Raises:
            ProtocolConfigurationError: If the pool or TLS context cannot be
                created.
        """
        self._protocol = protocol
        self._max_response_size = max_response_size
        if http_client is not None:
            self._client = http_client
            self._owns_http_client = False
            return

        try:
            self._client = create_pooled_client(protocol)
        except Exception as e:
            ctx = ModelInfraErrorContext.with_correlation(
                correlation_id,
                transport_type=EnumInfraTransportType.HTTP,
                operation="initialize",
                target_name="vault_http_transport",
            )
            raise ProtocolConfigurationError(
                f"Failed to initialize {protocol.value} connection pool: "
                f"{type(e).__name__}",
                context=ctx,
            ) from e
        self._owns_http_client = True

    @property
    def protocol(self) -> EnumVaultProtocol:
        return self._protocol

    @property
    def owns_http_client(self) -> bool:
        return self._owns_http_client

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def get(
        self,
        url: str,
        token: str,
        correlation_id: UUID,
        operation: str = "http.get",
    ) -> ModelVaultHttpResponse:
        """Send one GET and return the raw status and body.

        Args:
            url: Absolute request URL
            token: Vault token for the X-Vault-Token header
            correlation_id: Correlation ID for tracing
            operation: Operation name recorded in error context

        Raises:
            InfraConnectionError: On any transport failure or oversized body.
            ProtocolConfigurationError: If the token cannot be sent as a header.
        """
        ctx = ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.HTTP,
            operation=operation,
            target_name=url,
            correlation_id=correlation_id,
        )
        headers = {VAULT_TOKEN_HEADER: token, "Accept": "application/json"}

        logger.debug(
            "Sending Vault request",
            extra={
                "url": url,
                "operation": operation,
                "correlation_id": str(correlation_id),
            },
        )
        try:
            async with self._client.stream("GET", url, headers=headers) as response:
                self._validate_content_length_header(response, ctx)
                body = await self._read_response_body_with_limit(response, ctx)
                status_code = response.status_code
        except httpx.ConnectError as e:
            raise InfraConnectionError(
                f"Failed to connect to Vault at {url}", context=ctx
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise InfraConnectionError(
                f"HTTP error during Vault request: {type(e).__name__}", context=ctx
            ) from e
        except UnicodeEncodeError as e:
            # httpx encodes header values as ASCII
            raise ProtocolConfigurationError(
                "Vault token contains characters not allowed in an HTTP header",
                context=ctx,
            ) from e

        logger.debug(
            "Vault response received",
            extra={
                "status_code": status_code,
                "body_size": len(body),
                "correlation_id": str(correlation_id),
            },
        )
        return ModelVaultHttpResponse(status_code=status_code, body=body)

    def _validate_content_length_header(
        self, response: httpx.Response, ctx: ModelInfraErrorContext
    ) -> None:
        """Reject oversized responses before reading the body."""
        content_length_header = response.headers.get("content-length")
        if content_length_header is None:
            return
        try:
            content_length = int(content_length_header)
        except ValueError:
            # Fall back to the streaming check
            return
        if content_length > self._max_response_size:
            raise InfraConnectionError(
                "Vault response Content-Length exceeds configured limit",
                context=ctx,
                max_response_size=self._max_response_size,
            )

    async def _read_response_body_with_limit(
        self, response: httpx.Response, ctx: ModelInfraErrorContext
    ) -> bytes:
        """Read the body in chunks, stopping once the size cap is exceeded."""
        chunks: list[bytes] = []
        total_size = 0
        async for chunk in response.aiter_bytes(chunk_size=_STREAMING_CHUNK_SIZE):
            total_size += len(chunk)
            if total_size > self._max_response_size:
                raise InfraConnectionError(
                    "Vault response body exceeds configured limit",
                    context=ctx,
                    max_response_size=self._max_response_size,
                )
            chunks.append(chunk)
        return b"".join(chunks)

    async def shutdown(self) -> None:
        """Close the pool if this transport created it."""
        if self._owns_http_client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Vault connection pool closed")


__all__: list[str] = [
    "VAULT_TOKEN_HEADER",
    "VaultHttpTransport",
    "create_pooled_client",
]
