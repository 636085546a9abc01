# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Error Classes for the Vault client.

Error Hierarchy:
    VaultClientError (base error for this package)
    ├── ProtocolConfigurationError
    │   └── MissingRequiredFieldError
    ├── InfraConnectionError
    └── InfraUnavailableError

Vault status and decode errors live in ``error_vault`` and also extend
VaultClientError.

All errors:
    - Carry an EnumVaultErrorCode classification
    - Support proper error chaining with ``raise ... from e``
    - Flatten ModelInfraErrorContext plus keyword extras into ``context``
    - Carry the correlation ID of the failing call
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from omnibase_vault.enums import EnumVaultErrorCode
from omnibase_vault.errors.model_infra_error_context import ModelInfraErrorContext


class VaultClientError(Exception):
    """Base error class for every failure raised by the Vault client.

    Structured Fields:
        message: Human-readable error message (never contains the token)
        error_code: EnumVaultErrorCode classification
        correlation_id: Correlation ID of the failing call, if known
        context: Flattened structured context (transport_type, operation,
            target_name and any keyword extras)

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.VAULT,
        ...     operation="get_secret",
        ... )
        >>> raise VaultClientError("Operation failed", context=context)
    """

    default_error_code: EnumVaultErrorCode = EnumVaultErrorCode.OPERATION_FAILED

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumVaultErrorCode] = None,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize VaultClientError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to the class default_error_code)
            context: Bundled infrastructure context (transport_type, operation, etc.)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id: Optional[UUID] = None
        if context is not None:
            if context.transport_type is not None:
                structured_context["transport_type"] = context.transport_type
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            correlation_id = context.correlation_id

        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.correlation_id = correlation_id
        self.context = structured_context

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"error_code={self.error_code.value!r}, "
            f"correlation_id={self.correlation_id!r})"
        )


class ProtocolConfigurationError(VaultClientError):
    """Raised when the client configuration cannot be resolved.

    Used for malformed environment values, invalid explicit settings,
    reuse of a consumed builder, and TLS/pool initialization failures.
    Always raised from ``build()``; never retried.

    Example:
        >>> raise ProtocolConfigurationError(
        ...     "Invalid VAULT_PORT value: expected integer",
        ...     context=context,
        ...     env_var="VAULT_PORT",
        ... )
    """

    default_error_code = EnumVaultErrorCode.INVALID_CONFIGURATION


class MissingRequiredFieldError(ProtocolConfigurationError):
    """Raised when a setting with no default is neither set nor in the environment.

    The ``field_name`` attribute names the missing builder field
    (``token`` or ``secret_path``).
    """

    def __init__(
        self,
        field_name: str,
        env_var: str,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize MissingRequiredFieldError.

        Args:
            field_name: Builder field that is missing
            env_var: Environment variable consulted as fallback
            context: Bundled infrastructure context
            **extra_context: Additional context information
        """
        super().__init__(
            f"Missing required field '{field_name}': call the builder's "
            f"{field_name}() method or set {env_var}",
            context=context,
            field_name=field_name,
            env_var=env_var,
            **extra_context,
        )
        self.field_name = field_name
        self.env_var = env_var


class InfraConnectionError(VaultClientError):
    """Raised when the HTTP transport fails.

    Covers DNS resolution, connection refusal, TLS handshake, read failures
    and oversized responses. Surfaced per call; the client never retries.

    Example:
        >>> raise InfraConnectionError(
        ...     "Failed to connect to Vault",
        ...     context=context,
        ...     host="vault.example.com",
        ...     port=8200,
        ... )
    """

    default_error_code = EnumVaultErrorCode.CONNECTION_ERROR


class InfraUnavailableError(VaultClientError):
    """Raised when Vault answers but is in no state to serve secrets.

    Used by ``build()`` when connectivity verification is enabled and the
    health endpoint reports a sealed or uninitialized node.
    """

    default_error_code = EnumVaultErrorCode.SERVICE_UNAVAILABLE


__all__ = [
    "VaultClientError",
    "ProtocolConfigurationError",
    "MissingRequiredFieldError",
    "InfraConnectionError",
    "InfraUnavailableError",
]
