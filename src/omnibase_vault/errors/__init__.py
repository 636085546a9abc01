# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Client Errors Module.

Every failure the client raises extends VaultClientError and carries an
EnumVaultErrorCode, a correlation ID and structured context.

Exports:
    ModelInfraErrorContext: Configuration model for bundled error context
    VaultClientError: Base error class
    ProtocolConfigurationError: Configuration resolution errors (raised by build)
    MissingRequiredFieldError: Required setting missing after env fallback
    InfraConnectionError: HTTP transport failures
    InfraUnavailableError: Vault reachable but not serving
    VaultStatusError: Base for classified non-200 responses
    VaultDecodeError: Body does not match the requested type

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - The Vault token or any secret value
        - Full response bodies of successful secret reads

    SAFE to include:
        - Operation names (build, get_secret, health_check)
        - Correlation IDs
        - Hostnames, ports and secret paths
        - HTTP status codes and Vault's own error strings (sanitized)

    Example - BAD (exposes credentials)::

        raise InfraConnectionError(
            f"Failed with token={token}",  # NEVER DO THIS
            context=context,
        )

    Example - GOOD (sanitized)::

        raise InfraConnectionError(
            "Failed to connect to Vault",
            context=context,
            host="vault.example.com",
            port=8200,
        )
"""

from omnibase_vault.errors.error_vault import (
    VaultActiveDRSecondaryNodeError,
    VaultDecodeError,
    VaultForbiddenError,
    VaultInvalidPathError,
    VaultNotInitializedError,
    VaultRateLimitedError,
    VaultSealedError,
    VaultStandbyPerformanceNodeError,
    VaultStatusError,
    VaultUnhandledStatusError,
)
from omnibase_vault.errors.infra_errors import (
    InfraConnectionError,
    InfraUnavailableError,
    MissingRequiredFieldError,
    ProtocolConfigurationError,
    VaultClientError,
)
from omnibase_vault.errors.model_infra_error_context import ModelInfraErrorContext

__all__: list[str] = [
    # Configuration model
    "ModelInfraErrorContext",
    # Base and infrastructure errors
    "VaultClientError",
    "ProtocolConfigurationError",
    "MissingRequiredFieldError",
    "InfraConnectionError",
    "InfraUnavailableError",
    # Vault status errors
    "VaultStatusError",
    "VaultForbiddenError",
    "VaultInvalidPathError",
    "VaultRateLimitedError",
    "VaultActiveDRSecondaryNodeError",
    "VaultStandbyPerformanceNodeError",
    "VaultNotInitializedError",
    "VaultSealedError",
    "VaultUnhandledStatusError",
    # Decoding
    "VaultDecodeError",
]
