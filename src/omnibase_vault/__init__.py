# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""omnibase_vault - async read-only client for HashiCorp Vault.

Example:
    >>> from omnibase_vault import VaultClient
    >>> async with await VaultClient.builder().secret_path("secret/app").build() as client:
    ...     status = await client.health_check()
    ...     settings = await client.get_secret(dict[str, str])
"""

from omnibase_vault.enums import (
    EnumInfraTransportType,
    EnumVaultErrorCode,
    EnumVaultHealthState,
    EnumVaultProtocol,
)
from omnibase_vault.errors import (
    InfraConnectionError,
    InfraUnavailableError,
    MissingRequiredFieldError,
    ModelInfraErrorContext,
    ProtocolConfigurationError,
    VaultActiveDRSecondaryNodeError,
    VaultClientError,
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
from omnibase_vault.handlers import VaultClient, VaultConfigBuilder, VaultHttpTransport
from omnibase_vault.models import (
    ModelVaultConfig,
    ModelVaultHealthStatus,
    ModelVaultHttpResponse,
    ModelVaultKvV2Secret,
    ModelVaultSecretMetadata,
)

__version__ = "0.1.0"

__all__: list[str] = [
    # Client
    "VaultClient",
    "VaultConfigBuilder",
    "VaultHttpTransport",
    # Models
    "ModelVaultConfig",
    "ModelVaultHealthStatus",
    "ModelVaultHttpResponse",
    "ModelVaultKvV2Secret",
    "ModelVaultSecretMetadata",
    # Enums
    "EnumInfraTransportType",
    "EnumVaultErrorCode",
    "EnumVaultHealthState",
    "EnumVaultProtocol",
    # Errors
    "ModelInfraErrorContext",
    "VaultClientError",
    "ProtocolConfigurationError",
    "MissingRequiredFieldError",
    "InfraConnectionError",
    "InfraUnavailableError",
    "VaultStatusError",
    "VaultForbiddenError",
    "VaultInvalidPathError",
    "VaultRateLimitedError",
    "VaultActiveDRSecondaryNodeError",
    "VaultStandbyPerformanceNodeError",
    "VaultNotInitializedError",
    "VaultSealedError",
    "VaultUnhandledStatusError",
    "VaultDecodeError",
]
