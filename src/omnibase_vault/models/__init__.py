# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Client Models.

Exports:
    ModelVaultConfig: Frozen connection settings produced by the builder
    ModelVaultHealthStatus: Result of a health check
    ModelVaultHttpResponse: Raw status and body from the transport
    ModelVaultKvV2Secret: Decoded KV v2 secret with metadata
    ModelVaultSecretMetadata: KV v2 version metadata
"""

from omnibase_vault.models.model_vault_config import ModelVaultConfig
from omnibase_vault.models.model_vault_health_status import ModelVaultHealthStatus
from omnibase_vault.models.model_vault_http_response import ModelVaultHttpResponse
from omnibase_vault.models.model_vault_kv_v2_secret import (
    ModelVaultKvV2Secret,
    ModelVaultSecretMetadata,
)

__all__: list[str] = [
    "ModelVaultConfig",
    "ModelVaultHealthStatus",
    "ModelVaultHttpResponse",
    "ModelVaultKvV2Secret",
    "ModelVaultSecretMetadata",
]
