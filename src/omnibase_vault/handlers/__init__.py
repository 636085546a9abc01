# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Client Handlers Module.

Exports:
    VaultClient: Async health check and secret reads (KV v1 and KV v2)
    VaultConfigBuilder: Builder merging explicit settings with VAULT_* env
    VaultHttpTransport: Pooled authenticated GET requests over httpx
"""

from omnibase_vault.handlers.builder_vault_config import VaultConfigBuilder
from omnibase_vault.handlers.handler_vault import VaultClient
from omnibase_vault.handlers.handler_vault_transport import VaultHttpTransport

__all__: list[str] = [
    "VaultClient",
    "VaultConfigBuilder",
    "VaultHttpTransport",
]
