# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Client Enumerations Module.

Exports:
    EnumInfraTransportType: Transport type recorded in error context
    EnumVaultErrorCode: Error classification for VaultClientError
    EnumVaultHealthState: Node state reported by the health endpoint
    EnumVaultProtocol: URL scheme (http or https)
"""

from omnibase_vault.enums.enum_infra_transport_type import EnumInfraTransportType
from omnibase_vault.enums.enum_vault_error_code import EnumVaultErrorCode
from omnibase_vault.enums.enum_vault_health_state import EnumVaultHealthState
from omnibase_vault.enums.enum_vault_protocol import EnumVaultProtocol

__all__: list[str] = [
    "EnumInfraTransportType",
    "EnumVaultErrorCode",
    "EnumVaultHealthState",
    "EnumVaultProtocol",
]
