# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault health status model.

Holds the node state derived from the ``sys/health`` status code together
with the informational fields Vault includes in the response body.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from omnibase_vault.enums import EnumVaultHealthState

_SERVING_STATES: frozenset[EnumVaultHealthState] = frozenset(
    {
        EnumVaultHealthState.ACTIVE,
        EnumVaultHealthState.STANDBY,
        EnumVaultHealthState.PERFORMANCE_STANDBY,
    }
)


class ModelVaultHealthStatus(BaseModel):
    """Result of ``VaultClient.health_check()``.

    ``state`` is determined by the status code alone. The remaining fields are
    copied from the JSON body when present and left as None otherwise.

    Attributes:
        state: Node state derived from the HTTP status code
        status_code: HTTP status returned by the health endpoint
        initialized: Whether Vault has been initialized
        sealed: Whether Vault is sealed
        standby: Whether the node is a standby
        performance_standby: Whether the node is a performance standby
        version: Vault server version
        cluster_name: Cluster name, when the node is part of a cluster
        cluster_id: Cluster identifier
        server_time_utc: Server time as a Unix timestamp
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    state: EnumVaultHealthState = Field(description="Node state")
    status_code: int = Field(description="HTTP status of the health endpoint")
    initialized: Optional[bool] = None
    sealed: Optional[bool] = None
    standby: Optional[bool] = None
    performance_standby: Optional[bool] = None
    version: Optional[str] = None
    cluster_name: Optional[str] = None
    cluster_id: Optional[str] = None
    server_time_utc: Optional[int] = None

    @property
    def is_active(self) -> bool:
        return self.state is EnumVaultHealthState.ACTIVE

    @property
    def is_serving(self) -> bool:
        """True when the node can answer secret reads (directly or by forwarding)."""
        return self.state in _SERVING_STATES


__all__: list[str] = ["ModelVaultHealthStatus"]
