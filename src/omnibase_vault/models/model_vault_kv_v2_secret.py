# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""KV v2 secret envelope models.

A KV v2 read returns ``{"data": {"data": <secret>, "metadata": {...}}}``.
These models type the unwrapped pair for callers that need the version
metadata alongside the secret.
"""

from __future__ import annotations

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

SecretT = TypeVar("SecretT")


class ModelVaultSecretMetadata(BaseModel):
    """Version metadata Vault attaches to a KV v2 secret."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    version: Optional[int] = None
    created_time: Optional[datetime] = None
    deletion_time: Optional[datetime] = None
    destroyed: bool = False
    custom_metadata: Optional[dict[str, str]] = None

    @field_validator("created_time", "deletion_time", mode="before")
    @classmethod
    def _empty_time_is_none(cls, value: object) -> object:
        # Vault reports an unset deletion_time as ""
        if value == "":
            return None
        return value


class ModelVaultKvV2Secret(BaseModel, Generic[SecretT]):
    """A decoded KV v2 secret with its metadata.

    Attributes:
        data: The secret, decoded as the caller's type
        metadata: Version metadata (empty when Vault omits it)
    """

    model_config = ConfigDict(frozen=True)

    data: SecretT
    metadata: ModelVaultSecretMetadata = Field(
        default_factory=ModelVaultSecretMetadata
    )


__all__: list[str] = ["ModelVaultKvV2Secret", "ModelVaultSecretMetadata"]
