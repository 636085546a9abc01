# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Error Context Configuration Model.

Bundles the structured fields every Vault client error carries so error
constructors keep a short signature while staying strongly typed.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from omnibase_vault.enums import EnumInfraTransportType


class ModelInfraErrorContext(BaseModel):
    """Structured context attached to Vault client errors.

    Attributes:
        transport_type: Layer that failed (raw HTTP or Vault API)
        operation: Operation being performed (build, get_secret, health_check)
        target_name: Target endpoint, usually the request URL without credentials
        correlation_id: Request correlation ID for tracing

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.VAULT,
        ...     operation="get_secret",
        ...     target_name="http://127.0.0.1:8200/v1/secret/app",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise VaultSealedError("Vault is sealed", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    transport_type: Optional[EnumInfraTransportType] = Field(
        default=None,
        description="Type of infrastructure transport (HTTP or VAULT)",
    )
    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (build, get_secret, health_check)",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Target resource or endpoint name",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Request correlation ID for distributed tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: object,
    ) -> ModelInfraErrorContext:
        """Create a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelInfraErrorContext"]
