# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault-Specific Error Classes.

Each HTTP status Vault documents for its API gets its own error class so
callers can catch exactly the node or permission state they care about:

    VaultStatusError
    ├── VaultForbiddenError              403
    ├── VaultInvalidPathError            404
    ├── VaultRateLimitedError            429
    ├── VaultActiveDRSecondaryNodeError  472
    ├── VaultStandbyPerformanceNodeError 473
    ├── VaultNotInitializedError         501
    ├── VaultSealedError                 503
    └── VaultUnhandledStatusError        any other non-200 status

VaultDecodeError covers bodies that do not match the caller's requested type.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar, Optional

from omnibase_vault.enums import EnumVaultErrorCode
from omnibase_vault.errors.infra_errors import VaultClientError
from omnibase_vault.errors.model_infra_error_context import ModelInfraErrorContext


class VaultStatusError(VaultClientError):
    """Vault answered with a status other than 200.

    Attributes:
        status_code: HTTP status returned by Vault
        vault_errors: Sanitized entries of the ``errors`` array in the body
        response_body: Sanitized body text (only kept for unhandled statuses)

    Example:
        >>> raise VaultSealedError.from_response(
        ...     503,
        ...     vault_errors=["Vault is sealed"],
        ...     context=context,
        ... )
    """

    description: ClassVar[str] = "Vault request failed"

    def __init__(
        self,
        message: str,
        status_code: int,
        vault_errors: Sequence[str] = (),
        response_body: str = "",
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize VaultStatusError.

        Args:
            message: Human-readable error message
            status_code: HTTP status returned by Vault
            vault_errors: Error strings Vault reported in its body
            response_body: Body text, for statuses without a dedicated class
            context: Bundled infrastructure context
            **extra_context: Additional context information
        """
        super().__init__(
            message,
            context=context,
            status_code=status_code,
            **extra_context,
        )
        self.status_code = status_code
        self.vault_errors: tuple[str, ...] = tuple(vault_errors)
        self.response_body = response_body

    @classmethod
    def from_response(
        cls,
        status_code: int,
        vault_errors: Sequence[str] = (),
        response_body: str = "",
        context: Optional[ModelInfraErrorContext] = None,
    ) -> VaultStatusError:
        """Build the error with a message derived from the class description."""
        message = f"{cls.description} | status code: {status_code}"
        if vault_errors:
            message = f"{message} | {'; '.join(vault_errors)}"
        return cls(
            message,
            status_code=status_code,
            vault_errors=vault_errors,
            response_body=response_body,
            context=context,
        )


class VaultForbiddenError(VaultStatusError):
    """403: the token is missing, invalid or lacks a policy for the path."""

    description = "Vault denied access, check token and policies"
    default_error_code = EnumVaultErrorCode.PERMISSION_DENIED


class VaultInvalidPathError(VaultStatusError):
    """404: nothing is stored at the path, or the engine is not mounted."""

    description = "Vault secret path is invalid"
    default_error_code = EnumVaultErrorCode.RESOURCE_NOT_FOUND


class VaultRateLimitedError(VaultStatusError):
    """429: request rate limited (or answered by an unsealed standby)."""

    description = "Vault rate limited the request or answered from standby"
    default_error_code = EnumVaultErrorCode.RATE_LIMITED


class VaultActiveDRSecondaryNodeError(VaultStatusError):
    """472: the node is an active disaster recovery secondary."""

    description = "Vault is in active DR secondary node, connection to vault failed"
    default_error_code = EnumVaultErrorCode.NODE_NOT_ACTIVE


class VaultStandbyPerformanceNodeError(VaultStatusError):
    """473: the node is a performance standby."""

    description = (
        "Vault is in standby performance node, connection to vault failed"
    )
    default_error_code = EnumVaultErrorCode.NODE_NOT_ACTIVE


class VaultNotInitializedError(VaultStatusError):
    """501: the server has not been initialized."""

    description = "Vault is not initialized, connection to vault failed"
    default_error_code = EnumVaultErrorCode.NOT_INITIALIZED


class VaultSealedError(VaultStatusError):
    """503: the server is sealed or otherwise unavailable."""

    description = "Vault is sealed, connection to vault failed"
    default_error_code = EnumVaultErrorCode.SEALED


class VaultUnhandledStatusError(VaultStatusError):
    """Any non-200 status without a dedicated class; keeps the body text."""

    description = "Vault returned an unhandled status"
    default_error_code = EnumVaultErrorCode.UNHANDLED_STATUS


class VaultDecodeError(VaultClientError):
    """The response body does not match the requested secret type.

    Raised for invalid JSON, schema mismatches, and KV v2 bodies without a
    ``data.data`` object.

    Example:
        >>> raise VaultDecodeError(
        ...     "Secret does not match DatabaseCredentials",
        ...     context=context,
        ...     target_type="DatabaseCredentials",
        ... )
    """

    default_error_code = EnumVaultErrorCode.DECODE_ERROR


__all__: list[str] = [
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
