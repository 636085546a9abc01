# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error code enumeration for Vault client errors."""

from enum import Enum


class EnumVaultErrorCode(str, Enum):
    """Machine-readable classification carried by every VaultClientError."""

    OPERATION_FAILED = "operation_failed"
    INVALID_CONFIGURATION = "invalid_configuration"
    CONNECTION_ERROR = "connection_error"
    SERVICE_UNAVAILABLE = "service_unavailable"
    PERMISSION_DENIED = "permission_denied"
    RESOURCE_NOT_FOUND = "resource_not_found"
    RATE_LIMITED = "rate_limited"
    NODE_NOT_ACTIVE = "node_not_active"
    NOT_INITIALIZED = "not_initialized"
    SEALED = "sealed"
    UNHANDLED_STATUS = "unhandled_status"
    DECODE_ERROR = "decode_error"


__all__ = ["EnumVaultErrorCode"]
