# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault health state enumeration.

Vault's ``sys/health`` endpoint reports node state through the HTTP status
code. Several non-200 codes describe normal cluster roles rather than
failures, so they are modelled as states instead of errors.
"""

from enum import Enum


class EnumVaultHealthState(str, Enum):
    """Node state reported by ``GET /v1/sys/health``.

    Attributes:
        ACTIVE: 200 - initialized, unsealed and active
        STANDBY: 429 - unsealed standby node
        DR_SECONDARY: 472 - disaster recovery secondary, active
        PERFORMANCE_STANDBY: 473 - performance standby node
        NOT_INITIALIZED: 501 - server has not been initialized
        SEALED: 503 - server is sealed
    """

    ACTIVE = "active"
    STANDBY = "standby"
    DR_SECONDARY = "dr_secondary"
    PERFORMANCE_STANDBY = "performance_standby"
    NOT_INITIALIZED = "not_initialized"
    SEALED = "sealed"


__all__ = ["EnumVaultHealthState"]
