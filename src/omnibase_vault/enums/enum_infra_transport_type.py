# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Transport Type Enumeration.

Defines the transport types recorded in error context so failures can be
attributed to the raw HTTP layer or to the Vault API on top of it.
"""

from enum import Enum


class EnumInfraTransportType(str, Enum):
    """Transport types used by the Vault client.

    Attributes:
        HTTP: Raw HTTP transport (connection, TLS, body read)
        VAULT: HashiCorp Vault API semantics (status codes, envelopes)
    """

    HTTP = "http"
    VAULT = "vault"


__all__ = ["EnumInfraTransportType"]
