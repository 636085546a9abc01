# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault URL scheme enumeration."""

from __future__ import annotations

from enum import Enum


class EnumVaultProtocol(str, Enum):
    """URL scheme used to reach the Vault server."""

    HTTP = "http"
    HTTPS = "https"

    @classmethod
    def parse(cls, value: str) -> EnumVaultProtocol:
        """Parse a scheme name case-insensitively.

        Raises:
            ValueError: If the value is neither ``http`` nor ``https``.
        """
        return cls(value.strip().lower())

    @property
    def uses_tls(self) -> bool:
        return self is EnumVaultProtocol.HTTPS


__all__ = ["EnumVaultProtocol"]
