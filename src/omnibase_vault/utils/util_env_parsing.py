# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Type-safe environment variable parsing with validation.

Values are read once, at the moment the caller asks for them. An unset or
blank variable yields the caller's default; a malformed value raises
ProtocolConfigurationError naming the variable so the misconfiguration is
visible at startup rather than on the first request.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from omnibase_vault.enums import EnumInfraTransportType
from omnibase_vault.errors import ModelInfraErrorContext, ProtocolConfigurationError

logger = logging.getLogger(__name__)


def _read_env(env_var: str) -> Optional[str]:
    raw = os.environ.get(env_var)
    if raw is None:
        return None
    stripped = raw.strip()
    return stripped or None


def parse_env_str(env_var: str, default: Optional[str] = None) -> Optional[str]:
    """Return the stripped value of ``env_var``, or ``default`` when unset or blank."""
    value = _read_env(env_var)
    if value is None:
        return default
    logger.debug("Resolved %s from environment", env_var)
    return value


def parse_env_int(
    env_var: str,
    default: int,
    *,
    min_value: int,
    max_value: int,
    transport_type: EnumInfraTransportType = EnumInfraTransportType.VAULT,
    service_name: str = "vault_client",
) -> int:
    """Parse an integer environment variable within ``[min_value, max_value]``.

    Args:
        env_var: Environment variable name
        default: Value returned when the variable is unset or blank
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
        transport_type: Transport recorded in the error context
        service_name: Target name recorded in the error context

    Returns:
        The parsed integer, or ``default``.

    Raises:
        ProtocolConfigurationError: If the value is not an integer or is
            outside the allowed range.
    """
    raw = _read_env(env_var)
    if raw is None:
        return default

    ctx = ModelInfraErrorContext(
        transport_type=transport_type,
        operation="parse_env",
        target_name=service_name,
    )
    try:
        value = int(raw)
    except ValueError as e:
        raise ProtocolConfigurationError(
            f"Invalid {env_var} value {raw!r}: expected integer",
            context=ctx,
            env_var=env_var,
        ) from e

    if value < min_value or value > max_value:
        raise ProtocolConfigurationError(
            f"Invalid {env_var} value {value}: outside range "
            f"[{min_value}, {max_value}]",
            context=ctx,
            env_var=env_var,
        )

    logger.debug("Resolved %s from environment", env_var, extra={"value": value})
    return value


__all__: list[str] = ["parse_env_int", "parse_env_str"]
