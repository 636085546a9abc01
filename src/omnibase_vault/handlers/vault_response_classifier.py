# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault response classification.

Pure functions mapping a raw Vault HTTP response to either a success body,
a typed VaultStatusError, or (for the health endpoint) a health status.

Two tables are used on purpose:

    Secret reads: every status other than 200 is an error.
    Health check: 200/429/472/473/501/503 are node states, not failures,
        because Vault uses them to describe normal cluster roles.

Classification depends on the status code alone. A JSON ``errors`` array in
the body only enriches the message and never changes the error class.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from omnibase_vault.enums import EnumVaultHealthState
from omnibase_vault.errors import (
    ModelInfraErrorContext,
    VaultActiveDRSecondaryNodeError,
    VaultForbiddenError,
    VaultInvalidPathError,
    VaultNotInitializedError,
    VaultRateLimitedError,
    VaultSealedError,
    VaultStandbyPerformanceNodeError,
    VaultStatusError,
    VaultUnhandledStatusError,
)
from omnibase_vault.models import ModelVaultHealthStatus, ModelVaultHttpResponse
from omnibase_vault.utils import sanitize_error_string

logger = logging.getLogger(__name__)

HTTP_OK: int = 200

STATUS_ERRORS: dict[int, type[VaultStatusError]] = {
    403: VaultForbiddenError,
    404: VaultInvalidPathError,
    429: VaultRateLimitedError,
    472: VaultActiveDRSecondaryNodeError,
    473: VaultStandbyPerformanceNodeError,
    501: VaultNotInitializedError,
    503: VaultSealedError,
}

HEALTH_STATES: dict[int, EnumVaultHealthState] = {
    200: EnumVaultHealthState.ACTIVE,
    429: EnumVaultHealthState.STANDBY,
    472: EnumVaultHealthState.DR_SECONDARY,
    473: EnumVaultHealthState.PERFORMANCE_STANDBY,
    501: EnumVaultHealthState.NOT_INITIALIZED,
    503: EnumVaultHealthState.SEALED,
}

_HEALTH_BODY_FIELDS: tuple[str, ...] = (
    "initialized",
    "sealed",
    "standby",
    "performance_standby",
    "version",
    "cluster_name",
    "cluster_id",
    "server_time_utc",
)


def _parse_json_object(body: bytes) -> dict[str, Any] | None:
    if not body:
        return None
    try:
        parsed = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return parsed if isinstance(parsed, dict) else None


def parse_vault_errors(body: bytes) -> list[str]:
    """Extract the sanitized ``errors`` array from a Vault error body.

    Vault reports failures as ``{"errors": ["message", ...]}``. Anything else,
    including non-JSON bodies, yields an empty list.
    """
    parsed = _parse_json_object(body)
    if parsed is None:
        return []
    raw_errors = parsed.get("errors")
    if not isinstance(raw_errors, list):
        return []
    messages = (sanitize_error_string(str(item).strip()) for item in raw_errors)
    return [message for message in messages if message]


def build_status_error(
    response: ModelVaultHttpResponse,
    context: ModelInfraErrorContext | None = None,
) -> VaultStatusError:
    """Return (not raise) the error class for a non-200 response."""
    error_class = STATUS_ERRORS.get(response.status_code, VaultUnhandledStatusError)
    response_body = ""
    if error_class is VaultUnhandledStatusError:
        response_body = sanitize_error_string(response.text)
    return error_class.from_response(
        response.status_code,
        vault_errors=parse_vault_errors(response.body),
        response_body=response_body,
        context=context,
    )


def classify_response(
    response: ModelVaultHttpResponse,
    context: ModelInfraErrorContext | None = None,
) -> bytes:
    """Classify a secret-read response.

    Args:
        response: Raw response from the transport
        context: Error context of the calling operation

    Returns:
        The untouched response body when the status is 200.

    Raises:
        VaultStatusError: The subclass matching the status code.
    """
    if response.status_code == HTTP_OK:
        return response.body

    error = build_status_error(response, context)
    logger.warning(
        "Vault request failed",
        extra={
            "status_code": response.status_code,
            "error_class": type(error).__name__,
            "correlation_id": (
                str(context.correlation_id)
                if context and context.correlation_id
                else None
            ),
        },
    )
    raise error


def classify_health_response(
    response: ModelVaultHttpResponse,
    context: ModelInfraErrorContext | None = None,
) -> ModelVaultHealthStatus:
    """Classify a ``sys/health`` response.

    Statuses in HEALTH_STATES become a ModelVaultHealthStatus. Informational
    fields are copied from the body when present and well-typed; a missing
    or malformed body never changes the state.

    Raises:
        VaultStatusError: For statuses that are not health states (403, 404,
            anything unrecognised), classified with the secret-read table.
    """
    state = HEALTH_STATES.get(response.status_code)
    if state is None:
        raise build_status_error(response, context)

    parsed = _parse_json_object(response.body) or {}
    fields = {key: parsed[key] for key in _HEALTH_BODY_FIELDS if key in parsed}
    try:
        return ModelVaultHealthStatus(
            state=state, status_code=response.status_code, **fields
        )
    except ValidationError:
        logger.debug(
            "Ignoring malformed health response body",
            extra={"status_code": response.status_code},
        )
        return ModelVaultHealthStatus(state=state, status_code=response.status_code)


__all__: list[str] = [
    "HEALTH_STATES",
    "STATUS_ERRORS",
    "build_status_error",
    "classify_health_response",
    "classify_response",
    "parse_vault_errors",
]
