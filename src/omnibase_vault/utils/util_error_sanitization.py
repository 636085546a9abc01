# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error message sanitization utilities.

Vault error bodies and decoding failures are folded into exception messages
and log records. This module strips anything that looks like credential
material before that happens.

Example:
    >>> sanitize_error_string("permission denied")
    'permission denied'
    >>> sanitize_error_string("invalid token hvs.CAESIJ...")
    '[REDACTED - potentially sensitive data]'
"""

from __future__ import annotations

from pydantic import ValidationError

# Checked case-insensitively against the message. A match redacts the whole
# message rather than trying to cut out the sensitive part.
SENSITIVE_PATTERNS: tuple[str, ...] = (
    # Vault token prefixes (service, batch, recovery)
    "hvs.",
    "hvb.",
    "hvr.",
    "x-vault-token",
    # Credentials
    "password",
    "passwd",
    "secret_key",
    "api_key",
    "apikey",
    "access_key",
    "private_key",
    "bearer",
    "authorization",
    # Certificate and key material
    "-----begin",
    "-----end",
)

DEFAULT_MAX_LENGTH: int = 500
_MAX_REPORTED_ERRORS: int = 5


def sanitize_error_string(error_str: str, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Sanitize a raw error string for safe inclusion in errors and logs.

    Args:
        error_str: The string to sanitize
        max_length: Maximum length of the returned message

    Returns:
        The original string, a truncated copy, or a redaction marker.
    """
    if not error_str:
        return ""

    error_lower = error_str.lower()
    for pattern in SENSITIVE_PATTERNS:
        if pattern in error_lower:
            return "[REDACTED - potentially sensitive data]"

    if len(error_str) > max_length:
        return error_str[:max_length] + "... [truncated]"

    return error_str


def summarize_validation_error(error: ValidationError) -> str:
    """Summarize a Pydantic ValidationError without echoing input values.

    Only field locations and reasons are kept, because the rejected input
    may be secret material.
    """
    details = [
        f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
        for err in error.errors(include_url=False, include_input=False)
    ]
    summary = "; ".join(details[:_MAX_REPORTED_ERRORS])
    remaining = len(details) - _MAX_REPORTED_ERRORS
    if remaining > 0:
        summary = f"{summary}; ... {remaining} more"
    return summary


__all__: list[str] = [
    "SENSITIVE_PATTERNS",
    "sanitize_error_string",
    "summarize_validation_error",
]
