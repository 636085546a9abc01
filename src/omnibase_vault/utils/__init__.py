# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for the Vault client.

This package provides common utilities used across the client:
    - util_env_parsing: Type-safe environment variable parsing with validation
    - util_error_sanitization: Error message sanitization for errors and logs
    - util_secret_decoding: Generic decoding of response bodies into caller types
"""

from omnibase_vault.utils.util_env_parsing import parse_env_int, parse_env_str
from omnibase_vault.utils.util_error_sanitization import (
    SENSITIVE_PATTERNS,
    sanitize_error_string,
    summarize_validation_error,
)
from omnibase_vault.utils.util_secret_decoding import (
    decode_secret,
    decode_secret_v2,
    decode_secret_v2_with_metadata,
    extract_kv_v2_payload,
)

__all__: list[str] = [
    "parse_env_int",
    "parse_env_str",
    "SENSITIVE_PATTERNS",
    "sanitize_error_string",
    "summarize_validation_error",
    "decode_secret",
    "decode_secret_v2",
    "decode_secret_v2_with_metadata",
    "extract_kv_v2_payload",
]
