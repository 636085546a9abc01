# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for omnibase_vault unit tests.

Available Utilities:
    Log Helpers:
        - filter_handler_warnings: Filter warning messages from handlers
        - get_warning_messages: Extract warning messages from log records

    Vault Mocks:
        - RecordingVaultServer: httpx.MockTransport handler that records requests
        - make_vault_config: Build a ModelVaultConfig with test defaults
        - make_vault_client: Build a VaultClient over a mocked HTTP client
        - vault_response: Build an httpx.Response with a JSON body
"""

from tests.helpers.log_helpers import filter_handler_warnings, get_warning_messages
from tests.helpers.vault_mocks import (
    TEST_SECRET_PATH,
    TEST_TOKEN,
    RecordingVaultServer,
    make_vault_client,
    make_vault_config,
    vault_response,
)

__all__ = [
    # Log helpers
    "filter_handler_warnings",
    "get_warning_messages",
    # Vault mocks
    "TEST_SECRET_PATH",
    "TEST_TOKEN",
    "RecordingVaultServer",
    "make_vault_client",
    "make_vault_config",
    "vault_response",
]
