# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_vault tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from tests.helpers.vault_mocks import RecordingVaultServer

VAULT_ENV_VARS: tuple[str, ...] = (
    "VAULT_ADDRESS",
    "VAULT_PORT",
    "VAULT_TOKEN",
    "VAULT_SECRET_PATH",
    "VAULT_PROTOCOL",
)


@pytest.fixture
def clean_vault_env() -> Iterator[None]:
    """Run the test with every VAULT_* variable removed from the environment.

    The original environment is restored afterwards by patch.dict.
    """
    with patch.dict(os.environ, {}, clear=False):
        for name in VAULT_ENV_VARS:
            os.environ.pop(name, None)
        yield


@pytest.fixture
def vault_server() -> RecordingVaultServer:
    """Provide an empty RecordingVaultServer (every path answers 404)."""
    return RecordingVaultServer()
