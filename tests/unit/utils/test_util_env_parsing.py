# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for environment variable parsing utilities."""

import os
from unittest.mock import patch

import pytest

from omnibase_vault.errors import ProtocolConfigurationError
from omnibase_vault.utils import parse_env_int, parse_env_str


class TestParseEnvStr:
    """Tests for parse_env_str."""

    def test_returns_stripped_value(self) -> None:
        with patch.dict(os.environ, {"VAULT_ADDRESS": "  vault.internal  "}):
            assert parse_env_str("VAULT_ADDRESS") == "vault.internal"

    def test_unset_returns_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert parse_env_str("VAULT_ADDRESS") is None
            assert parse_env_str("VAULT_ADDRESS", "127.0.0.1") == "127.0.0.1"

    def test_blank_is_treated_as_unset(self) -> None:
        with patch.dict(os.environ, {"VAULT_TOKEN": "   "}):
            assert parse_env_str("VAULT_TOKEN", "fallback") == "fallback"


class TestParseEnvInt:
    """Tests for parse_env_int."""

    def test_valid_value(self) -> None:
        with patch.dict(os.environ, {"VAULT_PORT": "8300"}):
            assert parse_env_int("VAULT_PORT", 8200, min_value=0, max_value=65535) == 8300

    def test_unset_returns_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert parse_env_int("VAULT_PORT", 8200, min_value=0, max_value=65535) == 8200

    @pytest.mark.parametrize("value", ["0", "65535"])
    def test_bounds_are_inclusive(self, value: str) -> None:
        with patch.dict(os.environ, {"VAULT_PORT": value}):
            assert (
                parse_env_int("VAULT_PORT", 8200, min_value=0, max_value=65535)
                == int(value)
            )

    def test_non_integer_raises(self) -> None:
        with patch.dict(os.environ, {"VAULT_PORT": "eighty"}):
            with pytest.raises(ProtocolConfigurationError) as exc_info:
                parse_env_int("VAULT_PORT", 8200, min_value=0, max_value=65535)
        assert "VAULT_PORT" in str(exc_info.value)
        assert "expected integer" in str(exc_info.value)
        assert exc_info.value.context["env_var"] == "VAULT_PORT"
        assert isinstance(exc_info.value.__cause__, ValueError)

    @pytest.mark.parametrize("value", ["-1", "65536", "100000"])
    def test_out_of_range_raises(self, value: str) -> None:
        with patch.dict(os.environ, {"VAULT_PORT": value}):
            with pytest.raises(ProtocolConfigurationError, match="outside range"):
                parse_env_int("VAULT_PORT", 8200, min_value=0, max_value=65535)
