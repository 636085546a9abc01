# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for Vault status and decode error classes."""

from uuid import uuid4

import pytest

from omnibase_vault.enums import EnumInfraTransportType, EnumVaultErrorCode
from omnibase_vault.errors import (
    ModelInfraErrorContext,
    VaultActiveDRSecondaryNodeError,
    VaultClientError,
    VaultDecodeError,
    VaultForbiddenError,
    VaultInvalidPathError,
    VaultNotInitializedError,
    VaultRateLimitedError,
    VaultSealedError,
    VaultStandbyPerformanceNodeError,
    VaultStatusError,
    VaultUnhandledStatusError,
)

STATUS_ERROR_CODES = [
    (VaultForbiddenError, EnumVaultErrorCode.PERMISSION_DENIED),
    (VaultInvalidPathError, EnumVaultErrorCode.RESOURCE_NOT_FOUND),
    (VaultRateLimitedError, EnumVaultErrorCode.RATE_LIMITED),
    (VaultActiveDRSecondaryNodeError, EnumVaultErrorCode.NODE_NOT_ACTIVE),
    (VaultStandbyPerformanceNodeError, EnumVaultErrorCode.NODE_NOT_ACTIVE),
    (VaultNotInitializedError, EnumVaultErrorCode.NOT_INITIALIZED),
    (VaultSealedError, EnumVaultErrorCode.SEALED),
    (VaultUnhandledStatusError, EnumVaultErrorCode.UNHANDLED_STATUS),
]


class TestVaultStatusError:
    """Tests for VaultStatusError and its from_response factory."""

    def test_fields_are_stored(self) -> None:
        error = VaultStatusError(
            "failed", status_code=500, vault_errors=["internal"], response_body="x"
        )
        assert error.status_code == 500
        assert error.vault_errors == ("internal",)
        assert error.response_body == "x"

    def test_from_response_message_without_vault_errors(self) -> None:
        error = VaultSealedError.from_response(503)
        assert str(error) == f"{VaultSealedError.description} | status code: 503"
        assert error.vault_errors == ()

    def test_from_response_message_with_vault_errors(self) -> None:
        error = VaultForbiddenError.from_response(
            403, vault_errors=["permission denied", "1 error occurred"]
        )
        assert str(error).endswith("| permission denied; 1 error occurred")
        assert "status code: 403" in str(error)

    def test_from_response_carries_context(self) -> None:
        correlation_id = uuid4()
        context = ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.VAULT,
            operation="get_secret",
            correlation_id=correlation_id,
        )
        error = VaultInvalidPathError.from_response(404, context=context)
        assert error.correlation_id == correlation_id
        assert error.context["operation"] == "get_secret"

    def test_unhandled_keeps_response_body(self) -> None:
        error = VaultUnhandledStatusError.from_response(
            418, response_body="I'm a teapot"
        )
        assert error.status_code == 418
        assert error.response_body == "I'm a teapot"

    @pytest.mark.parametrize(("error_class", "expected_code"), STATUS_ERROR_CODES)
    def test_error_codes_and_hierarchy(
        self,
        error_class: type[VaultStatusError],
        expected_code: EnumVaultErrorCode,
    ) -> None:
        error = error_class.from_response(599)
        assert isinstance(error, VaultStatusError)
        assert isinstance(error, VaultClientError)
        assert error.error_code == expected_code
        assert error_class.description


class TestVaultDecodeError:
    """Tests for VaultDecodeError."""

    def test_is_client_error_not_status_error(self) -> None:
        error = VaultDecodeError("Vault response does not match Creds")
        assert isinstance(error, VaultClientError)
        assert not isinstance(error, VaultStatusError)
        assert error.error_code == EnumVaultErrorCode.DECODE_ERROR
