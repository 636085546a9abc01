# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for generic secret decoding."""

from __future__ import annotations

import json
from dataclasses import dataclass
from uuid import uuid4

import pytest
from pydantic import BaseModel
from typing_extensions import TypedDict

from omnibase_vault.enums import EnumInfraTransportType
from omnibase_vault.errors import ModelInfraErrorContext, VaultDecodeError
from omnibase_vault.models import ModelVaultKvV2Secret
from omnibase_vault.utils import (
    decode_secret,
    decode_secret_v2,
    decode_secret_v2_with_metadata,
    extract_kv_v2_payload,
)


class DatabaseCredentials(BaseModel):
    username: str
    password: str


@dataclass
class ApiKey:
    key: str
    scopes: list[str]


class TlsMaterial(TypedDict):
    cert: str
    key: str


def _body(payload: object) -> bytes:
    return json.dumps(payload).encode()


def _kv2_body(data: object, metadata: object = None) -> bytes:
    inner: dict[str, object] = {"data": data}
    if metadata is not None:
        inner["metadata"] = metadata
    return _body({"request_id": "r-1", "data": inner})


class TestDecodeSecret:
    """KV v1 decoding: the whole body is the secret."""

    def test_decodes_pydantic_model(self) -> None:
        creds = decode_secret(
            _body({"username": "app", "password": "pw"}), DatabaseCredentials
        )
        assert creds == DatabaseCredentials(username="app", password="pw")

    def test_decodes_dataclass(self) -> None:
        key = decode_secret(_body({"key": "k-1", "scopes": ["read"]}), ApiKey)
        assert key == ApiKey(key="k-1", scopes=["read"])

    def test_decodes_typed_dict(self) -> None:
        material = decode_secret(_body({"cert": "c", "key": "k"}), TlsMaterial)
        assert material == {"cert": "c", "key": "k"}

    def test_decodes_plain_mapping(self) -> None:
        assert decode_secret(_body({"a": "1"}), dict[str, str]) == {"a": "1"}

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(VaultDecodeError):
            decode_secret(b"not json", DatabaseCredentials)

    def test_unsupported_type_raises_decode_error(self) -> None:
        class Opaque:
            pass

        with pytest.raises(VaultDecodeError, match="cannot be used as a secret type"):
            decode_secret(_body({"a": "1"}), Opaque)

    def test_mismatch_omits_secret_values(self) -> None:
        context = ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.VAULT,
            operation="get_secret",
            correlation_id=uuid4(),
        )
        with pytest.raises(VaultDecodeError) as exc_info:
            decode_secret(
                _body({"username": "app", "password": 12345678}),
                DatabaseCredentials,
                context,
            )

        error = exc_info.value
        assert "DatabaseCredentials" in str(error)
        assert "password" in str(error)
        assert "12345678" not in str(error)
        assert error.correlation_id == context.correlation_id
        assert error.context["target_type"] == "DatabaseCredentials"

    def test_v2_envelope_does_not_match_flat_type(self) -> None:
        with pytest.raises(VaultDecodeError):
            decode_secret(
                _kv2_body({"username": "app", "password": "pw"}), DatabaseCredentials
            )


class TestExtractKvV2Payload:
    """Tests for the KV v2 envelope extraction."""

    def test_returns_outer_data(self) -> None:
        payload = extract_kv_v2_payload(_kv2_body({"a": "1"}, {"version": 2}))
        assert payload["data"] == {"a": "1"}
        assert payload["metadata"] == {"version": 2}

    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "app"},
            {"data": None},
            {"data": {"metadata": {}}},
            {"data": {"data": None}},
            ["data"],
        ],
    )
    def test_missing_inner_data_raises(self, payload: object) -> None:
        with pytest.raises(VaultDecodeError, match="data.data"):
            extract_kv_v2_payload(_body(payload))

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(VaultDecodeError, match="not valid JSON"):
            extract_kv_v2_payload(b"{")


class TestDecodeSecretV2:
    """KV v2 decoding of data.data."""

    def test_decodes_inner_data(self) -> None:
        creds = decode_secret_v2(
            _kv2_body({"username": "app", "password": "pw"}, {"version": 3}),
            DatabaseCredentials,
        )
        assert creds.username == "app"
        assert creds.password == "pw"

    def test_inner_mismatch_raises(self) -> None:
        with pytest.raises(VaultDecodeError):
            decode_secret_v2(_kv2_body({"username": "app"}), DatabaseCredentials)

    def test_with_metadata(self) -> None:
        secret = decode_secret_v2_with_metadata(
            _kv2_body(
                {"username": "app", "password": "pw"},
                {
                    "version": 4,
                    "created_time": "2024-05-01T10:00:00.123456Z",
                    "deletion_time": "",
                    "destroyed": False,
                    "custom_metadata": {"owner": "platform"},
                },
            ),
            DatabaseCredentials,
        )
        assert isinstance(secret, ModelVaultKvV2Secret)
        assert secret.data == DatabaseCredentials(username="app", password="pw")
        assert secret.metadata.version == 4
        assert secret.metadata.created_time is not None
        assert secret.metadata.created_time.year == 2024
        assert secret.metadata.deletion_time is None
        assert secret.metadata.custom_metadata == {"owner": "platform"}

    def test_with_metadata_when_vault_omits_metadata(self) -> None:
        secret = decode_secret_v2_with_metadata(_kv2_body({"a": "1"}), dict[str, str])
        assert secret.data == {"a": "1"}
        assert secret.metadata.version is None
        assert secret.metadata.destroyed is False
