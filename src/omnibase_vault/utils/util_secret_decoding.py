# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Generic decoding of Vault response bodies into caller-supplied types.

The target type can be anything Pydantic can validate: a BaseModel, a
dataclass, a TypedDict, or a plain annotation such as ``dict[str, str]``.
Decoding never falls back to defaults; a mismatch raises VaultDecodeError.

Validation error messages list field locations and reasons only. Input
values are omitted because they are secret material.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, NoReturn, TypeVar

from pydantic import PydanticUserError, TypeAdapter, ValidationError

from omnibase_vault.errors import ModelInfraErrorContext, VaultDecodeError
from omnibase_vault.models import ModelVaultKvV2Secret
from omnibase_vault.utils.util_error_sanitization import summarize_validation_error

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=128)
def _type_adapter(target_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target_type)


def _type_name(target_type: Any) -> str:
    return getattr(target_type, "__name__", None) or repr(target_type)


def _adapter_for(
    target_type: Any, context: ModelInfraErrorContext | None
) -> TypeAdapter[Any]:
    try:
        try:
            return _type_adapter(target_type)
        except TypeError:
            # Unhashable annotation, build an uncached adapter
            return TypeAdapter(target_type)
    except (PydanticUserError, TypeError) as e:
        raise VaultDecodeError(
            f"Type {_type_name(target_type)} cannot be used as a secret type",
            context=context,
            target_type=_type_name(target_type),
        ) from e


def _raise_decode_error(
    error: ValidationError,
    target_type: Any,
    context: ModelInfraErrorContext | None,
) -> NoReturn:
    type_name = _type_name(target_type)
    raise VaultDecodeError(
        f"Vault response does not match {type_name}: "
        f"{summarize_validation_error(error)}",
        context=context,
        target_type=type_name,
        error_count=error.error_count(),
    ) from error


def decode_secret(
    body: bytes,
    secret_type: type[T],
    context: ModelInfraErrorContext | None = None,
) -> T:
    """Decode a JSON body directly as ``secret_type``.

    Args:
        body: Raw response body
        secret_type: Type to validate the body against
        context: Error context of the calling operation

    Returns:
        The validated value.

    Raises:
        VaultDecodeError: If the body is not JSON or does not match the type.
    """
    adapter = _adapter_for(secret_type, context)
    try:
        value: T = adapter.validate_json(body)
    except ValidationError as e:
        _raise_decode_error(e, secret_type, context)
    return value


def extract_kv_v2_payload(
    body: bytes,
    context: ModelInfraErrorContext | None = None,
) -> dict[str, Any]:
    """Parse a KV v2 body and return its outer ``data`` object.

    The returned dict is guaranteed to hold a non-null ``data`` entry.

    Raises:
        VaultDecodeError: If the body is not JSON or ``data.data`` is missing.
    """
    try:
        envelope = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise VaultDecodeError(
            "Vault response is not valid JSON",
            context=context,
        ) from e

    outer = envelope.get("data") if isinstance(envelope, dict) else None
    if not isinstance(outer, dict) or outer.get("data") is None:
        raise VaultDecodeError(
            "Vault response is not a KV v2 envelope: missing 'data.data'",
            context=context,
        )
    return outer


def decode_secret_v2(
    body: bytes,
    secret_type: type[T],
    context: ModelInfraErrorContext | None = None,
) -> T:
    """Decode the ``data.data`` value of a KV v2 body as ``secret_type``."""
    payload = extract_kv_v2_payload(body, context)
    adapter = _adapter_for(secret_type, context)
    try:
        value: T = adapter.validate_python(payload["data"])
    except ValidationError as e:
        _raise_decode_error(e, secret_type, context)
    return value


def decode_secret_v2_with_metadata(
    body: bytes,
    secret_type: type[T],
    context: ModelInfraErrorContext | None = None,
) -> ModelVaultKvV2Secret[T]:
    """Decode a KV v2 body into the secret plus its version metadata."""
    payload = extract_kv_v2_payload(body, context)
    envelope_type = ModelVaultKvV2Secret[secret_type]  # type: ignore[valid-type]
    adapter = _adapter_for(envelope_type, context)
    try:
        result: ModelVaultKvV2Secret[T] = adapter.validate_python(
            {"data": payload["data"], "metadata": payload.get("metadata") or {}}
        )
    except ValidationError as e:
        _raise_decode_error(e, secret_type, context)
    logger.debug(
        "Decoded KV v2 secret",
        extra={
            "version": result.metadata.version,
            "correlation_id": str(context.correlation_id) if context else None,
        },
    )
    return result


__all__: list[str] = [
    "decode_secret",
    "decode_secret_v2",
    "decode_secret_v2_with_metadata",
    "extract_kv_v2_payload",
]
