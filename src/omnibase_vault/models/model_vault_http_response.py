# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Raw HTTP response returned by the Vault transport."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelVaultHttpResponse(BaseModel):
    """Status code and undecoded body of a single Vault GET."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    status_code: int = Field(description="HTTP status code")
    body: bytes = Field(default=b"", description="Raw response body")

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


__all__: list[str] = ["ModelVaultHttpResponse"]
