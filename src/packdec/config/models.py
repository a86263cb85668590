"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, packdec.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class EncodeConfig(BaseModel):
    """[encode] section."""

    model_config = {"frozen": True}

    max_length: int = Field(default=4096, gt=0)
    hex_uppercase: bool = False


class BatchConfig(BaseModel):
    """[batch] section."""

    model_config = {"frozen": True}

    partial: bool = False
