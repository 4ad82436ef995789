"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, intdigits.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from intdigits.domain.widths import IntWidth


class ConversionConfig(BaseModel):
    """[conversion] section."""

    model_config = {"frozen": True}

    default_width: IntWidth = IntWidth.U64


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True, "populate_by_name": True}

    verbose: bool = False
    json_output: bool = Field(default=False, alias="json")

