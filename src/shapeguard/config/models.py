"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, shapeguard.toml only holds
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GuardsConfig(BaseModel):
    """[guards] section.

    Attributes:
        default: Guard reference used by ``check`` when none is given.
        aliases: Short names for guard references, e.g.
            ``point = "myapp.shapes:Point"``.
    """

    model_config = {"frozen": True}

    default: str | None = None
    aliases: dict[str, str] = Field(default_factory=dict)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    indent: int = Field(default=2, ge=0)
    width: int = Field(default=120, gt=0)
