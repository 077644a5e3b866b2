"""
Design token models.

Token files follow the `{"global": {name: {"$type": ..., "$value": ...}}}`
layout, with nested groups (fontFamilies, fontSize) under `global`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DesignToken(BaseModel):
    """A single named design token."""

    model_config = ConfigDict(populate_by_name=True)

    type: str | None = Field(default=None, alias="$type")
    value: Any = Field(alias="$value")

    @property
    def text(self) -> str:
        return str(self.value)


class TokenSet(BaseModel):
    """Whole token file. Entries under `global` are tokens or token groups."""

    model_config = ConfigDict(populate_by_name=True)

    global_: dict[str, Any] = Field(default_factory=dict, alias="global")
