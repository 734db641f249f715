"""Column specification models.

A column is either fixed width or flexible. Flexible columns share whatever
width remains after fixed columns and separators are reserved, optionally
bounded by ``min_width`` / ``max_width``.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from kubewatch.constants.enums import Align, TruncatePolicy


class FixedWidth(BaseModel):
    """Column that always takes exactly ``width`` cells."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    width: int = Field(ge=0)


class FlexWidth(BaseModel):
    """Column sized from the remaining width."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["flex"] = "flex"
    min_width: int | None = Field(default=None, ge=0)
    max_width: int | None = Field(default=None, ge=0)


ColumnMode = Annotated[FixedWidth | FlexWidth, Field(discriminator="kind")]


class ColumnSpec(BaseModel):
    """Title, sizing mode, alignment and truncation policy for one column."""

    model_config = ConfigDict(frozen=True)

    title: str
    mode: ColumnMode
    align: Align = Align.LEFT
    truncate: TruncatePolicy = TruncatePolicy.END

    @classmethod
    def fixed(
        cls,
        title: str,
        width: int,
        *,
        align: Align = Align.LEFT,
        truncate: TruncatePolicy = TruncatePolicy.END,
    ) -> ColumnSpec:
        return cls(title=title, mode=FixedWidth(width=width), align=align, truncate=truncate)

    @classmethod
    def flex(
        cls,
        title: str,
        *,
        min_width: int | None = None,
        max_width: int | None = None,
        align: Align = Align.LEFT,
        truncate: TruncatePolicy = TruncatePolicy.END,
    ) -> ColumnSpec:
        return cls(
            title=title,
            mode=FlexWidth(min_width=min_width, max_width=max_width),
            align=align,
            truncate=truncate,
        )


__all__ = [
    "ColumnMode",
    "ColumnSpec",
    "FixedWidth",
    "FlexWidth",
]
