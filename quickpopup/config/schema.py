"""Configuration schema using Pydantic."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Base(BaseModel):
    """Frozen base model accepting both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class SplitterSettings(Base):
    """Thresholds for the paragraph splitter.

    soft_limit: text at or under this length is never split.
    period_threshold: minimum number of usable 。 for period-count splitting.
    search_start / search_end: char-limit search window.
    hard_limit: unconditional cut when no punctuation is found.
    """

    soft_limit: int = Field(default=200, gt=0)
    period_threshold: int = Field(default=3, ge=2)
    search_start: int = Field(default=150, ge=0)
    search_end: int = Field(default=400, gt=0)
    hard_limit: int = Field(default=500, gt=0)

    @model_validator(mode="after")
    def _check_window(self) -> "SplitterSettings":
        if self.search_start >= self.search_end:
            raise ValueError("search_start must be smaller than search_end")
        if self.search_end > self.hard_limit:
            raise ValueError("search_end must not exceed hard_limit")
        if self.soft_limit >= self.hard_limit:
            raise ValueError("soft_limit must be smaller than hard_limit")
        return self


class PopupSettings(Base):
    """Popup geometry constants (pixels)."""

    tail_size: int = Field(default=6, ge=0)
    popup_margin: int = Field(default=10, ge=0)
    screen_margin: int = Field(default=10, ge=0)
    prefer: Literal["below", "above"] = "below"

    @property
    def total_offset(self) -> int:
        """Gap between selection and popup."""
        return self.tail_size + self.popup_margin


class Config(Base):
    """Root configuration."""

    splitter: SplitterSettings = Field(default_factory=SplitterSettings)
    popup: PopupSettings = Field(default_factory=PopupSettings)
