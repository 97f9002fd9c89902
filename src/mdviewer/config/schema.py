"""Pydantic models for viewer configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from mdviewer.config.defaults import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MARKDOWN_EXTENSIONS,
    DEFAULT_PREPROCESSING,
    DEFAULT_STYLE,
    DEFAULT_TITLE,
)
from mdviewer.types import HighlightOptions


class ViewerConfig(BaseModel):
    title: str = DEFAULT_TITLE
    markdown_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MARKDOWN_EXTENSIONS)
    )
    preprocessing: list[str] = Field(default_factory=lambda: list(DEFAULT_PREPROCESSING))
    language_aliases: dict[str, str] = Field(default_factory=dict)
    highlight: HighlightOptions = Field(default_factory=HighlightOptions)
    style: str = DEFAULT_STYLE
    template_dir: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL
