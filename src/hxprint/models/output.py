"""Output mode models."""

import sys
from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator


class Pretty(str, Enum):
    """Value of the --pretty option."""

    ALL = "all"
    COLORS = "colors"
    FORMAT = "format"
    NONE = "none"

    @classmethod
    def default_for(cls, is_terminal: bool) -> "Pretty":
        """Pick the mode used when --pretty is not given."""
        return cls.ALL if is_terminal else cls.NONE

    def color(self) -> bool:
        return self in (Pretty.ALL, Pretty.COLORS)

    def format(self) -> bool:
        return self in (Pretty.ALL, Pretty.FORMAT)


class Theme(str, Enum):
    """Color theme for syntax highlighting."""

    AUTO = "auto"
    SOLARIZED = "solarized"
    MONOKAI = "monokai"
    FRUITY = "fruity"

    @property
    def style_name(self) -> str:
        """Name of the pygments style backing this theme."""
        match self:
            case Theme.AUTO | Theme.MONOKAI:
                return "monokai"
            case Theme.SOLARIZED:
                return "solarized-dark"
            case Theme.FRUITY:
                return "fruity"


class RenderMode(BaseModel):
    """Per-printer rendering flags."""

    model_config = ConfigDict(frozen=True)

    indent_json: bool
    color: bool
    sort_headers: bool
    force_stream: bool = False

    @model_validator(mode="after")
    def check_pretty_format(self) -> Self:
        """JSON indentation and header sorting both follow the format flag."""
        if self.indent_json != self.sort_headers:
            raise ValueError("indent_json and sort_headers must be equal")
        return self

    @classmethod
    def from_pretty(cls, pretty: Pretty, stream: bool = False) -> "RenderMode":
        """Build the mode from a resolved --pretty value."""
        return cls(
            indent_json=pretty.format(),
            sort_headers=pretty.format(),
            color=pretty.color(),
            force_stream=stream,
        )


def debug_log(message: str, enabled: bool = True) -> None:
    """Print a debug message to stderr if enabled."""
    if enabled:
        print(f"[DEBUG] {message}", file=sys.stderr)
