from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EnvironmentConfig:
    """The rendering environment that media and supports conditions are evaluated against."""

    media_type: str = "screen"
    width: float = 1024.0  # viewport, CSS px
    height: float = 768.0
    resolution: float = 96.0  # dpi
    color_bits: int = 8
    monochrome_bits: int = 0
    grid: bool = False
    hover: str = "hover"  # "hover" | "none"
    pointer: str = "fine"  # "fine" | "coarse" | "none"
    color_scheme: str = "light"
    reduced_motion: str = "no-preference"
    scripting: str = "enabled"
    font_size: float = 16.0  # px, used for em/rem lengths
    supported_properties: frozenset[str] | None = None  # None -> built-in set
