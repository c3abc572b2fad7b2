"""Voice settings shared by every stage of the pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Settings:
    """Pitch, rate, volume, sampling frequency and debug mode."""

    pitch: int = 0
    rate: int = 0
    volume: int = 10
    frequency: int = 22050
    debug_mode: bool = False