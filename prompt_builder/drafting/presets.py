"""Cinematography presets.

A preset is a fixed bundle of format and camera values applied in one edit.
No external state; applying the same preset twice is a no-op the second time.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union


@dataclass(frozen=True)
class CinematographyPreset:
    preset_id: str
    label: str
    fps: Union[int, float]
    aspect_ratio: str
    camera_body: str
    lenses: str
    movement: str
    lighting: str
    color_grade: str


PRESETS: Dict[str, CinematographyPreset] = {
    "high_budget": CinematographyPreset(
        preset_id="high_budget",
        label="High-Budget Cinematography",
        fps=24,
        aspect_ratio="2.39:1",
        camera_body="ARRI Alexa LF",
        lenses="Cooke S4/i, 32/50/85mm",
        movement="Dolly and slow gimbal push-ins",
        lighting="Soft key, motivated practicals, high contrast",
        color_grade="Filmic contrast, subtle teal/orange, Kodak 2393 vibe",
    ),
}
