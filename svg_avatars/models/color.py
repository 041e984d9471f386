"""HSL fill color model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Seed byte layout: hhhhssll.
_HUE_MAX = 0x0F
_SAT_MAX = 0x03
_LIGHT_MAX = 0x03


class HslColor(BaseModel):
    """A fill color. Hue is not reduced modulo 360; SVG renderers wrap it."""

    model_config = ConfigDict(frozen=True)

    hue: float = Field(..., ge=0.0)
    saturation: float = Field(..., ge=20.0, le=100.0)
    lightness: float = Field(..., ge=40.0, le=90.0)

    @classmethod
    def from_seed(cls, seed: int, global_theme: float, ring_theme: float) -> "HslColor":
        """Compose a color from one seed byte and the theme's hue biases."""
        h = (seed >> 4) / _HUE_MAX
        s = ((seed >> 2) & 0x03) / _SAT_MAX
        light = (seed & 0x03) / _LIGHT_MAX

        return cls(
            hue=360.0 * global_theme + 120.0 * ring_theme + 30.0 * h,
            saturation=20.0 + 80.0 * s,
            lightness=40.0 + 50.0 * light,
        )

    def __str__(self) -> str:
        return f"hsl({self.hue}, {self.saturation}%, {self.lightness}%)"
