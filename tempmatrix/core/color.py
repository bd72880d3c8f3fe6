"""
color.py

Continuous colour mapping for monthly temperature extremes.

Uses plotly's Turbo palette (blue -> green -> yellow -> red) as evenly spaced
stops and interpolates linearly between neighbours.
"""

from typing import Optional, Sequence, Tuple

import plotly.colors as pc

from tempmatrix.models.temperature import ValueRange

DEFAULT_PALETTE = pc.sequential.Turbo


def _to_rgb_tuple(color: str) -> Tuple[float, float, float]:
    if color.startswith("#"):
        return tuple(float(c) for c in pc.hex_to_rgb(color))
    return tuple(float(c) for c in pc.unlabel_rgb(color))


def _label(rgb: Sequence[float]) -> str:
    r, g, b = (int(round(c)) for c in rgb)
    return f"rgb({r}, {g}, {b})"


class SequentialColorScale:
    """
    Map values in a fixed domain to interpolated palette colours.

    Values outside the domain are clamped. ``None`` input, or an empty domain,
    yields ``None`` so callers can substitute their no-data visual.
    """

    def __init__(self, domain: ValueRange, palette: Sequence[str] = DEFAULT_PALETTE):
        if len(palette) < 2:
            raise ValueError("Palette needs at least two colours")
        self.domain = domain
        self.palette = list(palette)
        self._stops = [_to_rgb_tuple(c) for c in self.palette]

    def interpolate(self, t: float) -> str:
        """Colour at fraction ``t`` of the palette (clamped to [0, 1])."""
        t = min(1.0, max(0.0, t))
        segments = len(self._stops) - 1
        position = t * segments
        index = min(int(position), segments - 1)
        local = position - index
        rgb = pc.find_intermediate_color(
            self._stops[index], self._stops[index + 1], local, colortype="tuple"
        )
        return _label(rgb)

    def __call__(self, value: Optional[float]) -> Optional[str]:
        if value is None or self.domain.is_empty:
            return None
        span = self.domain.span
        t = 0.5 if span == 0 else (value - self.domain.low) / span
        return self.interpolate(t)
