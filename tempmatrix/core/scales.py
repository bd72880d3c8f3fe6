"""
scales.py

Positional scales for the temperature matrix.

BandScale splits a pixel range into evenly spaced bands for an ordered set of
keys (years across, months down). LinearScale maps continuous values to pixels
for the sparklines and can round its domain outward to readable tick values.
"""

import math
from typing import Dict, Hashable, List, Optional, Sequence, Tuple

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _tick_spec(start: float, stop: float, count: float) -> Tuple[int, int, float]:
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / math.pow(10, power)
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1

    if power < 0:
        inc = math.pow(10, -power) / factor
        i1 = _round_half_up(start * inc)
        i2 = _round_half_up(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = math.pow(10, power) * factor
        i1 = _round_half_up(start / inc)
        i2 = _round_half_up(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1

    if i2 < i1 and 0.5 <= count < 2:
        return _tick_spec(start, stop, count * 2)
    return i1, i2, inc


def tick_increment(start: float, stop: float, count: int) -> float:
    """
    Step between nice ticks; negative values encode 1/step for steps below 1.
    """
    return _tick_spec(start, stop, count)[2]


def nice_ticks(start: float, stop: float, count: int) -> List[float]:
    """
    Evenly spaced, human friendly tick values between start and stop.

    :param start: Domain start
    :param stop: Domain stop
    :param count: Approximate number of ticks wanted
    :return: Tick values in the same direction as start -> stop
    """
    if count <= 0:
        return []
    if start == stop:
        return [start]

    reverse = stop < start
    if reverse:
        start, stop = stop, start

    i1, i2, inc = _tick_spec(start, stop, count)
    if i2 < i1:
        return []

    if inc < 0:
        ticks = [(i1 + i) / -inc for i in range(i2 - i1 + 1)]
    else:
        ticks = [(i1 + i) * inc for i in range(i2 - i1 + 1)]

    return ticks[::-1] if reverse else ticks


def nice_bounds(low: float, high: float, count: int = 10) -> Tuple[float, float]:
    """
    Extend [low, high] outward to the nearest nice tick values.

    :param low: Data minimum
    :param high: Data maximum
    :param count: Tick density used to choose the rounding step
    :return: (nice_low, nice_high)
    """
    start, stop = low, high
    if stop < start:
        start, stop = stop, start

    previous_step = None
    for _ in range(10):
        if start == stop:
            break
        step = tick_increment(start, stop, count)
        if step == previous_step:
            break
        if step > 0:
            start = math.floor(start / step) * step
            stop = math.ceil(stop / step) * step
        elif step < 0:
            start = math.ceil(start * step) / step
            stop = math.floor(stop * step) / step
        else:
            break
        previous_step = step

    return (stop, start) if high < low else (start, stop)


class BandScale:
    """
    Discrete band scale over an ordered key set.

    The pixel range is divided into ``len(domain)`` bands; ``padding_inner`` is
    the fraction of each step left empty between bands and ``padding_outer`` the
    fraction of a step reserved before the first and after the last band.
    """

    def __init__(
        self,
        domain: Sequence[Hashable],
        pixel_range: Tuple[float, float],
        padding_inner: float = 0.0,
        padding_outer: float = 0.0,
        align: float = 0.5,
    ):
        for name, value in (
            ("padding_inner", padding_inner),
            ("padding_outer", padding_outer),
            ("align", align),
        ):
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")

        self.domain = list(domain)
        self.pixel_range = tuple(pixel_range)
        self.padding_inner = padding_inner
        self.padding_outer = padding_outer
        self.align = align
        self._index: Dict[Hashable, int] = {key: i for i, key in enumerate(self.domain)}
        self._rescale()

    def _rescale(self) -> None:
        n = len(self.domain)
        r0, r1 = self.pixel_range
        reverse = r1 < r0
        start, stop = (r1, r0) if reverse else (r0, r1)

        self.step = (stop - start) / max(1, n - self.padding_inner + self.padding_outer * 2)
        start += (stop - start - self.step * (n - self.padding_inner)) * self.align
        self.bandwidth = self.step * (1 - self.padding_inner)

        positions = [start + self.step * i for i in range(n)]
        self._positions = positions[::-1] if reverse else positions

    def __call__(self, key: Hashable) -> float:
        """Start pixel of the band for ``key``; raises KeyError for unknown keys."""
        return self._positions[self._index[key]]

    def center(self, key: Hashable) -> float:
        return self(key) + self.bandwidth / 2

    def __repr__(self) -> str:
        return (
            f"BandScale(n={len(self.domain)}, range={self.pixel_range}, "
            f"bandwidth={self.bandwidth:.2f})"
        )


class LinearScale:
    """
    Continuous linear mapping from a value domain to a pixel range.

    An empty domain (``None``) maps every value to None; a single-value domain
    maps to the middle of the range.
    """

    def __init__(
        self,
        domain: Optional[Tuple[float, float]],
        pixel_range: Tuple[float, float],
    ):
        self.domain = tuple(domain) if domain is not None else None
        self.pixel_range = tuple(pixel_range)

    @property
    def is_empty(self) -> bool:
        return self.domain is None

    def normalize(self, value: Optional[float]) -> Optional[float]:
        """Position of ``value`` within the domain as a fraction (unclamped)."""
        if value is None or self.domain is None:
            return None
        d0, d1 = self.domain
        if d1 == d0:
            return 0.5
        return (value - d0) / (d1 - d0)

    def __call__(self, value: Optional[float]) -> Optional[float]:
        t = self.normalize(value)
        if t is None:
            return None
        r0, r1 = self.pixel_range
        return r0 + t * (r1 - r0)

    def nice(self, count: int = 10) -> "LinearScale":
        """Return a copy whose domain is rounded outward to nice tick values."""
        if self.domain is None:
            return LinearScale(None, self.pixel_range)
        return LinearScale(nice_bounds(*self.domain, count=count), self.pixel_range)

    def ticks(self, count: int = 10) -> List[float]:
        if self.domain is None:
            return []
        return nice_ticks(self.domain[0], self.domain[1], count)

    def __repr__(self) -> str:
        return f"LinearScale(domain={self.domain}, range={self.pixel_range})"
