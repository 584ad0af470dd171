"""
Fractional-Octave Band Numbers

Maps band numbers on the logarithmic frequency grid to center frequencies
and back.

Technical specification:
- fc = 1000 × 2^((N - M) / O)
  N: band number, O: octave divider, M: band number of 1 kHz
- M is derived from the 1/3-octave grid, where band 30 = 1000 Hz:
  M = round(O / 3 × 30), so band 10 = 1 kHz for full octaves,
  band 60 = 1 kHz for 1/6-octaves, etc.
- The divider may be any positive real number

Documented limitations:
- Divider 0 (narrow band) is NOT guarded and raises ZeroDivisionError
- Exact center frequencies differ slightly from the nominal (rounded)
  values of the standard, see nominal_center_frequency()
"""

import math
from enum import Enum
from typing import Union

import numpy as np

from .center_frequencies import (
    NOMINAL_FULL_OCTAVE_CENTER_FREQUENCIES,
    NOMINAL_THIRD_OCTAVE_CENTER_FREQUENCIES,
)


class OctaveFraction(Enum):
    """Octave divider (relative bandwidth) of a band grid."""
    NARROW_BAND = 0
    OCTAVE = 1
    THIRD_OCTAVE = 3
    SIXTH_OCTAVE = 6
    TWELFTH_OCTAVE = 12
    TWENTYFOURTH_OCTAVE = 24
    FORTYEIGHTH_OCTAVE = 48

    @property
    def is_narrow_band(self) -> bool:
        """True if no octave smoothing applies."""
        return self is OctaveFraction.NARROW_BAND


Divider = Union[OctaveFraction, float]

REFERENCE_FREQUENCY = 1000.0  # Hz
THIRD_OCTAVE_BAND_AT_1KHZ = 30


def _divider_value(octave_divider: Divider) -> float:
    if isinstance(octave_divider, OctaveFraction):
        return octave_divider.value
    return octave_divider


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def band_number_at_1khz(octave_divider: Divider) -> int:
    """
    Band number of the 1 kHz band for an octave divider.

    Scaled from the 1/3-octave grid (band 30): 10 for octaves,
    30 for 1/3, 60 for 1/6, ... Rounds half up for non-integer dividers.
    """
    ratio = _divider_value(octave_divider) / 3.0
    return _round_half_up(ratio * THIRD_OCTAVE_BAND_AT_1KHZ)


def center_frequency(band_number: int, octave_divider: Divider) -> float:
    """
    Exact center frequency of a band.

    Args:
        band_number: Band number on the grid of the divider
        octave_divider: 1, 3, 6, 12, 24, 48 (or any positive real)

    Returns:
        Center frequency in Hz, exactly 1000.0 at band_number_at_1khz()

    Raises:
        ZeroDivisionError: Divider is 0 (narrow band has no band grid)
    """
    divider = _divider_value(octave_divider)
    bands_from_1khz = band_number - band_number_at_1khz(divider)
    return REFERENCE_FREQUENCY * 2.0 ** (bands_from_1khz / divider)


def center_frequencies(
    first_band: int,
    last_band: int,
    octave_divider: Divider,
) -> np.ndarray:
    """
    Exact center frequencies for an inclusive range of band numbers.

    Returns:
        float64 array with last_band - first_band + 1 entries
    """
    divider = _divider_value(octave_divider)
    if divider == 0:
        raise ZeroDivisionError("Octave divider must not be 0")
    band_numbers = np.arange(first_band, last_band + 1)
    offsets = (band_numbers - band_number_at_1khz(divider)) / divider
    return REFERENCE_FREQUENCY * np.power(2.0, offsets)


def band_number_for_frequency(frequency_hz: float, octave_divider: Divider) -> int:
    """
    Band number whose exact center frequency is closest to a frequency.

    Distance is measured on the logarithmic (octave) scale, so
    band_number_for_frequency(center_frequency(n, d), d) == n.
    """
    divider = _divider_value(octave_divider)
    octaves_from_1khz = math.log2(frequency_hz / REFERENCE_FREQUENCY)
    return band_number_at_1khz(divider) + _round_half_up(octaves_from_1khz * divider)


def nominal_center_frequency(band_number: int, octave_divider: Divider) -> float:
    """
    Nominal (standardized, rounded) center frequency of a band.

    Only full-octave and 1/3-octave tables exist. Unused band numbers,
    band numbers outside the table and other dividers yield NaN.
    """
    divider = _divider_value(octave_divider)
    if divider == 1:
        table = NOMINAL_FULL_OCTAVE_CENTER_FREQUENCIES
    elif divider == 3:
        table = NOMINAL_THIRD_OCTAVE_CENTER_FREQUENCIES
    else:
        return math.nan

    if band_number < 0 or band_number >= len(table):
        return math.nan
    return float(table[band_number])
