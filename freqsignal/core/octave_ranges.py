"""
Octave Range Classification

Eleven fixed octave ranges from 10 Hz to 20 kHz, used to pick a default
center frequency and to check whether a center frequency belongs to a range.

Technical specification:
- Ranges are half-open [lower, upper) with boundaries
  19, 39, 78, 156, 312, 624, 1248, 2496, 4992, 9986 Hz
- The boundaries are offset slightly below the nominal range labels
  (e.g. "20 Hz to 40 Hz" starts at 19 Hz)
- The first range also takes everything below 19 Hz, the last range
  everything from 9986 Hz upwards
- WIDE ("20 Hz To 20 kHz") is a sentinel for "all ranges"

Documented quirks (kept for compatibility):
- The default center frequency of WIDE (4 kHz) classifies as
  "2.5 kHz to 5 kHz", not as WIDE
- The three lowest ranges have separate narrow-band defaults
  (15.6 / 31.2 / 62.5 Hz) next to the standard ones (16 / 31.5 / 63 Hz)
- Unknown labels fall back to offset 0, center frequency 4 kHz and
  "not in range" instead of raising
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .bands import OctaveFraction


logger = logging.getLogger(__name__)


class OctaveRange(Enum):
    """
    Octave range bucket.

    Value: (label, lower bound Hz, upper bound Hz, offset from 10 Hz range)
    """
    TEN_TO_20_HZ = ("10 Hz to 20 Hz", -math.inf, 19.0, 0)
    TWENTY_TO_40_HZ = ("20 Hz to 40 Hz", 19.0, 39.0, 1)
    FORTY_TO_80_HZ = ("40 Hz to 80 Hz", 39.0, 78.0, 2)
    EIGHTY_TO_160_HZ = ("80 Hz to 160 Hz", 78.0, 156.0, 3)
    ONE_SIXTY_TO_315_HZ = ("160 Hz to 315 Hz", 156.0, 312.0, 4)
    THREE_FIFTEEN_TO_630_HZ = ("315 Hz to 630 Hz", 312.0, 624.0, 5)
    SIX_THIRTY_HZ_TO_1_25_KHZ = ("630 Hz to 1.25 kHz", 624.0, 1248.0, 6)
    ONE_POINT_25_TO_2_5_KHZ = ("1.25 kHz to 2.5 kHz", 1248.0, 2496.0, 7)
    TWO_POINT_5_TO_5_KHZ = ("2.5 kHz to 5 kHz", 2496.0, 4992.0, 8)
    FIVE_TO_10_KHZ = ("5 kHz to 10 kHz", 4992.0, 9986.0, 9)
    TEN_TO_20_KHZ = ("10 kHz to 20 kHz", 9986.0, math.inf, 10)
    WIDE = ("20 Hz To 20 kHz", -math.inf, math.inf, 0)

    def __init__(self, label: str, lower: float, upper: float, offset: int):
        self.label = label
        self.lower = lower
        self.upper = upper
        self.offset = offset

    def contains(self, center_frequency: float) -> bool:
        """Half-open membership test, always True for WIDE."""
        if self is OctaveRange.WIDE:
            return True
        return self.lower <= center_frequency < self.upper

    @classmethod
    def from_label(cls, label: str) -> Optional["OctaveRange"]:
        """
        Resolve a label string, None if it is unknown.

        Matching is exact (case-sensitive), as the labels are used as
        identifiers by persisted settings.
        """
        for octave_range in cls:
            if octave_range.label == label:
                return octave_range
        return None

    @classmethod
    def narrow_ranges(cls) -> list["OctaveRange"]:
        """The eleven octave ranges in ascending order (without WIDE)."""
        return [r for r in cls if r is not cls.WIDE]


OctaveRangeLike = Union[OctaveRange, str]

OCTAVE_RANGE_WIDE_DEFAULT = OctaveRange.WIDE
OCTAVE_RANGE_NARROW_DEFAULT = OctaveRange.EIGHTY_TO_160_HZ
CENTER_FREQUENCY_DEFAULT = 4000.0  # Hz
CENTER_FREQUENCY_DISPLAY_DEFAULT = "4 kHz"

# Default center frequencies: (narrow band, standard)
_DEFAULT_CENTER_FREQUENCIES = {
    OctaveRange.WIDE: (4000.0, 4000.0),
    OctaveRange.TEN_TO_20_HZ: (15.6, 16.0),
    OctaveRange.TWENTY_TO_40_HZ: (31.2, 31.5),
    OctaveRange.FORTY_TO_80_HZ: (62.5, 63.0),
    OctaveRange.EIGHTY_TO_160_HZ: (125.0, 125.0),
    OctaveRange.ONE_SIXTY_TO_315_HZ: (250.0, 250.0),
    OctaveRange.THREE_FIFTEEN_TO_630_HZ: (500.0, 500.0),
    OctaveRange.SIX_THIRTY_HZ_TO_1_25_KHZ: (1000.0, 1000.0),
    OctaveRange.ONE_POINT_25_TO_2_5_KHZ: (2000.0, 2000.0),
    OctaveRange.TWO_POINT_5_TO_5_KHZ: (4000.0, 4000.0),
    OctaveRange.FIVE_TO_10_KHZ: (8000.0, 8000.0),
    OctaveRange.TEN_TO_20_KHZ: (16000.0, 16000.0),
}


def _resolve(octave_range: OctaveRangeLike) -> Optional[OctaveRange]:
    if isinstance(octave_range, OctaveRange):
        return octave_range
    resolved = OctaveRange.from_label(octave_range)
    if resolved is None:
        logger.debug("Unknown octave range %r, using fallback", octave_range)
    return resolved


def range_for_frequency(center_frequency: float) -> OctaveRange:
    """
    Nominal octave range for a center frequency.

    Total over all frequencies: below 19 Hz is the 10-20 Hz range,
    9986 Hz and above is the 10-20 kHz range. Never returns WIDE.
    """
    for octave_range in OctaveRange.narrow_ranges():
        if center_frequency < octave_range.upper:
            return octave_range
    return OctaveRange.TEN_TO_20_KHZ


def is_frequency_in_range(octave_range: OctaveRangeLike, center_frequency: float) -> bool:
    """
    Check whether a center frequency lies within an octave range.

    Args:
        octave_range: Range member or its label
        center_frequency: Frequency in Hz

    Returns:
        True for WIDE, False for unknown labels
    """
    resolved = _resolve(octave_range)
    if resolved is None:
        return False
    return resolved.contains(center_frequency)


def default_center_frequency_for_range(
    octave_range: OctaveRangeLike,
    narrow_band: bool = False,
) -> float:
    """
    Nominal default center frequency of an octave range.

    Args:
        octave_range: Range member or its label
        narrow_band: Use the narrow-band values for the lowest ranges
            (15.6 / 31.2 / 62.5 Hz instead of 16 / 31.5 / 63 Hz)

    Returns:
        Center frequency in Hz, 4 kHz for unknown labels
    """
    resolved = _resolve(octave_range)
    if resolved is None:
        return CENTER_FREQUENCY_DEFAULT
    narrow_value, standard_value = _DEFAULT_CENTER_FREQUENCIES[resolved]
    return narrow_value if narrow_band else standard_value


def octave_offset(octave_range: OctaveRangeLike) -> int:
    """Position 0..10 of the range above the 10 Hz range (0 if unknown)."""
    resolved = _resolve(octave_range)
    if resolved is None:
        return 0
    return resolved.offset


@dataclass
class FrequencyRange:
    """
    Frequency range settings of a measurement or prediction view.

    Attributes:
        octave_divider: Relative bandwidth of the analysis
        octave_range: Selected octave range (WIDE = all)
        center_frequency: Selected center frequency in Hz

    None values fall back to the defaults.
    """
    octave_divider: Optional[OctaveFraction] = OctaveFraction.THIRD_OCTAVE
    octave_range: Optional[OctaveRangeLike] = OCTAVE_RANGE_WIDE_DEFAULT
    center_frequency: float = CENTER_FREQUENCY_DEFAULT

    def __post_init__(self):
        """Apply fallbacks and resolve label strings."""
        if self.octave_divider is None:
            self.octave_divider = OctaveFraction.THIRD_OCTAVE
        if self.octave_range is None:
            self.octave_range = OCTAVE_RANGE_WIDE_DEFAULT
        elif isinstance(self.octave_range, str):
            self.octave_range = _resolve(self.octave_range) or OCTAVE_RANGE_WIDE_DEFAULT

    def reset(self) -> None:
        """Restore the default settings."""
        self.octave_divider = OctaveFraction.THIRD_OCTAVE
        self.octave_range = OCTAVE_RANGE_WIDE_DEFAULT
        self.center_frequency = default_center_frequency_for_range(
            OCTAVE_RANGE_WIDE_DEFAULT, narrow_band=False
        )

    def copy(self) -> "FrequencyRange":
        """Independent copy of these settings."""
        return FrequencyRange(
            octave_divider=self.octave_divider,
            octave_range=self.octave_range,
            center_frequency=self.center_frequency,
        )

    @property
    def center_frequency_in_range(self) -> bool:
        """True if the center frequency lies within the octave range."""
        return is_frequency_in_range(self.octave_range, self.center_frequency)
