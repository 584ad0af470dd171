"""
Displayable Frequency Range

Restricts the bins of a frequency response to the range that is rendered.

Technical assumptions:
- Bin frequencies are sorted ascending
- Index ranges are inclusive: (start, stop)
- Without limiting, the full range (0, n - 1) is returned, even for
  an empty array, callers guard empty arrays themselves

Documented limitations (fall-through behavior of the index search):
- If no bin reaches the lower bound, the result is (0, 0)
- If no bin from start onwards reaches the upper bound, stop stays 0,
  which yields stop < start. Keep both bounds inside the bin span.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np


logger = logging.getLogger(__name__)


def clamped_frequency_range_indices(
    bins: np.ndarray,
    use_limited_range: bool,
    lowest_frequency: float,
    highest_frequency: float,
) -> tuple[int, int]:
    """
    Find start and stop index of the displayable sub-range of the bins.

    Args:
        bins: Bin center frequencies in Hz, ascending
        use_limited_range: If False, the natural range of the bins is used
        lowest_frequency: Lowest frequency to display (Hz)
        highest_frequency: Highest frequency to display (Hz)

    Returns:
        Tuple of (start index, stop index), both inclusive

    Example:
        bins = [10, 20, 40, 80, 160], low = 30, high = 100 -> (2, 4)
    """
    bins = np.asarray(bins, dtype=np.float64)
    num_bins = len(bins)

    if not use_limited_range:
        return 0, num_bins - 1

    start_index = 0
    stop_index = start_index

    above_low = np.flatnonzero(bins >= lowest_frequency)
    if above_low.size == 0:
        logger.debug("No bin reaches %s Hz, display range collapses to (0, 0)",
                     lowest_frequency)
        return start_index, stop_index
    start_index = int(above_low[0])

    # The upper bound is searched from the start index onwards
    above_high = np.flatnonzero(bins[start_index:] >= highest_frequency)
    if above_high.size == 0:
        logger.debug("No bin reaches %s Hz, stop index left at %d",
                     highest_frequency, stop_index)
    else:
        stop_index = start_index + int(above_high[0])

    return start_index, stop_index


@dataclass
class DisplayRangeConfig:
    """
    Configuration of the displayed frequency range.

    Attributes:
        use_limited_range: Clamp to [lowest_frequency, highest_frequency]
        lowest_frequency: Lower display limit in Hz
        highest_frequency: Upper display limit in Hz
    """
    use_limited_range: bool = False
    lowest_frequency: float = 20.0
    highest_frequency: float = 20000.0

    def __post_init__(self):
        """Validate the bounds."""
        if math.isnan(self.lowest_frequency) or math.isnan(self.highest_frequency):
            raise ValueError("Frequency bounds must not be NaN")
        if self.lowest_frequency < 0:
            raise ValueError("Lowest frequency must not be negative")
        if self.highest_frequency < self.lowest_frequency:
            raise ValueError("Highest frequency must not be below lowest frequency")

    def indices(self, bins: np.ndarray) -> tuple[int, int]:
        """Displayable (start, stop) indices for these bins."""
        return clamped_frequency_range_indices(
            bins,
            self.use_limited_range,
            self.lowest_frequency,
            self.highest_frequency,
        )


def clamp_to_display_range(
    bins: np.ndarray,
    *arrays: np.ndarray,
    config: Optional[DisplayRangeConfig] = None,
) -> tuple[np.ndarray, ...]:
    """
    Cut bins and parallel arrays (magnitude, phase, ...) to the display range.

    Args:
        bins: Bin center frequencies in Hz
        *arrays: Arrays of the same length as bins
        config: Display range, default: full range

    Returns:
        Tuple (bins, *arrays), each sliced to [start, stop] inclusive
    """
    if config is None:
        config = DisplayRangeConfig()

    bins = np.asarray(bins)
    for array in arrays:
        if len(array) != len(bins):
            raise ValueError(
                f"Array length {len(array)} does not match number of bins {len(bins)}"
            )

    start, stop = config.indices(bins)
    selection = slice(start, stop + 1)
    return (bins[selection],) + tuple(np.asarray(a)[selection] for a in arrays)
