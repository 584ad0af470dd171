"""
Phase Processing

Cleanup of frequency-response phase vectors (in degrees) for stable charting.

Processing pipeline for display:
    normalize_phase -> cleanup_phase -> cleanup_polarity

Technical assumptions:
- All sequence functions work IN PLACE on the caller's buffer
  (numpy array or list) and return None
- unwrap_phase_sequence() folds every value independently into [-180, 180),
  it is NOT a cumulative unwrap like numpy.unwrap
- normalize_phase() is the relative pass: each value is shifted by
  multiples of 360° towards its left neighbour
- ±180° is ambiguous; values within PHASE_TOLERANCE_DEG of it are snapped
- Non-finite values (e.g. -inf from magnitude_to_db(0)) pass through
  unchanged
"""

import math
from typing import MutableSequence

import numpy as np


# Tolerance (degrees) for treating a value as exactly ±180°
PHASE_TOLERANCE_DEG = 0.0001

# Differences beyond this are folded with fmod instead of stepped
_MAX_STEPPED_DIFFERENCE_DEG = 3600.0


def _is_near(value: float, target: float) -> bool:
    return (target - PHASE_TOLERANCE_DEG) < value < (target + PHASE_TOLERANCE_DEG)


def unwrap_phase(phase_deg: float) -> float:
    """
    Fold a single phase angle into [-180, 180).

    Uses repeated ±360° steps instead of a modulo, so values already
    inside the interval are returned bit-identical. Values of a full
    turn or more are reduced with fmod first, non-finite values are
    returned unchanged.
    """
    if not math.isfinite(phase_deg):
        return phase_deg
    if abs(phase_deg) >= 360.0:
        phase_deg = math.fmod(phase_deg, 360.0)

    while phase_deg >= 180.0:
        phase_deg -= 360.0
    while phase_deg < -180.0:
        phase_deg += 360.0
    return phase_deg


def unwrap_phase_sequence(phase_data: MutableSequence[float]) -> None:
    """Fold every phase value independently into [-180, 180) (in place)."""
    for i in range(len(phase_data)):
        phase_data[i] = unwrap_phase(phase_data[i])


def normalize_phase(phase_data: MutableSequence[float]) -> None:
    """
    Remove spurious jumps > 180° between neighbouring bins (in place).

    Walks left to right. For each pair (phase[i], phase[i+1]) the right
    value is shifted by ±360° until it lies within 180° of the left one.
    Must run before cleanup_phase(). Pairs with a non-finite value are
    left as they are.

    Example:
        [10, 370] -> [10, 10]
    """
    # Stop one shy of the last index, we compare pairs
    for i in range(len(phase_data) - 1):
        phase = phase_data[i]
        next_phase = phase_data[i + 1]

        if not (math.isfinite(phase) and math.isfinite(next_phase)):
            continue

        difference = next_phase - phase
        if abs(difference) > _MAX_STEPPED_DIFFERENCE_DEG:
            difference = math.fmod(difference, 360.0)
            if difference < -180.0:
                difference += 360.0
            elif difference > 180.0:
                difference -= 360.0
            phase_data[i + 1] = phase + difference
            continue

        while phase - next_phase > 180.0:
            next_phase += 360.0

        while next_phase - phase > 180.0:
            next_phase -= 360.0

        phase_data[i + 1] = next_phase


def cleanup_phase(phase_data: MutableSequence[float]) -> None:
    """
    Avoid flips between -180° and +180° in neighbouring bins (in place).

    Charting clients connect neighbouring points with lines, so an
    alternating sign at ±180° is drawn as a full-height wrap. A value
    at ±180° takes the sign of its left neighbour instead
    (neighbour <= 0 -> -180, else +180).
    """
    for i in range(len(phase_data) - 1):
        next_phase = phase_data[i + 1]
        if _is_near(next_phase, 180.0) or _is_near(next_phase, -180.0):
            phase_data[i + 1] = -180.0 if phase_data[i] <= 0.0 else 180.0


def cleanup_polarity(phase_data: MutableSequence[float]) -> None:
    """
    Set all +180° values to -180° (in place).

    Polarity reversal is conventionally shown as -180°, although both
    values describe the same phase. Applies to every element, the last
    one included.
    """
    for i in range(len(phase_data)):
        if _is_near(phase_data[i], 180.0):
            phase_data[i] = -180.0


def prepare_phase_for_display(phase_data) -> np.ndarray:
    """
    Run the full display pipeline on a copy of the phase data.

    Args:
        phase_data: Phase in degrees (any sequence, left unchanged)

    Returns:
        New float64 array: normalized, cleaned up, polarity convention applied
    """
    result = np.array(phase_data, dtype=np.float64)
    normalize_phase(result)
    cleanup_phase(result)
    cleanup_polarity(result)
    return result
