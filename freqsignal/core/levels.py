"""
Level Conversion

Conversions between linear magnitudes/ratios and decibels, plus a few
analog-domain (s-domain) helpers used by filter-design callers.

Technical assumptions:
- All functions accept scalars or numpy arrays (ufunc semantics)
- NO bounds checking: log10(0) = -inf and log10(x < 0) = NaN are returned
  as-is, downstream charting treats them as "silence" markers
- Floating point warnings for these cases are suppressed, not raised
- Peaking/shelving filter gains use 10^(dB/40) (Audio EQ Cookbook),
  all other voltage ratios use 10^(dB/20)
"""

from typing import Union

import numpy as np


ArrayLike = Union[float, np.ndarray]

# Ratio between one octave of bandwidth and the quality factor Q.
# Q for other bandwidths is derived relative to the one octave case.
OCTAVE_BANDWIDTH_TO_QUALITY_FACTOR_RATIO = 1.43


def magnitude_to_db(magnitude: ArrayLike) -> ArrayLike:
    """
    Convert linear magnitude to decibels: 20 × log10(m).

    Args:
        magnitude: Linear magnitude (e.g. |H(f)|)

    Returns:
        Level in dB (-inf for 0, NaN for negative input)
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return 20.0 * np.log10(magnitude)


def power_ratio_to_db(power_ratio: ArrayLike) -> ArrayLike:
    """Convert linear power ratio to decibels: 10 × log10(p)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return 10.0 * np.log10(power_ratio)


def db_to_magnitude(db: ArrayLike) -> ArrayLike:
    """Convert decibels to linear magnitude: 10^(dB/20)."""
    return np.power(10.0, np.divide(db, 20.0))


def db_to_power_ratio(db: ArrayLike) -> ArrayLike:
    """Convert decibels to linear power ratio: 10^(dB/10)."""
    return np.power(10.0, np.divide(db, 10.0))


def voltage_ratio_to_db(voltage_ratio: ArrayLike) -> ArrayLike:
    """Power ratio in dB from a linear voltage ratio."""
    return magnitude_to_db(voltage_ratio)


def voltage_ratio(db: ArrayLike) -> ArrayLike:
    """
    Linear voltage ratio from a gain in dB.

    For all filter types except peaking and shelving filters,
    see peaking_voltage_ratio() for those.
    """
    return db_to_magnitude(db)


def peaking_voltage_ratio(db: ArrayLike) -> ArrayLike:
    """
    Linear voltage ratio for peaking and shelving filters: 10^(dB/40).

    The Audio EQ Cookbook defines the gain term A of peaking/shelving
    biquads as the square root of the plain voltage ratio, hence the
    denominator 40 instead of 20.
    """
    return np.power(10.0, np.divide(db, 40.0))


def complex_to_db(value: Union[complex, np.ndarray]) -> ArrayLike:
    """
    Level in dB of a complex frequency-response value.

    The modulus sqrt(re² + im²) is converted with magnitude_to_db().
    """
    return magnitude_to_db(np.abs(value))


def bandwidth_to_q(bandwidth: float) -> float:
    """
    Convert a relative bandwidth in octaves to a quality factor.

    Args:
        bandwidth: Bandwidth in octaves (1.0 = one full octave, 1/3 = third-octave)

    Returns:
        Q = 1.43 / bandwidth
    """
    reference_q = 1.0 / bandwidth
    return reference_q * OCTAVE_BANDWIDTH_TO_QUALITY_FACTOR_RATIO


def angular_frequency(frequency_hz: ArrayLike) -> ArrayLike:
    """Angular frequency ω = 2πf in rad/s."""
    return 2.0 * np.pi * np.asarray(frequency_hz, dtype=np.float64)


def frequency_to_s_domain(frequency_hz: float) -> complex:
    """
    Laplace variable s = σ + jω for a frequency, with σ blanked.

    Equivalent to the pure sinusoidal slope j·2πf used when evaluating
    analog transfer functions along the imaginary axis.
    """
    return complex(0.0, float(angular_frequency(frequency_hz)))
