"""
Nominal Center Frequency Tables

Standard (rounded) center frequencies for full-octave and 1/3-octave bands,
indexed by band number.

Technical assumptions:
- Band numbers follow the grid used by bands.center_frequency():
  band 10 = 1 kHz for full octaves, band 30 = 1 kHz for 1/3-octaves
- Indices below the audible/useful range hold NaN
- Values are nominal (IEC 61260 preferred numbers), not exact 2^(n/N)
"""

import numpy as np


def _frozen(values: list[float]) -> np.ndarray:
    table = np.array(values, dtype=np.float64)
    table.flags.writeable = False
    return table


NOMINAL_FULL_OCTAVE_CENTER_FREQUENCIES = _frozen([
    # Unused low band numbers
    np.nan, np.nan, np.nan,
    8.5, 16.0, 31.5, 63.0, 125.0, 250.0, 500.0,
    # Band 10 = 1 kHz
    1000.0, 2000.0, 4000.0, 8000.0, 16000.0, 31500.0,
])

NOMINAL_THIRD_OCTAVE_CENTER_FREQUENCIES = _frozen([
    # Unused low band numbers
    np.nan, np.nan, np.nan, np.nan, np.nan,
    np.nan, np.nan, np.nan, np.nan, np.nan,
    # Infrasound / low bass
    10.0, 12.5, 16.0, 20.0, 25.0, 31.5, 40.0, 50.0, 63.0, 80.0,
    # Bass and lower mid range
    100.0, 125.0, 160.0, 200.0, 250.0, 315.0, 400.0, 500.0, 630.0, 800.0,
    # Band 30 = 1 kHz
    1000.0, 1250.0, 1600.0, 2000.0, 2500.0, 3150.0, 4000.0, 5000.0, 6300.0, 8000.0,
    # High frequencies and beyond
    10000.0, 12500.0, 16000.0, 20000.0, 25000.0, 31500.0,
])
