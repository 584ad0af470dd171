"""
Core signal math module - stateless, fully testable without GUI dependencies.

This module contains all numeric logic:
- dB <-> linear level conversion
- Phase vector unwrap and cleanup for charting
- Band number <-> center frequency mapping
- Octave range classification
- Displayable frequency range of bin arrays
"""

from .levels import (
    OCTAVE_BANDWIDTH_TO_QUALITY_FACTOR_RATIO,
    magnitude_to_db,
    power_ratio_to_db,
    db_to_magnitude,
    db_to_power_ratio,
    voltage_ratio,
    voltage_ratio_to_db,
    peaking_voltage_ratio,
    complex_to_db,
    bandwidth_to_q,
    angular_frequency,
    frequency_to_s_domain,
)
from .phase import (
    unwrap_phase,
    unwrap_phase_sequence,
    normalize_phase,
    cleanup_phase,
    cleanup_polarity,
    prepare_phase_for_display,
)
from .bands import (
    OctaveFraction,
    band_number_at_1khz,
    center_frequency,
    center_frequencies,
    band_number_for_frequency,
    nominal_center_frequency,
)
from .center_frequencies import (
    NOMINAL_FULL_OCTAVE_CENTER_FREQUENCIES,
    NOMINAL_THIRD_OCTAVE_CENTER_FREQUENCIES,
)
from .octave_ranges import (
    OctaveRange,
    FrequencyRange,
    range_for_frequency,
    is_frequency_in_range,
    default_center_frequency_for_range,
    octave_offset,
)
from .frequency_range import (
    DisplayRangeConfig,
    clamped_frequency_range_indices,
    clamp_to_display_range,
)

__all__ = [
    "OCTAVE_BANDWIDTH_TO_QUALITY_FACTOR_RATIO",
    "magnitude_to_db",
    "power_ratio_to_db",
    "db_to_magnitude",
    "db_to_power_ratio",
    "voltage_ratio",
    "voltage_ratio_to_db",
    "peaking_voltage_ratio",
    "complex_to_db",
    "bandwidth_to_q",
    "angular_frequency",
    "frequency_to_s_domain",
    "unwrap_phase",
    "unwrap_phase_sequence",
    "normalize_phase",
    "cleanup_phase",
    "cleanup_polarity",
    "prepare_phase_for_display",
    "OctaveFraction",
    "band_number_at_1khz",
    "center_frequency",
    "center_frequencies",
    "band_number_for_frequency",
    "nominal_center_frequency",
    "NOMINAL_FULL_OCTAVE_CENTER_FREQUENCIES",
    "NOMINAL_THIRD_OCTAVE_CENTER_FREQUENCIES",
    "OctaveRange",
    "FrequencyRange",
    "range_for_frequency",
    "is_frequency_in_range",
    "default_center_frequency_for_range",
    "octave_offset",
    "DisplayRangeConfig",
    "clamped_frequency_range_indices",
    "clamp_to_display_range",
]
