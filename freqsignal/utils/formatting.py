"""
Formatting functions for frequencies and levels.

Converts numerical values to readable strings and parses metric
abbreviated frequencies ("1.25 kHz", "500Hz") back to Hz.
"""

import math
from typing import Callable


def _trim_fraction(text: str) -> str:
    """Drop trailing zeros of the fraction (and a dangling point)."""
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_frequency(hz: float, decimal_separator: str = ".") -> str:
    """
    Format frequency with metric abbreviation.

    Below 1 kHz up to one fraction digit is shown, above up to four
    fraction digits of kHz. Trailing zeros are dropped.

    Args:
        hz: Frequency in Hz
        decimal_separator: Locale decimal separator

    Returns:
        Formatted string (e.g. "31.5 Hz", "1.25 kHz", "16 kHz")
    """
    if hz < 1000.0:
        number, unit = _trim_fraction(f"{hz:.1f}"), "Hz"
    else:
        number, unit = _trim_fraction(f"{hz * 0.001:.4f}"), "kHz"

    if number == "-0":
        number = "0"
    return f"{number.replace('.', decimal_separator)} {unit}"


def expand_metric_frequency(
    text: str,
    number_parser: Callable[[str], float] = float,
) -> float:
    """
    Expand a metric abbreviated frequency to Hz.

    Surrounding whitespace is ignored, the space between number and unit
    is optional. The numeric part is handed to number_parser (e.g.
    locale.atof for locale formatting), whose errors propagate unchanged.

    Args:
        text: Frequency string (e.g. "1.25 kHz", "500Hz")
        number_parser: Converts the numeric part to float

    Returns:
        Frequency in Hz

    Raises:
        ValueError: No unit or unparsable number (from number_parser)
    """
    text = text.strip()
    has_units = "Hz" in text
    is_kilo = has_units and text.endswith("kHz")

    units_index = text.rfind("k") if is_kilo else text.rfind("H")
    numeric_text = text[:units_index].strip() if units_index >= 0 else ""

    frequency = number_parser(numeric_text)
    return frequency * 1000.0 if is_kilo else frequency


def format_db(level_db: float, precision: int = 1, decimal_separator: str = ".") -> str:
    """
    Format a level as produced by magnitude_to_db() and friends.

    Accepts Python floats and numpy scalars. Silence (-inf from a zero
    magnitude) and NaN (from a negative magnitude) are both shown as "-∞ dB".

    Args:
        level_db: Level in dB
        precision: Decimal places
        decimal_separator: Locale decimal separator

    Returns:
        Formatted string (e.g. "-12.3 dB")
    """
    level_db = float(level_db)
    if math.isnan(level_db) or level_db == -math.inf:
        return "-∞ dB"
    if level_db == math.inf:
        return "∞ dB"
    return f"{level_db:.{precision}f} dB".replace(".", decimal_separator)
