"""
Tests für Bandnummern und Mittenfrequenzen.
"""

import math

import pytest
import numpy as np

from freqsignal.core.bands import (
    OctaveFraction,
    band_number_at_1khz,
    center_frequency,
    center_frequencies,
    band_number_for_frequency,
    nominal_center_frequency,
)
from freqsignal.core.center_frequencies import (
    NOMINAL_FULL_OCTAVE_CENTER_FREQUENCIES,
    NOMINAL_THIRD_OCTAVE_CENTER_FREQUENCIES,
)


DIVIDERS = [1, 3, 6, 12, 24, 48]


class TestOctaveFraction:
    """Tests für den Oktavteiler."""

    def test_values(self):
        """Teiler entsprechen 1/N-Oktave."""
        assert OctaveFraction.NARROW_BAND.value == 0
        assert OctaveFraction.OCTAVE.value == 1
        assert OctaveFraction.THIRD_OCTAVE.value == 3
        assert OctaveFraction.FORTYEIGHTH_OCTAVE.value == 48

    def test_narrow_band(self):
        """Nur Teiler 0 ist Schmalband."""
        assert OctaveFraction.NARROW_BAND.is_narrow_band
        assert not OctaveFraction.THIRD_OCTAVE.is_narrow_band


class TestBandNumberAt1kHz:
    """Tests für die Bandnummer von 1 kHz."""

    @pytest.mark.parametrize("divider, expected", [
        (1, 10), (3, 30), (6, 60), (12, 120), (24, 240), (48, 480),
    ])
    def test_standard_dividers(self, divider, expected):
        """Skaliert vom Terzraster (Band 30)."""
        assert band_number_at_1khz(divider) == expected

    def test_enum_divider(self):
        """OctaveFraction wird wie sein Zahlenwert behandelt."""
        assert band_number_at_1khz(OctaveFraction.SIXTH_OCTAVE) == 60

    def test_real_divider(self):
        """Nicht-ganzzahlige Teiler sind erlaubt."""
        assert band_number_at_1khz(1.5) == 15
        assert band_number_at_1khz(4.5) == 45


class TestCenterFrequency:
    """Tests für Mittenfrequenz aus Bandnummer."""

    @pytest.mark.parametrize("divider", DIVIDERS)
    def test_anchor_exact(self, divider):
        """1 kHz-Band ergibt exakt 1000.0 Hz."""
        assert center_frequency(band_number_at_1khz(divider), divider) == 1000.0

    @pytest.mark.parametrize("fraction", [
        f for f in OctaveFraction if not f.is_narrow_band
    ])
    def test_anchor_exact_enum(self, fraction):
        """Anker gilt auch für OctaveFraction."""
        assert center_frequency(band_number_at_1khz(fraction), fraction) == 1000.0

    def test_third_octave_steps(self):
        """3 Terzen = 1 Oktave."""
        assert center_frequency(33, 3) == 2000.0
        assert center_frequency(27, 3) == 500.0
        assert center_frequency(31, 3) == pytest.approx(1000 * 2 ** (1 / 3))

    def test_octave_steps(self):
        """Oktavraster: Band 10 = 1 kHz."""
        assert center_frequency(11, 1) == 2000.0
        assert center_frequency(7, 1) == 125.0

    @pytest.mark.parametrize("divider", DIVIDERS)
    def test_monotonic(self, divider):
        """Streng monoton steigend mit der Bandnummer."""
        anchor = band_number_at_1khz(divider)
        values = [center_frequency(n, divider) for n in range(anchor - 50, anchor + 50)]

        assert all(b > a for a, b in zip(values, values[1:]))

    def test_negative_band_numbers(self):
        """Negative Bandnummern liefern kleine, positive Frequenzen."""
        fc = center_frequency(-3, 1)

        assert fc == pytest.approx(1000 * 2 ** -13)
        assert fc > 0

    def test_zero_divider_fails(self):
        """Teiler 0 (Schmalband) ist ungültig."""
        with pytest.raises(ZeroDivisionError):
            center_frequency(30, 0)

        with pytest.raises(ZeroDivisionError):
            center_frequency(30, OctaveFraction.NARROW_BAND)


class TestCenterFrequencies:
    """Tests für vektorisierte Mittenfrequenzen."""

    def test_range_inclusive(self):
        """Erste und letzte Bandnummer sind enthalten."""
        result = center_frequencies(27, 33, 3)

        assert len(result) == 7
        assert result[0] == 500.0
        assert result[-1] == 2000.0

    def test_matches_scalar(self):
        """Identisch zur skalaren Berechnung."""
        result = center_frequencies(10, 45, OctaveFraction.THIRD_OCTAVE)
        expected = [center_frequency(n, 3) for n in range(10, 46)]

        np.testing.assert_allclose(result, expected, rtol=1e-12)

    def test_zero_divider_fails(self):
        """Teiler 0 ist auch hier ungültig."""
        with pytest.raises(ZeroDivisionError):
            center_frequencies(0, 10, 0)


class TestBandNumberForFrequency:
    """Tests für Bandnummer aus Frequenz."""

    @pytest.mark.parametrize("divider", DIVIDERS)
    def test_round_trip(self, divider):
        """Bandnummer -> Frequenz -> Bandnummer."""
        anchor = band_number_at_1khz(divider)
        for n in range(anchor - 30, anchor + 30):
            assert band_number_for_frequency(center_frequency(n, divider), divider) == n

    def test_nominal_frequencies(self):
        """Nominelle Terzfrequenzen treffen ihr Band."""
        assert band_number_for_frequency(1000.0, 3) == 30
        assert band_number_for_frequency(31.5, 3) == 15
        assert band_number_for_frequency(12500.0, 3) == 41
        assert band_number_for_frequency(63.0, OctaveFraction.OCTAVE) == 6


class TestNominalCenterFrequency:
    """Tests für nominelle Mittenfrequenzen (Tabellen)."""

    def test_anchor(self):
        """1 kHz in beiden Tabellen."""
        assert nominal_center_frequency(30, 3) == 1000.0
        assert nominal_center_frequency(10, 1) == 1000.0

    def test_lookup(self):
        """Stichproben aus den Tabellen."""
        assert nominal_center_frequency(15, 3) == 31.5
        assert nominal_center_frequency(35, OctaveFraction.THIRD_OCTAVE) == 3150.0
        assert nominal_center_frequency(3, 1) == 8.5

    def test_unused_entries_nan(self):
        """Ungenutzte niedrige Bandnummern sind NaN."""
        assert math.isnan(nominal_center_frequency(5, 3))
        assert math.isnan(nominal_center_frequency(0, 1))

    def test_out_of_table_nan(self):
        """Bandnummern außerhalb der Tabelle sind NaN."""
        assert math.isnan(nominal_center_frequency(46, 3))
        assert math.isnan(nominal_center_frequency(-1, 3))

    def test_other_dividers_nan(self):
        """Für andere Teiler existiert keine Tabelle."""
        assert math.isnan(nominal_center_frequency(60, 6))

    def test_close_to_exact(self):
        """Nominelle Werte weichen < 3 % vom exakten Wert ab."""
        for n in range(10, 46):
            nominal = nominal_center_frequency(n, 3)
            assert nominal == pytest.approx(center_frequency(n, 3), rel=0.03)


class TestTables:
    """Tests für die Mittenfrequenztabellen."""

    def test_full_octave_table(self):
        """Oktavtabelle: 16 Einträge, 3 ungenutzt."""
        assert len(NOMINAL_FULL_OCTAVE_CENTER_FREQUENCIES) == 16
        assert np.isnan(NOMINAL_FULL_OCTAVE_CENTER_FREQUENCIES).sum() == 3
        assert NOMINAL_FULL_OCTAVE_CENTER_FREQUENCIES[15] == 31500.0

    def test_third_octave_table(self):
        """Terztabelle: 46 Einträge, 10 ungenutzt."""
        assert len(NOMINAL_THIRD_OCTAVE_CENTER_FREQUENCIES) == 46
        assert np.isnan(NOMINAL_THIRD_OCTAVE_CENTER_FREQUENCIES).sum() == 10
        assert NOMINAL_THIRD_OCTAVE_CENTER_FREQUENCIES[10] == 10.0

    def test_frequency_ratio(self):
        """Verhältnis benachbarter Terzen ≈ 2^(1/3)."""
        used = NOMINAL_THIRD_OCTAVE_CENTER_FREQUENCIES[10:]
        ratios = used[1:] / used[:-1]

        np.testing.assert_allclose(ratios, 2 ** (1 / 3), rtol=0.05)

    def test_tables_read_only(self):
        """Tabellen können nicht verändert werden."""
        with pytest.raises(ValueError):
            NOMINAL_THIRD_OCTAVE_CENTER_FREQUENCIES[30] = 0.0
