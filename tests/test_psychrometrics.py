"""
Tests for saturation pressure and humidity projection.
"""

import numpy as np
import pytest

from airing.exceptions import NumericContractError
from airing.psychrometrics import project, saturation_pressure, vapor_pressure


class TestSaturationPressure:
    """Test the IAPWS-IF97 saturation pressure correlation."""

    @pytest.mark.parametrize(
        "celsius, expected_pa",
        [
            (0.01, 611.657),
            (20.0, 2339.2),
            (100.0, 101418.0),
        ],
    )
    def test_reference_values(self, celsius, expected_pa):
        """Known steam-table values."""
        assert saturation_pressure(celsius) == pytest.approx(expected_pa, rel=1e-3)

    def test_strictly_increasing_in_weather_range(self):
        """Pressure grows with temperature from -20 to 45 °C."""
        pressures = saturation_pressure(np.linspace(-20.0, 45.0, 651))

        assert np.all(np.diff(pressures) > 0)

    def test_finite_in_extended_range(self):
        """Sub-freezing and hot inputs stay finite."""
        pressures = saturation_pressure(np.linspace(-50.0, 60.0, 111))

        assert np.all(np.isfinite(pressures))
        assert np.all(pressures > 0)

    def test_scalar_input_returns_float(self):
        """Scalar in, plain float out."""
        assert isinstance(saturation_pressure(21.5), float)

    def test_non_finite_result_raises(self):
        """NaN input violates the numeric contract."""
        with pytest.raises(NumericContractError):
            saturation_pressure(float("nan"))


class TestProject:
    """Test projection of relative humidity onto reference temperatures."""

    def test_identity_at_observed_temperature(self):
        """Projecting onto the observed temperature returns the observed RH."""
        for temperature, rh in [(-5.0, 90.0), (12.3, 47.0), (30.0, 80.0)]:
            assert project(temperature, rh, [temperature]) == pytest.approx([rh])

    def test_exact_identity_for_half_saturation(self):
        """22 °C at 50 % projects to exactly 50.0 at 22 °C."""
        assert project(22.0, 50.0, [22.0]) == [50.0]

    def test_proportional_to_observed_humidity(self):
        """Doubling RH doubles every projected value."""
        references = [16.0, 18.0, 20.0, 22.0]

        single = project(10.0, 35.0, references)
        double = project(10.0, 70.0, references)

        assert double == pytest.approx([2 * value for value in single])

    def test_supersaturation_is_not_clamped(self):
        """Warm humid air cooled to 16 °C exceeds 100 %."""
        (projected,) = project(25.0, 80.0, [16.0])

        assert projected > 100.0
        assert projected == pytest.approx(139.5, abs=0.5)

    def test_colder_outdoor_air_dries_when_heated(self):
        """Heating cold saturated air lowers its RH."""
        projected = project(0.0, 100.0, [16.0, 22.0])

        assert projected[0] < 40.0
        assert projected[1] < projected[0]

    def test_order_follows_reference_temperatures(self):
        """One value per reference temperature, in the same order."""
        references = [22.0, 16.0, 19.0]

        projected = project(15.0, 70.0, references)

        assert len(projected) == 3
        assert projected[0] < projected[2] < projected[1]

    def test_empty_reference_list(self):
        """No reference temperatures, no projections."""
        assert project(15.0, 70.0, []) == []

    def test_matches_vapor_pressure_definition(self):
        """Projected RH equals actual over saturated vapor pressure."""
        actual = vapor_pressure(8.0, 75.0)

        (projected,) = project(8.0, 75.0, [20.0])

        assert projected == pytest.approx(100.0 * actual / saturation_pressure(20.0))
