"""
Psychrometric projection of outdoor air onto indoor temperatures.

Outdoor air that enters a room keeps its water vapor partial pressure while
its temperature changes. Relative humidity at the new temperature is therefore

    RH_ref = 100 * e / e_s(T_ref),   e = RH_obs / 100 * e_s(T_obs)

where e_s is the saturation vapor pressure of water.

e_s uses the IAPWS-IF97 saturation-pressure equation (region 4) on absolute
temperature. Below 0 °C it extrapolates the curve over liquid water, which
stays smooth and finite down to -50 °C.
"""

import numpy as np

from .exceptions import NumericContractError

KELVIN_OFFSET = 273.15

# IAPWS-IF97 region 4 coefficients n1..n10
IF97_N = (
    0.11670521452767e4,
    -0.72421316703206e6,
    -0.17073846940092e2,
    0.12020824702470e5,
    -0.32325550322333e7,
    0.14915108613530e2,
    -0.48232657361591e4,
    0.40511340542057e6,
    -0.23855557567849,
    0.65017534844798e3,
)

MPA_TO_PA = 1e6


def celsius_to_kelvin(celsius):
    """Convert °C to K (scalar or array)."""
    return np.asarray(celsius, dtype=float) + KELVIN_OFFSET


def saturation_pressure(temperature_celsius):
    """Saturation vapor pressure of water.

    Args:
        temperature_celsius: Temperature (°C), scalar or array

    Returns:
        Saturation pressure (Pa), float for scalar input, array otherwise

    Raises:
        NumericContractError: If any result is not finite
    """
    n1, n2, n3, n4, n5, n6, n7, n8, n9, n10 = IF97_N
    T = celsius_to_kelvin(temperature_celsius)

    theta = T + n9 / (T - n10)
    theta2 = theta * theta
    A = theta2 + n1 * theta + n2
    B = n3 * theta2 + n4 * theta + n5
    C = n6 * theta2 + n7 * theta + n8

    with np.errstate(invalid="ignore", divide="ignore"):
        x = 2.0 * C / (-B + np.sqrt(B * B - 4.0 * A * C))
    x2 = x * x
    p = x2 * x2 * MPA_TO_PA

    if not np.all(np.isfinite(p)):
        raise NumericContractError(
            f"Saturation pressure is not finite for {temperature_celsius} °C"
        )

    if np.ndim(p) == 0:
        return float(p)
    return p


def vapor_pressure(temperature_celsius: float, rh_percent: float) -> float:
    """Actual water vapor partial pressure (Pa) of air at the given state."""
    return (rh_percent / 100.0) * saturation_pressure(temperature_celsius)


def project(observed_temperature: float, observed_rh_percent: float, reference_temperatures) -> list[float]:
    """Relative humidity the observed air would have at each reference temperature.

    Values above 100 % mean the air would be supersaturated indoors and are
    returned as-is. No rounding is applied.

    Args:
        observed_temperature: Outdoor temperature (°C)
        observed_rh_percent: Outdoor relative humidity (%)
        reference_temperatures: Indoor temperatures (°C), in display order

    Returns:
        Projected relative humidity (%) per reference temperature, same order
    """
    if len(reference_temperatures) == 0:
        return []

    actual = vapor_pressure(observed_temperature, observed_rh_percent)
    saturated = saturation_pressure(np.asarray(reference_temperatures, dtype=float))
    return (100.0 * (actual / saturated)).tolist()
