"""
Logarithmic regression model between temperature and channel gains

Below the neutral point red stays at full scale and green/blue follow
K0 + K1 * ln(T - TEMPERATURE_ZERO). At and above it blue stays at full
scale and red/green follow K0 + K1 * ln(T - (TEMPERATURE_NORM - TEMPERATURE_ZERO)).
"""
import math
from enum import Enum

from .config import (
    TEMPERATURE_NORM, TEMPERATURE_ZERO,
    GAMMA_K0GR, GAMMA_K1GR, GAMMA_K0BR, GAMMA_K1BR,
    GAMMA_K0RB, GAMMA_K1RB, GAMMA_K0GB, GAMMA_K1GB,
)
from .gains import GainTriple, clamp


class Region(Enum):
    """Branch of the regression a gain triple belongs to"""
    FLOOR = "floor"
    WARM_GREEN_ONLY = "warm-green-only"
    WARM_JOINT = "warm-joint"
    COOL = "cool"


def analytic_gains(temp):
    """
    Channel gains for a temperature

    Args:
        temp: Temperature in Kelvin

    Returns:
        GainTriple: Gains, each saturated to [0, 1]
    """
    t = float(temp)
    if t < TEMPERATURE_NORM:
        if t < TEMPERATURE_ZERO:
            return GainTriple(1.0, 0.0, 0.0)
        g = math.log(t - TEMPERATURE_ZERO) if t > TEMPERATURE_ZERO else -math.inf
        return GainTriple(
            1.0,
            _regress(GAMMA_K0GR, GAMMA_K1GR, g),
            _regress(GAMMA_K0BR, GAMMA_K1BR, g),
        )

    g = math.log(t - (TEMPERATURE_NORM - TEMPERATURE_ZERO))
    return GainTriple(
        _regress(GAMMA_K0RB, GAMMA_K1RB, g),
        _regress(GAMMA_K0GB, GAMMA_K1GB, g),
        1.0,
    )


def _regress(k0, k1, g):
    if math.isinf(g):
        # ln(0): the line runs off to -inf for a positive slope
        return 0.0 if k1 > 0 else 1.0
    return clamp(k0 + k1 * g)


def region_of(gains):
    """Pick the regression branch for an already normalized triple"""
    if gains.blue - gains.red < 0.0:
        if gains.blue > 0.0:
            return Region.WARM_JOINT
        if gains.green > 0.0:
            return Region.WARM_GREEN_ONLY
        return Region.FLOOR
    return Region.COOL


def analytic_temperature(gains):
    """
    Estimate the temperature that produced a gain triple

    The triple is first divided by its largest channel so a uniform
    brightness scale in the ramp does not shift the estimate.

    Args:
        gains: GainTriple, any non-negative scale

    Returns:
        int: Temperature in Kelvin, TEMPERATURE_ZERO for an all-zero triple
    """
    normalized = GainTriple(*gains).normalized()
    if normalized is None:
        return TEMPERATURE_ZERO

    red, green, blue = normalized
    delta = blue - red
    region = region_of(normalized)

    if region is Region.FLOOR:
        t = float(TEMPERATURE_ZERO)
    elif region is Region.WARM_GREEN_ONLY:
        t = math.exp((green - GAMMA_K0GR) / GAMMA_K1GR) + TEMPERATURE_ZERO
    elif region is Region.WARM_JOINT:
        t = math.exp((green + 1.0 + delta - (GAMMA_K0GR + GAMMA_K0BR))
                     / (GAMMA_K1GR + GAMMA_K1BR)) + TEMPERATURE_ZERO
    else:
        t = math.exp((green + 1.0 - delta - (GAMMA_K0GB + GAMMA_K0RB))
                     / (GAMMA_K1GB + GAMMA_K1RB)) + (TEMPERATURE_NORM - TEMPERATURE_ZERO)

    return int(math.floor(t + 0.5))
