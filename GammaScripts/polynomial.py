"""
Quadratic regression from channel gains back to temperature
"""
import math

from .config import (
    POLY_C0, POLY_CR1, POLY_CR2, POLY_CG1, POLY_CG2, POLY_CB1, POLY_CB2,
)


def polynomial_value(gains):
    """Raw regression value, no rounding or clamping"""
    r, g, b = gains
    return (POLY_C0
            + POLY_CR1 * r + POLY_CR2 * r * r
            + POLY_CG1 * g + POLY_CG2 * g * g
            + POLY_CB1 * b + POLY_CB2 * b * b)


def polynomial_temperature(gains, step=None):
    """
    Estimate temperature from gains with the quadratic fit

    Args:
        gains: GainTriple in the [0, 1] range the fit was made for
        step: Optional rounding step in Kelvin (e.g. 100)

    Returns:
        int: Estimated temperature; not clamped to the table range
    """
    t = polynomial_value(gains)
    if step:
        return int(math.floor(t / step + 0.5)) * step
    return int(math.floor(t + 0.5))
