"""
Whitepoint table and linear interpolation between its samples
"""
from numbers import Integral

from .config import TABLE_MIN, TABLE_MAX, TABLE_STEP, TEMPERATURE_NORM
from .gains import GainTriple


# Redshift whitepoints truncated to 500K steps, 1000K..10500K.
# The 10500K entry is only read as the successor of 10000K.
WHITEPOINTS = (
    GainTriple(1.00000000, 0.18172716, 0.00000000),  # 1000K
    GainTriple(1.00000000, 0.42322816, 0.00000000),
    GainTriple(1.00000000, 0.54360078, 0.08679949),
    GainTriple(1.00000000, 0.64373109, 0.28819679),
    GainTriple(1.00000000, 0.71976951, 0.42860152),
    GainTriple(1.00000000, 0.77987699, 0.54642268),
    GainTriple(1.00000000, 0.82854786, 0.64816570),
    GainTriple(1.00000000, 0.86860704, 0.73688797),
    GainTriple(1.00000000, 0.90198230, 0.81465502),
    GainTriple(1.00000000, 0.93853986, 0.88130458),
    GainTriple(1.00000000, 0.97107439, 0.94305985),
    GainTriple(1.00000000, 1.00000000, 1.00000000),  # 6500K
    GainTriple(0.95160805, 0.96983355, 1.00000000),
    GainTriple(0.91194747, 0.94470005, 1.00000000),
    GainTriple(0.87906581, 0.92357340, 1.00000000),
    GainTriple(0.85139976, 0.90559011, 1.00000000),
    GainTriple(0.82782969, 0.89011714, 1.00000000),
    GainTriple(0.80753191, 0.87667891, 1.00000000),
    GainTriple(0.78988728, 0.86491137, 1.00000000),  # 10000K
    GainTriple(0.77442176, 0.85453121, 1.00000000),
)


def in_table_range(temp):
    return isinstance(temp, Integral) and TABLE_MIN <= temp <= TABLE_MAX


def table_gains(temp):
    """
    Interpolate the whitepoint table at a temperature

    Args:
        temp: Temperature in Kelvin; anything outside the table range
              is replaced by the neutral temperature

    Returns:
        GainTriple: Interpolated channel gains
    """
    if not in_table_range(temp):
        temp = TEMPERATURE_NORM

    offset = int(temp) - TABLE_MIN
    index = offset // TABLE_STEP
    ratio = (offset % TABLE_STEP) / TABLE_STEP

    low = WHITEPOINTS[index]
    if ratio == 0:
        return low

    high = WHITEPOINTS[index + 1]
    return GainTriple(*(a * (1 - ratio) + b * ratio for a, b in zip(low, high)))
