"""
Per-channel gain triples
"""
from typing import NamedTuple


class GainTriple(NamedTuple):
    """Linear red/green/blue multipliers applied to a neutral ramp"""
    red: float
    green: float
    blue: float

    def normalized(self):
        """
        Scale the triple so its dominant channel becomes 1.0

        Returns:
            GainTriple or None: None when every channel is zero
        """
        peak = max(self)
        if peak <= 0.0:
            return None
        return GainTriple(self.red / peak, self.green / peak, self.blue / peak)

    def scaled(self, factor):
        return GainTriple(self.red * factor, self.green * factor, self.blue * factor)

    def __str__(self):
        return f"{self.red:f}, {self.green:f}, {self.blue:f}"


NEUTRAL_GAINS = GainTriple(1.0, 1.0, 1.0)


def clamp(value, low=0.0, high=1.0):
    """Saturate value to [low, high]"""
    return max(low, min(high, value))
