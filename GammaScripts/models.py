"""
Forward/inverse model pairs selectable from the command line
"""
from dataclasses import dataclass
from typing import Callable, Optional

from .analytic import analytic_gains, analytic_temperature
from .config import (
    TEMPERATURE_NORM, TEMPERATURE_ZERO, TABLE_MIN, TABLE_MAX, POLYNOMIAL_ROUND_STEP,
)
from .polynomial import polynomial_temperature
from .whitepoints import table_gains


@dataclass(frozen=True)
class ModelPair:
    """A forward model with the inverse used to read its ramps back"""
    name: str
    forward: Callable
    inverse: Callable
    minimum: int
    maximum: Optional[int] = None
    # Out-of-range requests clamp to the bound instead of resetting to neutral
    clamp_low: bool = False
    # Inverse works on the mean of several controllers, not their sum
    needs_mean: bool = False

    def validate(self, temp):
        """
        Bring a requested temperature into the model's domain

        Returns:
            tuple: (temperature to apply, warning message or None)
        """
        if temp < self.minimum:
            if self.clamp_low:
                return self.minimum, f"Temperatures below {self.minimum} cannot be displayed."
            return TEMPERATURE_NORM, (
                f"Temperature {temp} is outside {self.minimum}-{self.maximum}, "
                f"using {TEMPERATURE_NORM}."
            )
        if self.maximum is not None and temp > self.maximum:
            return TEMPERATURE_NORM, (
                f"Temperature {temp} is outside {self.minimum}-{self.maximum}, "
                f"using {TEMPERATURE_NORM}."
            )
        return temp, None

    def estimate(self, pooled, count):
        """Run the inverse model on gains pooled from count controllers"""
        if count <= 0:
            return TEMPERATURE_ZERO
        if self.needs_mean:
            pooled = pooled.scaled(1.0 / count)
        return self.inverse(pooled)


def _polynomial_rounded(gains):
    return polynomial_temperature(gains, step=POLYNOMIAL_ROUND_STEP)


MODELS = {
    "analytic": ModelPair(
        name="analytic",
        forward=analytic_gains,
        inverse=analytic_temperature,
        minimum=TEMPERATURE_ZERO,
        clamp_low=True,
    ),
    "table": ModelPair(
        name="table",
        forward=table_gains,
        inverse=_polynomial_rounded,
        minimum=TABLE_MIN,
        maximum=TABLE_MAX,
        needs_mean=True,
    ),
}

DEFAULT_MODEL = "analytic"


def get_model(name=DEFAULT_MODEL):
    try:
        return MODELS[name]
    except KeyError:
        raise ValueError(f"Unknown model: {name}") from None
