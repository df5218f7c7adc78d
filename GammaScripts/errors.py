"""
Exceptions raised by the display layer
"""


class GammaError(Exception):
    """Base class for screen temperature errors"""


class DisplayError(GammaError):
    """The display server cannot be reached or refused a request"""


class RampError(GammaError):
    """A gamma ramp does not fit the controller it is written to"""
