"""
Display collaborator: screens, controllers and their gamma ramps
"""
import sys
from dataclasses import dataclass
from typing import Any

import numpy as np

from .errors import RampError


@dataclass
class Controller:
    """One gamma-owning output controller (CRTC) of a screen"""
    screen: int
    index: int
    handle: Any
    size: int


class Display:
    """
    Base class for display backends

    Backends implement the four ramp calls; the orchestrator never
    touches anything else.
    """

    def screen_count(self):
        raise NotImplementedError

    def enumerate_controllers(self, screen):
        raise NotImplementedError

    def get_ramp_size(self, controller):
        return controller.size

    def get_ramp(self, controller):
        raise NotImplementedError

    def set_ramp(self, controller, ramp):
        raise NotImplementedError

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def check_ramp(controller, ramp):
    """
    Validate a ramp before it is written to a controller

    Returns:
        np.ndarray: The ramp as a contiguous uint16 array
    """
    ramp = np.ascontiguousarray(ramp, dtype=np.uint16)
    if ramp.shape != (3, controller.size):
        raise RampError(
            f"Ramp of shape {ramp.shape} does not fit controller "
            f"{controller.index} of size {controller.size}"
        )
    return ramp


def open_display(name=None):
    """
    Connect to the platform's display server

    Args:
        name: X display name; ignored on Windows

    Raises:
        DisplayError: When the display cannot be reached
    """
    if sys.platform == "win32":
        from .wingdi import WindowsDisplay
        return WindowsDisplay()

    from .xrandr import XRandRDisplay
    return XRandRDisplay(name)
