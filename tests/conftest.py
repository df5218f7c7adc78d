import numpy as np
import pytest

from GammaScripts.display import Controller, Display, check_ramp
from GammaScripts.gains import NEUTRAL_GAINS
from GammaScripts.ramp import encode_ramp


class FakeDisplay(Display):
    """In-memory display; each screen is a list of controller ramp sizes"""

    def __init__(self, screens):
        self.ramps = {}
        self.controllers = []
        self.set_calls = []
        self.closed = False
        for screen, sizes in enumerate(screens):
            controllers = []
            for index, size in enumerate(sizes):
                controllers.append(Controller(screen, index, (screen, index), size))
                self.ramps[(screen, index)] = encode_ramp(NEUTRAL_GAINS, size)
            self.controllers.append(controllers)

    def screen_count(self):
        return len(self.controllers)

    def enumerate_controllers(self, screen):
        return list(self.controllers[screen])

    def get_ramp(self, controller):
        return self.ramps[controller.handle].copy()

    def set_ramp(self, controller, ramp):
        self.ramps[controller.handle] = check_ramp(controller, ramp).copy()
        self.set_calls.append(controller.handle)

    def close(self):
        self.closed = True


@pytest.fixture
def make_display():
    return FakeDisplay


@pytest.fixture
def display():
    # Screen 0: two CRTCs, one without a gamma ramp; screen 1: one CRTC
    return FakeDisplay([[256, 0, 1024], [256]])


@pytest.fixture
def ramp_of():
    def _ramp_of(display, screen, index):
        return np.asarray(display.ramps[(screen, index)])
    return _ramp_of


@pytest.fixture
def is_monotonic():
    def _is_monotonic(ramp):
        ramp = np.asarray(ramp, dtype=np.int64)
        if ramp.shape[-1] < 2:
            return True
        return bool(np.all(np.diff(ramp, axis=-1) >= 0))
    return _is_monotonic
