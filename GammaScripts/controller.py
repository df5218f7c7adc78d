"""
Core color temperature logic over a display's controllers
"""
from dataclasses import dataclass

from .config import TEMPERATURE_NORM
from .gains import GainTriple
from .logger import Logger
from .models import get_model
from .ramp import decode_ramp, encode_ramp, pool_gains


@dataclass
class ScreenEstimate:
    """Estimated temperature of one screen"""
    screen: int
    temperature: int
    gains: GainTriple
    controllers: int


class ColorTemperature:
    """Reads and writes color temperature through a display's gamma ramps"""

    def __init__(self, display, model=None, logger=None):
        self.display = display
        self.model = model or get_model()
        self.logger = logger or Logger()

    def screens(self, screen=None):
        """Screen indices to work on: one when given, else all"""
        if screen is not None:
            return [screen]
        return list(range(self.display.screen_count()))

    def controllers(self, screen, crtc=None):
        """
        Controllers of a screen

        Args:
            screen: Screen index
            crtc: Controller index; an index outside the screen's
                  controllers selects all of them

        Returns:
            list: Controller objects, in enumeration order
        """
        controllers = self.display.enumerate_controllers(screen)
        if crtc is not None and 0 <= crtc < len(controllers):
            return [controllers[crtc]]
        return controllers

    def read_gains(self, screen, crtc=None):
        """Decoded gains per controller; None for controllers without a usable ramp"""
        decoded = []
        log_entries = []
        for controller in self.controllers(screen, crtc):
            if self.display.get_ramp_size(controller) <= 0:
                self.logger.debug(f"Screen {screen} CRTC {controller.index}: no gamma ramp, skipping")
                decoded.append((controller, None))
                continue

            gains = decode_ramp(self.display.get_ramp(controller))
            if gains is None:
                self.logger.debug(f"Screen {screen} CRTC {controller.index}: ramp too short, skipping")
            else:
                log_entries.append((screen, controller.index, controller.size, gains))
            decoded.append((controller, gains))

        self.logger.log_ramp_data(log_entries)
        return decoded

    def estimate(self, screen, crtc=None):
        """
        Estimate the temperature currently applied to a screen

        Gains of all selected controllers are pooled, so the controllers
        are assumed to share one temperature.

        Returns:
            ScreenEstimate: Pooled result; controllers == 0 when nothing
            could be read
        """
        decoded = self.read_gains(screen, crtc)
        if self.logger.verbose:
            for controller, gains in decoded:
                if gains is not None:
                    self.logger.debug(
                        f"Screen {screen} CRTC {controller.index}: Gamma: {gains} "
                        f"(~{self.model.estimate(gains, 1)}K)"
                    )

        pooled, count = pool_gains(gains for _, gains in decoded)
        temperature = self.model.estimate(pooled, count)

        normalized = pooled.normalized()
        if normalized is not None:
            self.logger.debug(f"Gamma: {normalized}")
        return ScreenEstimate(screen, temperature, pooled, count)

    def apply(self, screen, temp, crtc=None):
        """
        Set a screen's controllers to a temperature

        Args:
            screen: Screen index
            temp: Requested temperature in Kelvin
            crtc: Optional controller index

        Returns:
            int: The temperature actually applied
        """
        temp, warning = self.model.validate(temp)
        if warning:
            self.logger.warning(warning)

        gains = self.model.forward(temp)
        self.logger.debug(f"Gamma: {gains}")

        ramps = {}
        log_entries = []
        for controller in self.controllers(screen, crtc):
            size = self.display.get_ramp_size(controller)
            if size <= 0:
                self.logger.debug(f"Screen {screen} CRTC {controller.index}: no gamma ramp, skipping")
                continue
            if size not in ramps:
                ramps[size] = encode_ramp(gains, size)
            self.display.set_ramp(controller, ramps[size])
            log_entries.append((screen, controller.index, size, gains))

        self.logger.log_ramp_data(log_entries)
        return temp

    def shift(self, screen, delta, crtc=None):
        """Move a screen's estimated temperature by a signed offset"""
        current = self.estimate(screen, crtc).temperature
        self.logger.debug(f"Screen {screen}: {current}K {delta:+d}K")
        return self.apply(screen, current + delta, crtc)

    def reset(self, screen, crtc=None):
        return self.apply(screen, TEMPERATURE_NORM, crtc)
