"""
Windows backend: per-monitor gamma ramps through GDI
"""
import ctypes
from ctypes import wintypes

import numpy as np
import win32api
import win32gui

from .display import Controller, Display, check_ramp
from .errors import DisplayError

RAMP_SIZE = 256

# GDI gamma ramp: 3 x 256 WORDs, red/green/blue
RampArray = (wintypes.WORD * RAMP_SIZE) * 3

gdi32 = ctypes.windll.gdi32
gdi32.GetDeviceGammaRamp.argtypes = [wintypes.HDC, ctypes.c_void_p]
gdi32.GetDeviceGammaRamp.restype = wintypes.BOOL
gdi32.SetDeviceGammaRamp.argtypes = [wintypes.HDC, ctypes.c_void_p]
gdi32.SetDeviceGammaRamp.restype = wintypes.BOOL


class WindowsDisplay(Display):
    """Single screen; every attached monitor is one controller"""

    def __init__(self):
        try:
            self.monitors = win32api.EnumDisplayMonitors()
        except win32api.error as e:
            raise DisplayError(f"EnumDisplayMonitors failed: {e}") from e
        if not self.monitors:
            raise DisplayError("No monitors attached")

    def screen_count(self):
        return 1

    def enumerate_controllers(self, screen):
        controllers = []
        for index, (hmonitor, _hdc, _rect) in enumerate(self.monitors):
            info = win32api.GetMonitorInfo(hmonitor)
            controllers.append(Controller(screen, index, info["Device"], RAMP_SIZE))
        return controllers

    def _device_context(self, controller):
        try:
            return win32gui.CreateDC("DISPLAY", controller.handle, None)
        except win32gui.error as e:
            raise DisplayError(f"CreateDC({controller.handle}) failed: {e}") from e

    def get_ramp(self, controller):
        buffer = RampArray()
        hdc = self._device_context(controller)
        try:
            if not gdi32.GetDeviceGammaRamp(hdc, ctypes.byref(buffer)):
                return np.zeros((3, 0), dtype=np.uint16)
        finally:
            win32gui.DeleteDC(hdc)
        return np.array(buffer, dtype=np.uint16)

    def set_ramp(self, controller, ramp):
        ramp = check_ramp(controller, ramp)
        buffer = RampArray()
        ctypes.memmove(buffer, ramp.ctypes.data, ctypes.sizeof(buffer))
        hdc = self._device_context(controller)
        try:
            if not gdi32.SetDeviceGammaRamp(hdc, ctypes.byref(buffer)):
                raise DisplayError(f"SetDeviceGammaRamp rejected the ramp for {controller.handle}")
        finally:
            win32gui.DeleteDC(hdc)
