"""
X11 backend: CRTC gamma ramps through the XRandR extension
"""
import ctypes
import ctypes.util
from ctypes import POINTER, Structure, c_char_p, c_int, c_ulong, c_ushort, c_void_p

import numpy as np

from .display import Controller, Display, check_ramp
from .errors import DisplayError

XID = c_ulong
RRCrtc = XID
Time = c_ulong
Window = XID


class XRRScreenResources(Structure):
    _fields_ = [
        ("timestamp", Time),
        ("configTimestamp", Time),
        ("ncrtc", c_int),
        ("crtcs", POINTER(RRCrtc)),
        ("noutput", c_int),
        ("outputs", POINTER(XID)),
        ("nmode", c_int),
        ("modes", c_void_p),
    ]


class XRRCrtcGamma(Structure):
    _fields_ = [
        ("size", c_int),
        ("red", POINTER(c_ushort)),
        ("green", POINTER(c_ushort)),
        ("blue", POINTER(c_ushort)),
    ]


def _load(name):
    path = ctypes.util.find_library(name)
    if not path:
        raise DisplayError(f"lib{name} not found")
    try:
        return ctypes.cdll.LoadLibrary(path)
    except OSError as e:
        raise DisplayError(f"Could not load {path}: {e}") from e


def _bind(lib, name, restype, *argtypes):
    func = getattr(lib, name)
    func.restype = restype
    func.argtypes = list(argtypes)
    return func


class XRandRDisplay(Display):
    """Connection to an X server; one controller per CRTC of each screen"""

    def __init__(self, name=None):
        xlib = _load("X11")
        xrandr = _load("Xrandr")

        self._XOpenDisplay = _bind(xlib, "XOpenDisplay", c_void_p, c_char_p)
        self._XCloseDisplay = _bind(xlib, "XCloseDisplay", c_int, c_void_p)
        self._XScreenCount = _bind(xlib, "XScreenCount", c_int, c_void_p)
        self._XRootWindow = _bind(xlib, "XRootWindow", Window, c_void_p, c_int)
        self._XFlush = _bind(xlib, "XFlush", c_int, c_void_p)

        self._XRRGetScreenResourcesCurrent = _bind(
            xrandr, "XRRGetScreenResourcesCurrent", POINTER(XRRScreenResources), c_void_p, Window)
        self._XRRFreeScreenResources = _bind(
            xrandr, "XRRFreeScreenResources", None, POINTER(XRRScreenResources))
        self._XRRGetCrtcGammaSize = _bind(xrandr, "XRRGetCrtcGammaSize", c_int, c_void_p, RRCrtc)
        self._XRRGetCrtcGamma = _bind(xrandr, "XRRGetCrtcGamma", POINTER(XRRCrtcGamma), c_void_p, RRCrtc)
        self._XRRAllocGamma = _bind(xrandr, "XRRAllocGamma", POINTER(XRRCrtcGamma), c_int)
        self._XRRSetCrtcGamma = _bind(
            xrandr, "XRRSetCrtcGamma", None, c_void_p, RRCrtc, POINTER(XRRCrtcGamma))
        self._XRRFreeGamma = _bind(xrandr, "XRRFreeGamma", None, POINTER(XRRCrtcGamma))

        self.name = name
        self.dpy = self._XOpenDisplay(name.encode() if name else None)
        if not self.dpy:
            raise DisplayError(f"XOpenDisplay({name or 'NULL'}) failed")

    def screen_count(self):
        return self._XScreenCount(self.dpy)

    def enumerate_controllers(self, screen):
        root = self._XRootWindow(self.dpy, screen)
        res = self._XRRGetScreenResourcesCurrent(self.dpy, root)
        if not res:
            return []
        try:
            crtcs = [res.contents.crtcs[c] for c in range(res.contents.ncrtc)]
        finally:
            self._XRRFreeScreenResources(res)

        return [
            Controller(screen, index, crtc, self._XRRGetCrtcGammaSize(self.dpy, crtc))
            for index, crtc in enumerate(crtcs)
        ]

    def get_ramp_size(self, controller):
        return self._XRRGetCrtcGammaSize(self.dpy, controller.handle)

    def get_ramp(self, controller):
        gamma = self._XRRGetCrtcGamma(self.dpy, controller.handle)
        if not gamma:
            return np.zeros((3, 0), dtype=np.uint16)
        try:
            size = gamma.contents.size
            if size <= 0:
                return np.zeros((3, 0), dtype=np.uint16)
            return np.array([
                np.ctypeslib.as_array(gamma.contents.red, shape=(size,)),
                np.ctypeslib.as_array(gamma.contents.green, shape=(size,)),
                np.ctypeslib.as_array(gamma.contents.blue, shape=(size,)),
            ], dtype=np.uint16)
        finally:
            self._XRRFreeGamma(gamma)

    def set_ramp(self, controller, ramp):
        ramp = check_ramp(controller, ramp)
        size = controller.size
        gamma = self._XRRAllocGamma(size)
        if not gamma:
            raise DisplayError(f"XRRAllocGamma({size}) failed")
        try:
            nbytes = size * ctypes.sizeof(c_ushort)
            ctypes.memmove(gamma.contents.red, ramp[0].ctypes.data, nbytes)
            ctypes.memmove(gamma.contents.green, ramp[1].ctypes.data, nbytes)
            ctypes.memmove(gamma.contents.blue, ramp[2].ctypes.data, nbytes)
            self._XRRSetCrtcGamma(self.dpy, controller.handle, gamma)
            self._XFlush(self.dpy)
        finally:
            self._XRRFreeGamma(gamma)

    def close(self):
        if self.dpy:
            self._XCloseDisplay(self.dpy)
            self.dpy = None
