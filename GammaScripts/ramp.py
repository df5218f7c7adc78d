"""
Gamma ramp construction and inspection
"""
import numpy as np

from .config import GAMMA_MULT
from .gains import GainTriple


RAMP_MAX = 65535


def ramp_levels(size):
    """Linear input levels 65535 * i / size for i in [0, size)"""
    return GAMMA_MULT * np.arange(size, dtype=np.float64) / size


def encode_ramp(gains, size):
    """
    Build a gamma ramp that scales a linear ramp by per-channel gains

    Args:
        gains: GainTriple with non-negative channels
        size: Number of entries of the controller's ramp

    Returns:
        np.ndarray: uint16 array of shape (3, size), rows red/green/blue
    """
    if size <= 0:
        return np.zeros((3, 0), dtype=np.uint16)

    levels = ramp_levels(size)
    channels = np.asarray(gains, dtype=np.float64).reshape(3, 1)
    samples = np.floor(levels * channels + 0.5)
    return np.clip(samples, 0, RAMP_MAX).astype(np.uint16)


def decode_ramp(ramp):
    """
    Recover the gains of a ramp from its last sample per channel

    The last sample is divided by 65535 * (N - 1) / N, the scale
    encode_ramp gives index N - 1, so encoder-made ramps round-trip.
    Only the terminal sample is inspected; ramps of any other shape
    give gains this model was not built for.

    Args:
        ramp: Array-like of shape (3, N)

    Returns:
        GainTriple or None: None when the ramp has fewer than two entries
    """
    ramp = np.asarray(ramp)
    size = ramp.shape[-1] if ramp.ndim == 2 else 0
    if size < 2:
        return None

    scale = GAMMA_MULT * (size - 1) / size
    last = ramp[:, size - 1].astype(np.float64) / scale
    return GainTriple(*(float(v) for v in last))


def pool_gains(triples):
    """
    Sum decoded gains channel by channel

    Args:
        triples: Iterable of GainTriple or None; None entries are skipped

    Returns:
        tuple: (GainTriple sum, number of contributing triples)
    """
    red = green = blue = 0.0
    count = 0
    for triple in triples:
        if triple is None:
            continue
        red += triple.red
        green += triple.green
        blue += triple.blue
        count += 1
    return GainTriple(red, green, blue), count

