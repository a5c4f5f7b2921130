"""Numeric helpers for audio samples represented as Python floats."""

from __future__ import annotations

import math
import struct

EQUILIBRIUM = 0.0
"""The resting value of a sample: silence."""

SAMPLE_MIN = -1.0
SAMPLE_MAX = 1.0

_INVERSE_SQRT_MAGIC = 0x5F3759DF


def average(a: float, b: float) -> float:
    """Return the mean of two values."""
    return (a + b) / 2.0


def log(value: float, base: float) -> float:
    """Return the logarithm of ``value`` in the given ``base``."""
    return math.log(value) / math.log(base)


def gain(sample: float, factor: float) -> float:
    """Scale ``sample`` by ``factor`` decibels (power ratio, 10 dB per decade)."""
    linear = 10.0 ** (factor / 10.0)
    return sample * linear


def fast_sqrt(value: float) -> float:
    """Approximate the square root using the fast inverse square root trick.

    The value is treated as a 32-bit float; the estimate is refined with a
    single Newton step, so the result is accurate to roughly 0.2 %.
    """
    (bits,) = struct.unpack("<i", struct.pack("<f", value))
    bits = _INVERSE_SQRT_MAGIC - (bits >> 1)
    (estimate,) = struct.unpack("<f", struct.pack("<i", bits))
    inverse = estimate * (1.5 - (value * 0.5 * estimate * estimate))
    return 1.0 / inverse