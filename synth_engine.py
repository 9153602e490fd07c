# synth_engine.py
"""
Turns harmonic state plus a time cursor into per-pixel sample buffers.

Everything here is a pure function of its arguments: nothing reads the
wall clock and nothing mutates the bank.
"""
import numpy as np
import state

PERIODS_ON_SCREEN = 2


def pixel_columns(width):
    """One column per logical pixel, x in [0, width)."""
    if width <= 0:
        return np.zeros(0)
    return np.arange(width, dtype=np.float64)


def sample_phases(width):
    # Two full periods of the fundamental across the surface
    x = pixel_columns(width)
    if len(x) == 0:
        return x, x
    return x, (x / width) * (2 * PERIODS_ON_SCREEN) * np.pi


def wobble(x, time, depth, time_rate, x_rate):
    return depth * np.sin(time_rate * time + x_rate * x)


def generate_single(partial, width, time, wobble_params=None):
    depth, time_rate, x_rate = wobble_params or state.shared.single_wobble
    x, t = sample_phases(width)
    wob = wobble(x, time, depth, time_rate, x_rate)
    return partial.amplitude * np.sin(partial.frequency * t) * (1 + wob)


def generate_sum(bank, width, time, wobble_params=None):
    depth, time_rate, x_rate = wobble_params or state.shared.sum_wobble
    x, t = sample_phases(width)
    if len(x) == 0:
        return x

    # Shared by every partial at a given x
    wob = wobble(x, time, depth, time_rate, x_rate)

    amps = bank.amplitudes()
    freqs = bank.frequencies()
    # [partials, width] phase matrix, summed down the partial axis
    waves = np.sin(np.outer(freqs, t)) * amps[:, None]
    return waves.sum(axis=0) * (1 + wob)
