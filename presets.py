# presets.py
import logging
import math
from enum import Enum

from harmonic_bank import clamp

logger = logging.getLogger(__name__)


class Preset(Enum):
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"
    RESET = "reset"


def _square(h):
    # Odd harmonics only, 1/h decay
    if h % 2 == 1:
        return 4 / (math.pi * h)
    return 0.0


def _sawtooth(h):
    # Every harmonic, alternating sign
    sign = 1 if h % 2 == 1 else -1
    return sign * 2 / (math.pi * h)


def _triangle(h):
    # Odd harmonics, alternating sign, 1/h^2 decay
    if h % 2 == 1:
        sign = 1 if (h // 2) % 2 == 0 else -1
        return sign * 8 / (math.pi * math.pi * h * h)
    return 0.0


def _reset(h):
    return 0.0


def _coefficient_fn(preset):
    if preset is Preset.SQUARE:
        return _square
    if preset is Preset.SAWTOOTH:
        return _sawtooth
    if preset is Preset.TRIANGLE:
        return _triangle
    if preset is Preset.RESET:
        return _reset
    raise ValueError(f"unhandled preset {preset!r}")


def preset_targets(preset, n):
    """Clamped target amplitudes for harmonics 1..n of the given preset."""
    fn = _coefficient_fn(preset)
    return [clamp(fn(h)) for h in range(1, n + 1)]


def parse_preset(name):
    if isinstance(name, Preset):
        return name
    try:
        return Preset(name)
    except ValueError:
        return None


def apply_preset(bank, name):
    """
    Sets bank targets to the named waveform approximation.

    Unknown names leave the bank untouched and return False.
    """
    preset = parse_preset(name)
    if preset is None:
        logger.debug("Ignoring unknown preset %r", name)
        return False

    for index, value in enumerate(preset_targets(preset, len(bank))):
        bank.set_target(index, value)
    logger.debug("Applied preset %s to %d harmonics", preset.value, len(bank))
    return True
