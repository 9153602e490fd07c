# harmonic_bank.py
import numpy as np
import state


def clamp(value, low=-1.0, high=1.0):
    return max(low, min(high, float(value)))


class Partial:
    """One sinusoidal component at an integer multiple of the base frequency."""

    def __init__(self, index):
        self._index = index
        self.amplitude = 0.0
        self.target_amplitude = 0.0

    @property
    def index(self):
        return self._index

    @property
    def frequency(self):
        return self._index + 1

    def __repr__(self):
        return (f"Partial(index={self.index}, frequency={self.frequency}, "
                f"amplitude={self.amplitude:.4f}, target={self.target_amplitude:.4f})")


class HarmonicBank:
    """Fixed, ordered set of partials. Never resized after construction."""

    def __init__(self, n=None):
        if n is None:
            n = state.shared.num_harmonics
        if n < 1:
            raise ValueError(f"harmonic count must be positive, got {n}")
        self._partials = tuple(Partial(i) for i in range(n))

    def __len__(self):
        return len(self._partials)

    def __iter__(self):
        return iter(self._partials)

    def __getitem__(self, index):
        return self._partials[self._check_index(index)]

    def _check_index(self, index):
        if not 0 <= index < len(self._partials):
            raise IndexError(f"harmonic index {index} out of range [0, {len(self._partials)})")
        return index

    def set_target(self, index, value):
        # Current amplitude is left alone; the smoother animates towards the target
        partial = self[index]
        partial.target_amplitude = clamp(value)
        return partial.target_amplitude

    def amplitudes(self):
        return np.array([p.amplitude for p in self._partials])

    def targets(self):
        return np.array([p.target_amplitude for p in self._partials])

    def frequencies(self):
        return np.array([p.frequency for p in self._partials])


class AmplitudeSmoother:
    def __init__(self, k=None):
        self.k = state.shared.smoothing if k is None else k

    def advance(self, bank):
        # --- SMOOTHING LOGIC ---
        # Single-pole exponential filter: distance to target shrinks by (1 - k)
        for partial in bank:
            diff = partial.target_amplitude - partial.amplitude
            partial.amplitude += diff * self.k
