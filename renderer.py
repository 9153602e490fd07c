# renderer.py
import colorsys
from abc import ABC, abstractmethod

import numpy as np
import state


class DrawingSurface(ABC):
    """Pixel-addressable output target in logical coordinates."""

    @abstractmethod
    def clear(self):
        ...

    @abstractmethod
    def draw_dashed_line(self, p1, p2):
        ...

    @abstractmethod
    def draw_polyline(self, points, color, width, glow=False):
        ...


class Renderer:
    def __init__(self, margin=None, grid_divisions=None):
        s = state.shared
        self.margin = s.margin if margin is None else margin
        self.grid_divisions = s.grid_divisions if grid_divisions is None else grid_divisions

    def draw_grid(self, surface, width, height):
        mid = height / 2
        surface.draw_dashed_line((0.0, mid), (width, mid))
        step = width / self.grid_divisions
        for i in range(self.grid_divisions + 1):
            x = i * step
            surface.draw_dashed_line((x, 0.0), (x, height))

    def wave_points(self, samples, height):
        mid = height / 2
        scale = mid - self.margin
        xs = np.arange(len(samples), dtype=np.float64)
        ys = mid - np.asarray(samples, dtype=np.float64) * scale
        return np.column_stack((xs, ys)).tolist()

    def draw(self, surface, samples, width, height, color, line_width):
        # Full clear every frame, no accumulation
        surface.clear()
        self.draw_grid(surface, width, height)

        points = self.wave_points(samples, height)
        if len(points) < 2:
            return
        surface.draw_polyline(points, color, line_width)
        # Glow pass: same path, blurred variant of the colour
        surface.draw_polyline(points, color, line_width, glow=True)


def amplitude_color(value):
    """Slider tint: green for positive, red for negative, more saturated with |value|."""
    intensity = min(1.0, abs(value))
    hue = 120 if value >= 0 else 0
    saturation = (50 + intensity * 50) / 100
    lightness = 0.5
    r, g, b = colorsys.hls_to_rgb(hue / 360, lightness, saturation)
    return (round(r * 255), round(g * 255), round(b * 255))
