"""
Unit tests for the renderer, using a recording surface.
"""

import numpy as np
import pytest

from renderer import Renderer, amplitude_color


class TestRenderer:

    def test_clears_first(self, surface):
        Renderer(20, 10).draw(surface, np.zeros(100), 100, 80, (1, 2, 3), 3)
        assert surface.calls[0] == ("clear",)

    def test_grid(self, surface):
        Renderer(20, 10).draw(surface, np.zeros(100), 100, 80, (1, 2, 3), 3)
        dashed = surface.of_kind("dashed")
        assert dashed[0][1:] == ((0.0, 40.0), (100, 40.0))
        verticals = dashed[1:]
        assert len(verticals) == 11
        assert [v[1][0] for v in verticals] == pytest.approx([i * 10.0 for i in range(11)])
        assert all(v[2][1] == 80 for v in verticals)

    def test_point_mapping(self, surface):
        samples = np.array([0.0, 1.0, -1.0, 0.5])
        Renderer(20, 10).draw(surface, samples, 4, 100, (1, 2, 3), 2)
        points = surface.of_kind("polyline")[0][1]
        assert points == [[0.0, 50.0], [1.0, 20.0], [2.0, 80.0], [3.0, 35.0]]

    def test_stroke_then_glow(self, surface):
        Renderer(20, 10).draw(surface, np.zeros(10), 10, 80, (9, 8, 7), 3)
        strokes = surface.of_kind("polyline")
        assert [s[4] for s in strokes] == [False, True]
        assert strokes[0][1] == strokes[1][1]
        assert all(s[2] == (9, 8, 7) and s[3] == 3 for s in strokes)

    def test_no_accumulation(self, surface):
        renderer = Renderer(20, 10)
        renderer.draw(surface, np.zeros(10), 10, 80, (0, 0, 0), 1)
        first = list(surface.calls)
        renderer.draw(surface, np.zeros(10), 10, 80, (0, 0, 0), 1)
        assert surface.calls == first


class TestAmplitudeColor:

    def test_positive_is_green(self):
        r, g, b = amplitude_color(1.0)
        assert g > r and g > b

    def test_negative_is_red(self):
        r, g, b = amplitude_color(-1.0)
        assert r > g and r > b

    def test_zero_is_muted(self):
        assert amplitude_color(0.0) == (64, 191, 64)
