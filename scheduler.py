# scheduler.py
import logging
from collections import namedtuple

import state
from harmonic_bank import HarmonicBank, AmplitudeSmoother
from presets import apply_preset
from renderer import Renderer
from selection import Selection, SelectionMode
from synth_engine import generate_single, generate_sum

logger = logging.getLogger(__name__)

# Logical size plus physical scale factor, always replaced as a whole
Viewport = namedtuple("Viewport", ["width", "height", "scale"])
Frame = namedtuple("Frame", ["time", "single_index", "single", "summed"])


class FrameScheduler:
    """
    Drives one tick per display refresh.

    The host calls tick(); nothing here reschedules itself. Input events
    are applied synchronously and are visible to the next tick.
    """

    def __init__(self, single_surface, sum_surface, bank=None, viewport=None,
                 smoother=None, renderer=None, config=None):
        self.config = config or state.shared
        self.bank = bank if bank is not None else HarmonicBank(self.config.num_harmonics)
        self.smoother = smoother or AmplitudeSmoother(self.config.smoothing)
        self.renderer = renderer or Renderer(self.config.margin, self.config.grid_divisions)
        self.selection = Selection(len(self.bank))
        self.single_surface = single_surface
        self.sum_surface = sum_surface
        self.viewport = viewport or Viewport(0.0, 0.0, 1.0)
        self.time = 0.0

    # --- INPUT EVENTS ---
    def set_target(self, index, value):
        return self.bank.set_target(index, value)

    def selection_enter(self, index):
        self.selection.enter(index)

    def selection_leave(self, index):
        self.selection.leave(index)

    def apply_preset(self, name):
        return apply_preset(self.bank, name)

    def resize(self, width, height, scale=1.0):
        # Single assignment so a tick never mixes stale and fresh dimensions
        self.viewport = Viewport(float(width), float(height), float(scale))
        logger.debug("Resized to %.1fx%.1f @%.2fx", width, height, scale)

    # --- FRAME ---
    def tick(self):
        cfg = self.config
        self.time += cfg.time_step
        self.smoother.advance(self.bank)

        viewport = self.viewport
        if viewport.width <= 0:
            logger.debug("Skipping render for degenerate width %.1f", viewport.width)
            return None

        single = None
        index = None
        if self.selection.mode is not SelectionMode.NONE:
            index = self.selection.displayed_index
            single = generate_single(self.bank[index], viewport.width, self.time,
                                     cfg.single_wobble)
        summed = generate_sum(self.bank, viewport.width, self.time, cfg.sum_wobble)

        if single is not None:
            self.renderer.draw(self.single_surface, single, viewport.width, viewport.height,
                               cfg.single_color, cfg.line_width)
        self.renderer.draw(self.sum_surface, summed, viewport.width, viewport.height,
                           cfg.sum_color, cfg.line_width)

        return Frame(self.time, index, single, summed)
