# selection.py
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class SelectionMode(Enum):
    NONE = "none"
    ACTIVE = "active"
    STICKY = "sticky"


class Selection:
    """
    Tracks which partial the single-wave view shows.

    Hover or press start makes a partial ACTIVE. When the gesture ends the
    view keeps showing it as STICKY until another partial is entered.
    """

    def __init__(self, n):
        self.n = n
        self.mode = SelectionMode.NONE
        self.index = None
        self.last_sticky = None

    def _check_index(self, index):
        if not 0 <= index < self.n:
            raise IndexError(f"harmonic index {index} out of range [0, {self.n})")

    def enter(self, index):
        self._check_index(index)
        self.mode = SelectionMode.ACTIVE
        self.index = index
        self.last_sticky = index
        logger.debug("Selection active: %d", index)

    def leave(self, index):
        self._check_index(index)
        if self.mode is not SelectionMode.ACTIVE or self.index != index:
            return
        self.mode = SelectionMode.STICKY
        self.index = self.last_sticky
        logger.debug("Selection sticky: %d", self.index)

    @property
    def is_active(self):
        return self.mode is SelectionMode.ACTIVE

    @property
    def displayed_index(self):
        if self.mode is SelectionMode.NONE:
            return None
        return self.index

    def label(self, bank):
        if not self.is_active:
            return "Individual Wave"
        partial = bank[self.index]
        return f"Wave {partial.index + 1} (freq: {partial.frequency})"

    def __repr__(self):
        if self.mode is SelectionMode.NONE:
            return "Selection(NONE)"
        return f"Selection({self.mode.name}({self.index}))"
