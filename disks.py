import logging
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

logger = logging.getLogger(__name__)

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

LIGHT_LABEL     = "L"
DARK_LABEL      = "D"
LABEL_SEPARATOR = " "
COLOR_DTYPE     = np.uint8

ALGORITHMS = [
    ("Left-to-Right", "left_to_right"),
    ("Lawnmower",     "lawnmower"),
]

# ============================================================
# ======================== DISK MODEL ========================
# ============================================================


class InvariantViolation(AssertionError):
    """Raised when a row invariant or a sorter precondition is broken."""


class DiskColor(IntEnum):
    LIGHT = 0
    DARK  = 1

    @property
    def label(self) -> str:
        return LIGHT_LABEL if self is DiskColor.LIGHT else DARK_LABEL


class DiskState:
    """
    One row of disks, light and dark in equal numbers.

    The colors live in a flat numpy buffer of COLOR_DTYPE codes. A new row
    always starts in alternating format (light at index 0). The only way
    to change it afterwards is swap_adjacent().
    """
    __slots__ = ('_colors',)

    def __init__(self, light_count: int):
        if light_count < 1:
            raise InvariantViolation(f"light_count must be >= 1, got {light_count}")
        self._colors = np.full(light_count * 2, DiskColor.LIGHT, dtype=COLOR_DTYPE)
        self._colors[1::2] = DiskColor.DARK

    def copy(self) -> "DiskState":
        clone = DiskState.__new__(DiskState)
        clone._colors = self._colors.copy()
        return clone

    def __eq__(self, other):
        if not isinstance(other, DiskState):
            return NotImplemented
        return np.array_equal(self._colors, other._colors)

    __hash__ = None

    def __len__(self):
        return self.total_count()

    def __iter__(self):
        for code in self._colors:
            yield DiskColor(int(code))

    def total_count(self) -> int:
        return int(self._colors.size)

    def color_count(self) -> int:
        return self.total_count() // 2

    def dark_count(self) -> int:
        return self.color_count()

    def light_count(self) -> int:
        return self.color_count()

    def is_valid_index(self, i: int) -> bool:
        return 0 <= i < self.total_count()

    def get(self, i: int) -> DiskColor:
        if not self.is_valid_index(i):
            raise InvariantViolation(f"index {i} out of range for {self.total_count()} disks")
        return DiskColor(int(self._colors[i]))

    def swap_adjacent(self, i: int):
        if not (self.is_valid_index(i) and self.is_valid_index(i + 1)):
            raise InvariantViolation(f"cannot swap {i} and {i + 1} in {self.total_count()} disks")
        c = self._colors
        c[i], c[i + 1] = c[i + 1], c[i]

    def is_alternating(self) -> bool:
        # light on every even index, dark on every odd one
        c = self._colors
        return bool(np.all(c[0::2] == DiskColor.LIGHT) and np.all(c[1::2] == DiskColor.DARK))

    def is_sorted(self) -> bool:
        c, k = self._colors, self.color_count()
        return bool(np.all(c[:k] == DiskColor.LIGHT) and np.all(c[k:] == DiskColor.DARK))

    def to_string(self) -> str:
        return LABEL_SEPARATOR.join(color.label for color in self)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"DiskState({self.to_string()!r})"


@dataclass(frozen=True)
class SortedDisks:
    """Final row plus the exact number of adjacent swaps that produced it."""
    after: DiskState
    swap_count: int

# ============================================================
# ===================== SORTING ALGORITHMS ===================
# ============================================================
#
# Both sorters are generators in the usual step format: they mutate the
# row they are given and yield (state, [left, right]) right after every
# swap. sort_left_to_right() / sort_lawnmower() copy the caller's row
# first and count the steps, so the input is never touched.
#
# A swap only ever happens on a (DARK, LIGHT) pair, turning it into
# (LIGHT, DARK). Starting from L (D L)^(k-1) D, every directional pass
# turns L^a (D L)^m D^a into L^(a+1) (D L)^(m-1) D^(a+1): each pass
# settles one more disk on both ends, and k-1 passes group the row.

def left_to_right_steps(state):
    n, k = state.total_count(), state.color_count()
    for i in range(k):
        for j in range(i + 1, n - i - 1):
            if state.get(j) == DiskColor.DARK and state.get(j + 1) == DiskColor.LIGHT:
                state.swap_adjacent(j); yield state, [j, j + 1]


def lawnmower_steps(state):
    n, k = state.total_count(), state.color_count()
    settled = 0
    for _ in range(k // 2):
        # left to right: carries a dark disk to the right edge of the window
        for j in range(settled + 1, n - settled - 1):
            if state.get(j) == DiskColor.DARK and state.get(j + 1) == DiskColor.LIGHT:
                state.swap_adjacent(j); yield state, [j, j + 1]
        settled += 1
        # right to left: carries a light disk to the left edge of the window
        for j in range(n - settled - 1, settled, -1):
            if state.get(j) == DiskColor.LIGHT and state.get(j - 1) == DiskColor.DARK:
                state.swap_adjacent(j - 1); yield state, [j - 1, j]
        settled += 1


def _require_alternating(state):
    if not state.is_alternating():
        raise InvariantViolation(f"row is not in alternating format: {state}")


def get_generator(key, state):
    """
    Return the step generator for `key`, bound to `state`.

    The generator sorts `state` in place. Raises KeyError for an unknown key
    and InvariantViolation when `state` is not alternating.
    """
    builtins = {
        "left_to_right": lambda: left_to_right_steps(state),
        "lawnmower":     lambda: lawnmower_steps(state),
    }
    if key not in builtins:
        raise KeyError(f"Unknown key: {key}")
    _require_alternating(state)
    return builtins[key]()


def run_sort(key, before: DiskState) -> SortedDisks:
    """Sort a copy of `before` with algorithm `key` and count the swaps."""
    work = before.copy()
    swaps = 0
    for _ in get_generator(key, work):
        swaps += 1
    logger.debug("%s sorted %d disks with %d swaps", key, work.total_count(), swaps)
    return SortedDisks(work, swaps)


def sort_left_to_right(before: DiskState) -> SortedDisks:
    return run_sort("left_to_right", before)


def sort_lawnmower(before: DiskState) -> SortedDisks:
    return run_sort("lawnmower", before)
