"""GridLayout: per-depth slot allocation and horizontal re-centering.

Each depth tier has one running counter shared by every subtree at that
depth; it is never reset per parent.  A node visited at depth ``d`` takes
slot ``counter[d]`` and the counter advances.  Slots are therefore handed out
in pure traversal order, so a parent is not necessarily centered above its
children.  Layout compatibility depends on this exact behaviour.

After all nodes are placed the whole layout is shifted left by::

    center_x = (max_cols - 1) * x_step / 2

where ``max_cols`` is the widest tier, which centers it around ``x = 0``.

A GridLayout holds the counters for a single build.  Create a fresh one per
build; nothing here is module-level state.
"""

from __future__ import annotations

import numpy as np

from json_tree_graph.layout.config import LayoutConfig

__all__ = ["GridLayout"]


class GridLayout:
    """Slot allocator for one build.

    Example::

        grid = GridLayout(LayoutConfig())
        grid.place(0)          # root        -> slot 0 at depth 0
        grid.place(1)          # first child -> slot 0 at depth 1
        grid.place(1)          # second      -> slot 1 at depth 1
        grid.positions()       # [[-130, 0], [-130, 110], [130, 110]]
    """

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self._config: LayoutConfig = config if config is not None else LayoutConfig()
        self._counts: dict[int, int] = {}
        self._slots: list[int] = []
        self._depths: list[int] = []

    @property
    def config(self) -> LayoutConfig:
        return self._config

    @property
    def counts(self) -> dict[int, int]:
        """Copy of the per-depth counters (depth -> number of nodes placed)."""
        return dict(self._counts)

    @property
    def max_cols(self) -> int:
        """Width of the widest tier; 1 when nothing has been placed."""
        return max(self._counts.values()) if self._counts else 1

    @property
    def center_x(self) -> float:
        return (self.max_cols - 1) * self._config.x_step / 2

    def __len__(self) -> int:
        return len(self._slots)

    def place(self, depth: int) -> int:
        """Allocate the next slot in tier ``depth`` and return the node's index.

        The returned index is the row of this node in ``positions()``.
        """
        slot = self._counts.get(depth, 0)
        self._counts[depth] = slot + 1
        self._slots.append(slot)
        self._depths.append(depth)
        return len(self._slots) - 1

    def positions(self) -> np.ndarray:
        """Return the final, re-centered ``(N, 2)`` float64 array of (x, y).

        Row ``i`` belongs to the ``i``-th ``place()`` call.
        """
        slots = np.asarray(self._slots, dtype=np.float64)
        depths = np.asarray(self._depths, dtype=np.float64)
        xs = slots * self._config.x_step - self.center_x
        ys = depths * self._config.y_step
        return np.column_stack((xs, ys)).reshape(-1, 2)
