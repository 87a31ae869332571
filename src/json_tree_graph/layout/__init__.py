"""Layout subpackage: grid spacing configuration and slot allocation.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_tree_graph.layout import GridLayout, LayoutConfig

    grid = GridLayout(LayoutConfig(x_step=200))
"""

from __future__ import annotations

from json_tree_graph.layout.config import DEFAULT_X_STEP, DEFAULT_Y_STEP, LayoutConfig
from json_tree_graph.layout.grid import GridLayout

__all__ = ["DEFAULT_X_STEP", "DEFAULT_Y_STEP", "GridLayout", "LayoutConfig"]
