"""LayoutConfig: grid spacing used when positioning graph nodes.

LayoutConfig is a frozen (immutable) dataclass.  The defaults reproduce the
reference layout exactly: 260 units between horizontal slots and 110 units
between depth tiers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["DEFAULT_X_STEP", "DEFAULT_Y_STEP", "LayoutConfig"]

DEFAULT_X_STEP: float = 260
DEFAULT_Y_STEP: float = 110


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Immutable grid spacing for the tree-to-graph layout.

    Attributes:
        x_step: Horizontal distance between consecutive slots in one depth
            tier.  Must be finite and > 0.
        y_step: Vertical distance between depth tiers.  Must be finite and > 0.
    """

    x_step: float = DEFAULT_X_STEP
    y_step: float = DEFAULT_Y_STEP

    def __post_init__(self) -> None:
        if not math.isfinite(self.x_step) or self.x_step <= 0:
            msg = f"x_step must be a finite number > 0, got {self.x_step}"
            raise ValueError(msg)
        if not math.isfinite(self.y_step) or self.y_step <= 0:
            msg = f"y_step must be a finite number > 0, got {self.y_step}"
            raise ValueError(msg)
