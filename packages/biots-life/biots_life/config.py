"""World configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WorldConfig:
    """Immutable dimensions of the toroidal world.

    Attributes:
        width: Horizontal extent; x coordinates live in ``[0, width)``.
        height: Vertical extent; y coordinates live in ``[0, height)``.
    """

    width: float = 1920.0
    height: float = 1200.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"World dimensions must be positive, got {self.width}x{self.height}"
            )
