"""Configuration classes for flowgraph components."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class FlowConfig:
    """Configuration for maximum-flow computation."""

    # Residual capacity at or below this value is treated as exhausted
    min_residual: Any = 0

    # Upper bound on augmenting rounds; None means run until no path remains
    max_augmentations: Optional[int] = None

    def has_capacity(self, residual: Any) -> bool:
        """Return True if the residual capacity can still carry flow."""
        return residual > self.min_residual


@dataclass
class MatrixConfig:
    """Configuration for the dense weight matrix behind the matrix backend."""

    # Number of rows/columns allocated for an empty graph
    initial_size: int = 0

    # Multiplier applied to the current size when the matrix must grow
    growth_factor: float = 2.0

    def next_size(self, required: int, current: int) -> int:
        """Calculate the new matrix size needed to hold index ``required - 1``."""
        if required <= current:
            return current
        grown = int(current * self.growth_factor)
        return max(required, grown)


# Global configuration instances
FLOW_CONFIG = FlowConfig()
MATRIX_CONFIG = MatrixConfig()
