"""
Shortest-Path Engine Configuration Module

Centralized configuration constants and dataclass for the bucket-queue
shortest-path engine. All tunable parameters are defined here to avoid
scattered magic numbers.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

# ============================================================================
# ENGINE CONFIGURATION - ALL PARAMETERS IN ONE PLACE
# ============================================================================

# Node address space
MAX_NODES = 1 << 22                # Largest dense node range an encoder may allocate

# Distance table
DISTANCE_DTYPE = np.int64
UNREACHABLE = int(np.iinfo(DISTANCE_DTYPE).max)  # Sentinel, no real distance hits this

# Search behaviour
EARLY_EXIT = True                  # Stop once the target distance level is drained
DEBUG_CHECKS = True                # Validate weights and queue monotonicity
ENABLE_INSTRUMENTATION = False     # Record the finalization trace

# Puzzle weight bounds
UNIT_STEP_WEIGHT = 1               # Plain 4-neighbour grid step
TURN_WEIGHT = 1000                 # Rotating 90 degrees in place (reindeer maze)


@dataclass
class SolverConfig:
    """Configuration for a single shortest-path query."""
    early_exit: bool = EARLY_EXIT
    debug_checks: bool = DEBUG_CHECKS
    enable_instrumentation: bool = ENABLE_INSTRUMENTATION
    max_nodes: int = MAX_NODES

    def validate(self) -> List[str]:
        """Return a list of configuration errors, empty when valid."""
        errors = []
        if self.max_nodes <= 0:
            errors.append("max_nodes must be positive")
        return errors
