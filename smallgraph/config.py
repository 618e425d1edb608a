"""Configuration classes for SmallGraph path finding."""

import math
from dataclasses import dataclass

from smallgraph.exceptions import CostOverflow


@dataclass
class PathConfig:
    """Cost limits and defaults used by the path-finding engine."""

    # Largest cumulative path cost accepted (int64 ceiling)
    max_cost: int = 2**63 - 1

    # Cost of an edge created without a weight vector (hop count)
    default_edge_cost: int = 1

    def check_cost(self, value):
        """Return `value` unchanged if it is a representable cost.

        Raises:
            CostOverflow: If `value` is above `max_cost` or not finite.
        """
        if isinstance(value, float) and not math.isfinite(value):
            raise CostOverflow(value, self.max_cost)
        if value > self.max_cost:
            raise CostOverflow(value, self.max_cost)
        return value


# Global configuration instance
PATH_CONFIG = PathConfig()
