"""Cycle length from the half-day permutation of the main reservoir.

Every ``HALF_DAY_MINUTES`` all non-main tracks are empty, and the clock only
ever looks at ball positions, never identities. Main after one half-day
therefore defines a permutation of positions, and the reservoir is back in
its initial order exactly when that permutation has been applied a multiple
of its order times.

Permutation cycles are the connected components of its functional graph.
"""

from __future__ import annotations

import math

import networkx as nx

from ball_clock.config.constants import HALF_DAY_MINUTES
from ball_clock.domain.clock import BallClock
from ball_clock.domain.errors import InvariantViolation


def half_day_permutation(ball_count: int) -> list[int]:
    """Return 0-based source positions: entry i is the position whose ball ends at i."""
    clock = BallClock(ball_count)
    clock.advance(HALF_DAY_MINUTES)
    if len(clock.main) != ball_count:
        raise InvariantViolation(
            f"main holds {len(clock.main)} of {ball_count} balls after a half-day"
        )
    return [ball - 1 for ball in clock.main]


def permutation_graph(permutation: list[int]) -> nx.DiGraph:
    """Build the functional graph i -> permutation[i]."""
    g = nx.DiGraph()
    g.add_nodes_from(range(len(permutation)))
    g.add_edges_from(enumerate(permutation))
    return g


def cycle_lengths(permutation: list[int]) -> list[int]:
    """Return the sorted lengths of the permutation's disjoint cycles."""
    g = permutation_graph(permutation)
    return sorted(len(component) for component in nx.weakly_connected_components(g))


def permutation_order(permutation: list[int]) -> int:
    """Smallest k >= 1 such that applying the permutation k times is the identity."""
    return math.lcm(*cycle_lengths(permutation))


def cycle_minutes_by_permutation(ball_count: int) -> int:
    """Minutes until the main reservoir first returns to 1..N ascending."""
    return HALF_DAY_MINUTES * permutation_order(half_day_permutation(ball_count))
