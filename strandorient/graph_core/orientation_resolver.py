#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandOrient v0.1.0

Orientation resolver.

Explores the unitig graph one connected component at a time with an
explicit DFS stack. Each component root is laid out FORWARD and every
reached unitig takes the orientation implied by the edge it was first
popped through.

A unitig popped again after its orientation is fixed is discarded. When
the proposed orientation disagrees with the fixed one the component has
no consistent layout; depending on conflict_mode such conflicts are
ignored, counted, or raised as OrientationConflictError.

Author: StrandOrient Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from .data_structures import Edge, Orientation, propagate
from ..errors import OrientationConflictError

logger = logging.getLogger(__name__)

CONFLICT_MODES = ('ignore', 'report', 'fail')


@dataclass
class OrientationResult:
    """Resolved orientations plus per-run component statistics."""
    orientations: List[Orientation]
    component_sizes: List[int] = field(default_factory=list)
    n_conflicts: int = 0

    @property
    def n_components(self) -> int:
        return len(self.component_sizes)

    @property
    def n_reversed(self) -> int:
        return sum(1 for o in self.orientations if o is Orientation.REVERSE)

    def summary(self) -> Dict[str, int]:
        return {
            'unitigs': len(self.orientations),
            'components': self.n_components,
            'largest_component': max(self.component_sizes, default=0),
            'reversed': self.n_reversed,
            'conflicts': self.n_conflicts,
        }


def resolve_orientations(n: int, edges: Sequence[List[Edge]],
                         conflict_mode: str = 'report') -> OrientationResult:
    """
    Assign one orientation to each of n unitigs.

    Args:
        n: Number of unitigs
        edges: edges[i] = outgoing edges of unitig i (eager list or lazy view)
        conflict_mode: 'ignore', 'report' or 'fail'

    Returns:
        OrientationResult with exactly one orientation per unitig

    Raises:
        ValueError: On an unknown conflict_mode
        OrientationConflictError: In 'fail' mode, at the first conflict
    """
    if conflict_mode not in CONFLICT_MODES:
        raise ValueError(
            f"Unknown conflict_mode {conflict_mode!r}; expected one of {', '.join(CONFLICT_MODES)}"
        )
    check_conflicts = conflict_mode != 'ignore'

    orientations = [Orientation.FORWARD] * n
    visited = [False] * n
    result = OrientationResult(orientations=orientations)

    # Reused between components
    stack: List[Tuple[int, Orientation]] = []

    for component_root in range(n):
        if visited[component_root]:
            continue

        # Arbitrarily orient the root as forward
        stack.append((component_root, Orientation.FORWARD))
        component_size = 0

        while stack:
            unitig_id, orientation = stack.pop()

            if visited[unitig_id]:
                if check_conflicts and orientations[unitig_id] is not orientation:
                    if conflict_mode == 'fail':
                        raise OrientationConflictError(
                            unitig_id, orientations[unitig_id], orientation
                        )
                    result.n_conflicts += 1
                continue

            component_size += 1
            visited[unitig_id] = True
            orientations[unitig_id] = orientation

            for edge in edges[unitig_id]:
                stack.append((edge.to_id, propagate(orientation, edge)))

        result.component_sizes.append(component_size)
        logger.debug(f"Component size = {component_size}")

    n_components = result.n_components
    logger.info(f"Found {n_components} component{'s' if n_components > 1 else ''}")

    if result.n_conflicts:
        logger.warning(
            f"{result.n_conflicts} orientation conflict(s): some components have no "
            f"consistent strand assignment; the first orientation reached was kept"
        )

    return result


__all__ = [
    "CONFLICT_MODES",
    "OrientationResult",
    "resolve_orientations",
]
