"""
Graph core module for StrandOrient.

Builds the bidirected unitig graph from boundary (k-1)-mer overlaps and
resolves a consistent strand for every unitig:
- data_structures.py: Orientation, Position, BorderEntry, Edge
- border_index.py: boundary (k-1)-mer index
- edge_deriver.py: orientation-tagged edges per unitig
- orientation_resolver.py: component-wise DFS orientation propagation
"""

from .data_structures import (
    Orientation,
    Position,
    BorderEntry,
    Edge,
    propagate,
)
from .border_index import BorderIndex, boundaries, build_border_index
from .edge_deriver import EdgeDeriver, LazyAdjacency, derive_edges
from .orientation_resolver import (
    CONFLICT_MODES,
    OrientationResult,
    resolve_orientations,
)

__all__ = [
    # Data structures
    "Orientation",
    "Position",
    "BorderEntry",
    "Edge",
    "propagate",
    # Border index
    "BorderIndex",
    "boundaries",
    "build_border_index",
    # Edges
    "EdgeDeriver",
    "LazyAdjacency",
    "derive_edges",
    # Resolution
    "CONFLICT_MODES",
    "OrientationResult",
    "resolve_orientations",
]
