#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandOrient v0.1.0

Edge derivation for the bidirected unitig graph.

For each unitig, four linking (k-1)-mers are looked up in the border
index:

    query key    from       to         matching end
    ---------    --------   --------   ------------
    last         FORWARD    FORWARD    START
    rc(last)     FORWARD    REVERSE    END
    first        REVERSE    REVERSE    END
    rc(first)    REVERSE    FORWARD    START

Every border entry at the matching end yields one edge. Self-loops and
parallel edges are kept as-is; nothing is pruned.

Author: StrandOrient Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from collections.abc import Sequence
from typing import List

from .border_index import BorderIndex, boundaries, check_k
from .data_structures import Edge, Orientation, Position
from ..utils.sequence_utils import reverse_complement

logger = logging.getLogger(__name__)

FORWARD = Orientation.FORWARD
REVERSE = Orientation.REVERSE


class EdgeDeriver:
    """
    Materializes outgoing edges per unitig from a border index.

    Edges of one unitig are derived independently of all others, so the
    adjacency can be built eagerly (derive_edges) or on demand
    (lazy_edges) with identical results.
    """

    def __init__(self, store, k: int, border_index: BorderIndex):
        check_k(k)
        self.store = store
        self.k = k
        self.border_index = border_index

    def _push_edges(self, edges: List[Edge], from_id: int,
                    from_orientation: Orientation, to_orientation: Orientation,
                    to_position: Position, linking_kmer: str):
        for entry in self.border_index.lookup(linking_kmer):
            if entry.position is to_position:
                edges.append(Edge(from_id, entry.unitig_id, from_orientation, to_orientation))

    def edges_from(self, unitig_id: int) -> List[Edge]:
        """
        Outgoing edges of one unitig, in query order.

        Args:
            unitig_id: Source unitig

        Returns:
            List of edges with from_id == unitig_id
        """
        first, last = boundaries(self.store.get(unitig_id), self.k)
        first_rc = reverse_complement(first)
        last_rc = reverse_complement(last)

        edges: List[Edge] = []
        self._push_edges(edges, unitig_id, FORWARD, FORWARD, Position.START, last)
        self._push_edges(edges, unitig_id, FORWARD, REVERSE, Position.END, last_rc)
        self._push_edges(edges, unitig_id, REVERSE, REVERSE, Position.END, first)
        self._push_edges(edges, unitig_id, REVERSE, FORWARD, Position.START, first_rc)
        return edges

    def derive_edges(self) -> List[List[Edge]]:
        """Eagerly derive the adjacency lists of all unitigs."""
        edges = [self.edges_from(i) for i in range(self.store.count())]
        logger.debug(f"Derived {sum(len(e) for e in edges)} edges for {len(edges)} unitigs")
        return edges

    def lazy_edges(self) -> 'LazyAdjacency':
        """Adjacency view that derives each unitig's edges on access."""
        return LazyAdjacency(self)


class LazyAdjacency(Sequence):
    """
    Read-only adjacency that computes edges_from(i) when indexed.

    Nothing is cached: a unitig's edges are materialized only while the
    resolver expands it, keeping peak memory to the sequences plus the
    traversal stack.
    """

    def __init__(self, deriver: EdgeDeriver):
        self._deriver = deriver

    def __len__(self) -> int:
        return self._deriver.store.count()

    def __getitem__(self, unitig_id):
        if isinstance(unitig_id, slice):
            return [self[i] for i in range(*unitig_id.indices(len(self)))]
        if unitig_id < 0:
            unitig_id += len(self)
        if not 0 <= unitig_id < len(self):
            raise IndexError(f"unitig id out of range: {unitig_id}")
        return self._deriver.edges_from(unitig_id)


def derive_edges(store, k: int, border_index: BorderIndex) -> List[List[Edge]]:
    """
    Build edges[i] = outgoing edges of unitig i for every unitig.

    Args:
        store: Sequence store with count() and get(i)
        k: K-mer size
        border_index: Index produced by build_border_index(store, k)

    Returns:
        Adjacency lists index-aligned with unitig ids
    """
    return EdgeDeriver(store, k, border_index).derive_edges()


__all__ = [
    "EdgeDeriver",
    "LazyAdjacency",
    "derive_edges",
]
