#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandOrient v0.1.0

Shared data structures for the bidirected unitig graph.

Author: StrandOrient Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from dataclasses import dataclass
from enum import Enum


class Orientation(Enum):
    """Strand a unitig is laid out in."""
    FORWARD = "+"  # Original sequence
    REVERSE = "-"  # Reverse complement

    def flip(self) -> 'Orientation':
        """Return the opposite orientation."""
        if self is Orientation.FORWARD:
            return Orientation.REVERSE
        return Orientation.FORWARD


class Position(Enum):
    """Which end of a unitig a boundary (k-1)-mer was taken from."""
    START = "start"
    END = "end"


@dataclass(frozen=True)
class BorderEntry:
    """Occurrence of a boundary (k-1)-mer at one end of a unitig."""
    unitig_id: int
    position: Position


@dataclass(frozen=True)
class Edge:
    """
    Directed, orientation-tagged edge between two unitigs.

    If unitig `from_id` is laid out in `from_orientation`, then unitig
    `to_id` must be laid out in `to_orientation` for the shared boundary
    to be a valid (k-1) overlap.
    """
    from_id: int
    to_id: int
    from_orientation: Orientation
    to_orientation: Orientation

    @property
    def is_self_loop(self) -> bool:
        return self.from_id == self.to_id

    @property
    def flips(self) -> bool:
        """True when following this edge switches strand."""
        return self.from_orientation is not self.to_orientation


def propagate(orientation: Orientation, edge: Edge) -> Orientation:
    """
    Orientation implied for the edge target given the source orientation.

    Orientation flips exactly when the edge's two tags differ.
    """
    if edge.flips:
        return orientation.flip()
    return orientation


__all__ = [
    "Orientation",
    "Position",
    "BorderEntry",
    "Edge",
    "propagate",
]
