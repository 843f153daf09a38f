#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandOrient v0.1.0

Border index: boundary (k-1)-mer -> unitig ends carrying it.

Every unitig contributes its first k-1 characters (START) and its last
k-1 characters (END). Entries are kept in insertion order, i.e. ascending
unitig id with START before END, and are never deduplicated.

Author: StrandOrient Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from collections import defaultdict
from typing import Dict, Iterator, List, Tuple

from .data_structures import BorderEntry, Position
from ..errors import InvalidKmerSizeError
from ..utils.sequence_utils import validate_unitig

logger = logging.getLogger(__name__)

_NO_ENTRIES: Tuple[BorderEntry, ...] = ()


def check_k(k: int) -> None:
    """Reject k-mer sizes that leave no boundary to compare."""
    if k < 2:
        raise InvalidKmerSizeError(k)


def boundaries(sequence: str, k: int) -> Tuple[str, str]:
    """
    First and last (k-1)-mers of a unitig.

    Example:
        >>> boundaries("AATCG", 4)
        ('AAT', 'TCG')
    """
    overlap = k - 1
    return sequence[:overlap], sequence[len(sequence) - overlap:]


class BorderIndex:
    """
    Read-only mapping from boundary (k-1)-mer to its border entries.

    Built once by build_border_index().
    """

    def __init__(self, k: int, entries: Dict[str, List[BorderEntry]]):
        self.k = k
        self._entries = entries

    def lookup(self, key: str):
        """Border entries for key, in insertion order (empty if absent)."""
        return self._entries.get(key, _NO_ENTRIES)

    def keys(self):
        return self._entries.keys()

    def items(self) -> Iterator[Tuple[str, List[BorderEntry]]]:
        return iter(self._entries.items())

    @property
    def entry_count(self) -> int:
        """Total number of border entries (two per unitig)."""
        return sum(len(entries) for entries in self._entries.values())

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"BorderIndex(k={self.k}, keys={len(self)}, entries={self.entry_count})"


def build_border_index(store, k: int) -> BorderIndex:
    """
    Build the border index for every unitig in the store.

    Args:
        store: Sequence store with count() and get(i)
        k: K-mer size; boundaries are k-1 characters long

    Returns:
        BorderIndex over all unitig boundaries

    Raises:
        InvalidKmerSizeError: If k < 2
        UndersizedUnitigError: If any unitig is shorter than k-1
        InvalidCharacterError: If any unitig contains a non-nucleotide
    """
    check_k(k)

    entries: Dict[str, List[BorderEntry]] = defaultdict(list)
    n = store.count()

    for unitig_id in range(n):
        sequence = store.get(unitig_id)
        validate_unitig(sequence, k, unitig_id)

        first, last = boundaries(sequence, k)
        entries[first].append(BorderEntry(unitig_id, Position.START))
        entries[last].append(BorderEntry(unitig_id, Position.END))

    index = BorderIndex(k, dict(entries))
    logger.debug(f"Border index built: {n} unitigs, {len(index)} distinct boundaries")
    return index


__all__ = [
    "BorderIndex",
    "boundaries",
    "build_border_index",
    "check_k",
]
