#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandOrient v0.1.0

Exception types raised while validating input and orienting unitigs.

All of these are fatal for a run: the CLI reports the message and exits
with a non-zero status.

Author: StrandOrient Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from typing import Optional


class StrandOrientError(Exception):
    """Base class for all StrandOrient errors."""
    pass


class InvalidCharacterError(StrandOrientError, ValueError):
    """Raised when a sequence contains a character outside {A, C, G, T}."""

    def __init__(self, character: str, unitig_id: Optional[int] = None,
                 offset: Optional[int] = None):
        self.character = character
        self.unitig_id = unitig_id
        self.offset = offset

        message = f"Invalid character: {character!r}"
        if unitig_id is not None:
            message += f" in unitig {unitig_id}"
        if offset is not None:
            message += f" at offset {offset}"
        super().__init__(message)


class UndersizedUnitigError(StrandOrientError, ValueError):
    """Raised when a unitig is shorter than the k-1 boundary length."""

    def __init__(self, unitig_id: int, length: int, k: int):
        self.unitig_id = unitig_id
        self.length = length
        self.k = k
        super().__init__(
            f"Unitig {unitig_id} has length {length}, "
            f"shorter than k-1 = {k - 1} (k = {k})"
        )


class InvalidKmerSizeError(StrandOrientError, ValueError):
    """Raised when k leaves no boundary to compare (k < 2)."""

    def __init__(self, k: int):
        self.k = k
        super().__init__(f"k must be >= 2, got {k}")


class OrientationConflictError(StrandOrientError):
    """Raised when a unitig is reached again with the opposite orientation."""

    def __init__(self, unitig_id: int, assigned, proposed):
        self.unitig_id = unitig_id
        self.assigned = assigned
        self.proposed = proposed
        super().__init__(
            f"Orientation conflict at unitig {unitig_id}: "
            f"assigned {assigned.name}, reached again as {proposed.name}"
        )


class UnsupportedFormatError(StrandOrientError, ValueError):
    """Raised when the sequence file format cannot be determined."""
    pass
