"""
StrandOrient v0.1.0

Sequence utility functions for StrandOrient.

Complementing is strict: only the four nucleotides A, C, G and T are
accepted, and anything else is reported as an InvalidCharacterError.
"""

from typing import Optional

from ..errors import InvalidCharacterError, UndersizedUnitigError

COMPLEMENT_MAP = {
    'A': 'T', 'T': 'A',
    'G': 'C', 'C': 'G',
}

NUCLEOTIDES = frozenset(COMPLEMENT_MAP)


def complement_base(base: str) -> str:
    """
    Complement a single nucleotide.

    Args:
        base: One of 'A', 'C', 'G', 'T'

    Returns:
        The pairing nucleotide

    Raises:
        InvalidCharacterError: If base is not a nucleotide

    Example:
        >>> complement_base("G")
        'C'
    """
    try:
        return COMPLEMENT_MAP[base]
    except KeyError:
        raise InvalidCharacterError(base) from None


def reverse_complement(sequence: str) -> str:
    """
    Generate reverse complement of DNA sequence.

    Args:
        sequence: DNA sequence string over {A, C, G, T}

    Returns:
        Reverse complement sequence

    Raises:
        InvalidCharacterError: On the first character outside {A, C, G, T}

    Example:
        >>> reverse_complement("ATCG")
        'CGAT'
    """
    return ''.join(complement_base(base) for base in reversed(sequence))


def validate_unitig(sequence: str, k: int, unitig_id: Optional[int] = None) -> None:
    """
    Check that a unitig can take part in graph construction.

    Args:
        sequence: Unitig sequence
        k: K-mer size (boundaries are k-1 long)
        unitig_id: Identifier used in error messages

    Raises:
        UndersizedUnitigError: If the unitig is shorter than k-1
        InvalidCharacterError: If the unitig contains a non-nucleotide
    """
    if len(sequence) < k - 1:
        raise UndersizedUnitigError(unitig_id, len(sequence), k)

    if not NUCLEOTIDES.issuperset(sequence):
        for offset, base in enumerate(sequence):
            if base not in NUCLEOTIDES:
                raise InvalidCharacterError(base, unitig_id=unitig_id, offset=offset)


__all__ = [
    'COMPLEMENT_MAP',
    'complement_base',
    'reverse_complement',
    'validate_unitig',
]
