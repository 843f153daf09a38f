#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Core I/O module for StrandOrient.

Consolidated module containing:
- File utilities (gzip handling, FASTA/FASTQ format detection)
- UnitigStore, a random-access read-only store of unitig records
- Oriented record writer

Parsing and serialization are delegated to Biopython's SeqIO; the graph
code only ever sees plain sequence strings through UnitigStore.get().
"""

# =============================================================================
# SECTION 1: IMPORTS AND DEPENDENCIES
# =============================================================================

import gzip
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, TextIO, Union

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from ..errors import UnsupportedFormatError
from ..graph_core.data_structures import Orientation
from ..utils.sequence_utils import reverse_complement

logger = logging.getLogger(__name__)

FASTA_SUFFIXES = ('.fa', '.fasta', '.fna', '.fas')
FASTQ_SUFFIXES = ('.fq', '.fastq')

# Biopython writer names per input format; FASTA is written unwrapped
WRITE_FORMATS = {
    'fasta': 'fasta-2line',
    'fastq': 'fastq',
}


# =============================================================================
# SECTION 2: FILE UTILITIES
# =============================================================================

def is_gzipped(filepath: Union[str, Path]) -> bool:
    """
    Check if file is gzip compressed (by suffix).

    Args:
        filepath: Path to file

    Returns:
        True if file is gzipped
    """
    return Path(filepath).suffix.lower() in ('.gz', '.gzip')


def open_file(filepath: Union[str, Path], mode: str = 'r') -> TextIO:
    """
    Open file with automatic gzip detection.

    Args:
        filepath: Path to file
        mode: File mode ('r' or 'w')

    Returns:
        Text file handle
    """
    filepath = Path(filepath)

    if is_gzipped(filepath):
        if 'r' in mode:
            return gzip.open(filepath, 'rt')
        else:
            return gzip.open(filepath, 'wt')
    else:
        return open(filepath, mode)


def detect_format(filepath: Union[str, Path]) -> str:
    """
    Determine whether a sequence file is FASTA or FASTQ.

    The file extension (ignoring a trailing .gz) decides when it is known;
    otherwise the first non-blank character is inspected ('>' or '@').

    Args:
        filepath: Path to sequence file

    Returns:
        'fasta' or 'fastq'

    Raises:
        UnsupportedFormatError: If neither rule identifies the format
    """
    filepath = Path(filepath)
    suffixes = [s.lower() for s in filepath.suffixes]
    if suffixes and suffixes[-1] in ('.gz', '.gzip'):
        suffixes = suffixes[:-1]

    if suffixes:
        if suffixes[-1] in FASTA_SUFFIXES:
            return 'fasta'
        if suffixes[-1] in FASTQ_SUFFIXES:
            return 'fastq'

    with open_file(filepath, 'r') as handle:
        for line in handle:
            stripped = line.strip()
            if not stripped:
                continue
            if stripped.startswith('>'):
                return 'fasta'
            if stripped.startswith('@'):
                return 'fastq'
            break

    raise UnsupportedFormatError(
        f"Cannot determine sequence format of {filepath} (expected FASTA or FASTQ)"
    )


# =============================================================================
# SECTION 3: UNITIG STORE
# =============================================================================

class UnitigStore:
    """
    Random-access, read-only collection of unitig records.

    Unitig ids are dense and 0-based, in file order.

    Attributes:
        records: Parsed SeqRecord objects
        file_format: 'fasta' or 'fastq'
        source: Path the records were read from, if any
    """

    def __init__(self, records: Sequence[SeqRecord], file_format: str = 'fasta',
                 source: Optional[Path] = None):
        if file_format not in WRITE_FORMATS:
            raise UnsupportedFormatError(f"Unsupported sequence format: {file_format}")
        self.records: List[SeqRecord] = list(records)
        self.file_format = file_format
        self.source = source
        self._sequences = [str(record.seq) for record in self.records]

    @classmethod
    def from_file(cls, filepath: Union[str, Path],
                  file_format: Optional[str] = None) -> 'UnitigStore':
        """
        Load every record of a FASTA/FASTQ file (optionally gzipped).

        Args:
            filepath: Input sequence file
            file_format: 'fasta' or 'fastq'; detected when omitted

        Returns:
            UnitigStore over the file's records

        Raises:
            FileNotFoundError: If the file does not exist
            UnsupportedFormatError: If the format cannot be detected
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"Sequence file not found: {filepath}")

        file_format = file_format or detect_format(filepath)

        with open_file(filepath, 'r') as handle:
            records = list(SeqIO.parse(handle, file_format))

        logger.info(f"Loaded {len(records)} unitigs from {filepath} ({file_format})")
        return cls(records, file_format=file_format, source=filepath)

    @classmethod
    def from_sequences(cls, sequences: Iterable[str], prefix: str = 'unitig') -> 'UnitigStore':
        """
        Build an in-memory FASTA store from plain sequences.

        Records are named '<prefix>_<id>'.
        """
        records = [
            SeqRecord(Seq(sequence), id=f"{prefix}_{i}", description="")
            for i, sequence in enumerate(sequences)
        ]
        return cls(records, file_format='fasta')

    def count(self) -> int:
        """Number of unitigs."""
        return len(self._sequences)

    def get(self, unitig_id: int) -> str:
        """Sequence of unitig unitig_id."""
        return self._sequences[unitig_id]

    def record(self, unitig_id: int) -> SeqRecord:
        """Full record (id, description, qualities) of unitig unitig_id."""
        return self.records[unitig_id]

    def total_length(self) -> int:
        return sum(len(sequence) for sequence in self._sequences)

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        return (f"UnitigStore(unitigs={self.count()}, format='{self.file_format}', "
                f"source={self.source})")


# =============================================================================
# SECTION 4: ORIENTED OUTPUT
# =============================================================================

def orient_record(record: SeqRecord, orientation: Orientation) -> SeqRecord:
    """
    Lay a record out in the given orientation.

    REVERSE records get the reverse complement sequence; per-letter
    annotations (FASTQ qualities) are reversed to stay aligned with the
    bases. Identifiers and descriptions are kept.
    """
    if orientation is Orientation.FORWARD:
        return record

    annotations = {
        key: value[::-1] for key, value in record.letter_annotations.items()
    }
    return SeqRecord(
        Seq(reverse_complement(str(record.seq))),
        id=record.id,
        name=record.name,
        description=record.description,
        letter_annotations=annotations,
    )


def iter_oriented_records(store: UnitigStore,
                          orientations: Sequence[Orientation]) -> Iterator[SeqRecord]:
    """Yield one oriented record per unitig id, in id order."""
    if len(orientations) != store.count():
        raise ValueError(
            f"Got {len(orientations)} orientations for {store.count()} unitigs"
        )
    for unitig_id, orientation in enumerate(orientations):
        yield orient_record(store.record(unitig_id), orientation)


def write_oriented(store: UnitigStore, orientations: Sequence[Orientation],
                   handle: TextIO, file_format: Optional[str] = None) -> int:
    """
    Write every unitig in its resolved orientation.

    Args:
        store: Source records
        orientations: One orientation per unitig id
        handle: Open text handle
        file_format: 'fasta' or 'fastq' (defaults to the store's format)

    Returns:
        Number of records written
    """
    file_format = file_format or store.file_format
    count = SeqIO.write(
        iter_oriented_records(store, orientations), handle, WRITE_FORMATS[file_format]
    )
    logger.debug(f"Wrote {count} {file_format} records")
    return count


def write_oriented_file(store: UnitigStore, orientations: Sequence[Orientation],
                        filepath: Union[str, Path], compress: bool = False) -> int:
    """
    Write oriented records to a file, gzip-compressed if requested or if
    the path ends in .gz.

    Returns:
        Number of records written
    """
    filepath = Path(filepath)

    # Add .gz extension if compressing
    if compress and not is_gzipped(filepath):
        filepath = Path(str(filepath) + '.gz')

    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open_file(filepath, 'w') as handle:
        return write_oriented(store, orientations, handle)
