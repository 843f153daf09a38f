"""
Sequence I/O module for StrandOrient.

Reads unitigs from FASTA/FASTQ (optionally gzipped) into a random-access
store and writes them back in their resolved orientation.
"""

from .io_core_module import (
    UnitigStore,
    detect_format,
    is_gzipped,
    open_file,
    orient_record,
    iter_oriented_records,
    write_oriented,
    write_oriented_file,
)

__all__ = [
    "UnitigStore",
    "detect_format",
    "is_gzipped",
    "open_file",
    "orient_record",
    "iter_oriented_records",
    "write_oriented",
    "write_oriented_file",
]
