"""
Utilities module for StrandOrient.

- sequence_utils.py: strict complement / reverse complement, unitig validation
- pipeline.py: orchestration (load -> index -> edges -> resolve -> write);
  import it from strandorient.utils.pipeline
"""

from .sequence_utils import (
    complement_base,
    reverse_complement,
    validate_unitig,
)

__all__ = [
    "complement_base",
    "reverse_complement",
    "validate_unitig",
]
