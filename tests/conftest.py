#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandOrient v0.1.0

Pytest configuration and shared fixtures.

Author: StrandOrient Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
from pathlib import Path
import tempfile
import shutil

from strandorient.io.io_core_module import UnitigStore


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="strandorient_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def linked_store():
    """Two unitigs glued forward: AATCG ends in TCG, TCGGA starts with it (k=4)."""
    return UnitigStore.from_sequences(["AATCG", "TCGGA"])


@pytest.fixture
def reverse_linked_store():
    """Second unitig is the reverse complement of TCGGA, so it must be flipped (k=4)."""
    return UnitigStore.from_sequences(["AATCG", "TCCGA"])


@pytest.fixture
def simple_fasta():
    """Two forward-linked unitigs plus one reverse-linked unitig (k=4)."""
    return """>u0 first unitig
AATCG
>u1
TCGGA
>u2
CAGTCC
"""


@pytest.fixture
def simple_fastq():
    """FASTQ unitigs; the second must be reverse complemented (k=4)."""
    return """@u0
AATCG
+
ABCDE
@u1
TCCGA
+
FGHIJ
"""

# StrandOrient v0.1.0
# Any usage is subject to this software's license.
