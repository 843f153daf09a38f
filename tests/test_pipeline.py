#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandOrient v0.1.0

Integration tests for the orientation pipeline.

Author: StrandOrient Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import io
import json
import logging

import pytest
from strandorient.config.schema import default_config
from strandorient.errors import (
    InvalidCharacterError,
    InvalidKmerSizeError,
    OrientationConflictError,
    UndersizedUnitigError,
)
from strandorient.graph_core import Orientation
from strandorient.io import UnitigStore
from strandorient.utils.pipeline import OrientationPipeline

F = Orientation.FORWARD
R = Orientation.REVERSE


def _write(path, content):
    with open(path, 'w') as f:
        f.write(content)
    return path


class TestOrientStore:
    """Test graph construction plus resolution on in-memory stores."""

    def test_reverse_linked(self, reverse_linked_store):
        result = OrientationPipeline(4).orient_store(reverse_linked_store)

        assert result.orientation.orientations == [F, R]
        assert result.unitigs == 2
        assert result.border_keys == 4
        assert result.edges == 2

    def test_streaming_edges(self, reverse_linked_store):
        config = default_config()
        config['orientation']['streaming_edges'] = True

        result = OrientationPipeline(4, config).orient_store(reverse_linked_store)

        assert result.orientation.orientations == [F, R]
        assert result.edges is None
        assert "streamed" in result.summary()

    def test_fail_mode(self):
        config = default_config()
        config['orientation']['conflict_mode'] = 'fail'
        store = UnitigStore.from_sequences(["GGGACGT"])

        with pytest.raises(OrientationConflictError):
            OrientationPipeline(5, config).orient_store(store)

    def test_invalid_k(self):
        with pytest.raises(InvalidKmerSizeError):
            OrientationPipeline(1)


class TestPipelineRun:
    """Test file-to-output runs."""

    def test_run_to_handle(self, temp_output_dir, simple_fasta):
        input_path = _write(temp_output_dir / "unitigs.fa", simple_fasta)
        handle = io.StringIO()

        result = OrientationPipeline(4).run(input_path, output=handle)

        assert handle.getvalue() == ">u0 first unitig\nAATCG\n>u1\nTCGGA\n>u2\nGGACTG\n"
        assert result.records_written == 3
        assert result.n_components == 1
        assert result.n_conflicts == 0
        assert set(result.timings) == {'load', 'border_index', 'edges', 'resolve', 'write'}

    def test_run_to_file_with_report(self, temp_output_dir, simple_fastq):
        input_path = _write(temp_output_dir / "unitigs.fq", simple_fastq)
        output_path = temp_output_dir / "oriented.fq"
        report_path = temp_output_dir / "report.json"
        config = default_config()
        config['output']['report'] = str(report_path)

        OrientationPipeline(4, config).run(input_path, output=output_path)

        assert output_path.read_text() == "@u0\nAATCG\n+\nABCDE\n@u1\nTCGGA\n+\nJIHGF\n"
        report = json.loads(report_path.read_text())
        assert report['unitigs'] == 2
        assert report['reversed'] == 1
        assert report['components'] == 1
        assert report['output'] == str(output_path)

    def test_run_without_output(self, temp_output_dir, simple_fasta):
        input_path = _write(temp_output_dir / "unitigs.fa", simple_fasta)

        result = OrientationPipeline(4).run(input_path)

        assert result.records_written == 0
        assert result.orientation.orientations == [F, F, R]

    def test_undersized_unitig(self, temp_output_dir):
        input_path = _write(temp_output_dir / "unitigs.fa", ">a\nAATCGG\n>b\nAC\n")

        with pytest.raises(UndersizedUnitigError):
            OrientationPipeline(5).run(input_path, output=io.StringIO())

    def test_invalid_character_produces_no_output(self, temp_output_dir):
        input_path = _write(temp_output_dir / "unitigs.fa", ">a\nAATNGG\n")
        handle = io.StringIO()

        with pytest.raises(InvalidCharacterError):
            OrientationPipeline(4).run(input_path, output=handle)

        assert handle.getvalue() == ""

    def test_result_to_dict(self, reverse_linked_store):
        data = OrientationPipeline(4).orient_store(reverse_linked_store).to_dict()

        assert data['k'] == 4
        assert data['largest_component'] == 2
        assert data['conflicts'] == 0

    def test_compress_ignored_for_stream(self, temp_output_dir, simple_fasta, caplog):
        input_path = _write(temp_output_dir / "unitigs.fa", simple_fasta)
        config = default_config()
        config['output']['compress'] = True
        handle = io.StringIO()

        with caplog.at_level(logging.WARNING):
            OrientationPipeline(4, config).run(input_path, output=handle)

        assert handle.getvalue().startswith(">u0 first unitig\nAATCG\n")
        assert "output.compress is ignored" in caplog.text
