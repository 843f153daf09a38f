"""
StrandOrient pipeline orchestrator.

Runs the complete orientation pass over one unitig file:
- Load unitigs into a random-access store
- Build the border index of boundary (k-1)-mers
- Derive orientation-tagged edges (eagerly, or lazily per unitig)
- Resolve one orientation per unitig, component by component
- Write every unitig in its resolved orientation

Logging is configured by the caller (the CLI); this module only emits
through its module logger.
"""

from pathlib import Path
from typing import Optional, Dict, Any, TextIO, Union
import logging
import json
import time
from dataclasses import dataclass, field

from ..config.schema import default_config
from ..graph_core.border_index import build_border_index, check_k
from ..graph_core.edge_deriver import EdgeDeriver
from ..graph_core.orientation_resolver import OrientationResult, resolve_orientations
from ..io.io_core_module import UnitigStore, write_oriented, write_oriented_file

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Counts and timings from one orientation run."""
    k: int
    unitigs: int
    border_keys: int
    edges: Optional[int]                 # None when edges were streamed
    orientation: OrientationResult
    records_written: int = 0
    input_path: Optional[str] = None
    output_path: Optional[str] = None
    timings: Dict[str, float] = field(default_factory=dict)

    @property
    def n_components(self) -> int:
        return self.orientation.n_components

    @property
    def n_conflicts(self) -> int:
        return self.orientation.n_conflicts

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for serialization."""
        return {
            'k': self.k,
            'input': self.input_path,
            'output': self.output_path,
            'unitigs': self.unitigs,
            'border_keys': self.border_keys,
            'edges': self.edges,
            'components': self.orientation.n_components,
            'largest_component': max(self.orientation.component_sizes, default=0),
            'reversed': self.orientation.n_reversed,
            'conflicts': self.orientation.n_conflicts,
            'records_written': self.records_written,
            'timings_sec': {name: round(sec, 4) for name, sec in self.timings.items()},
        }

    def summary(self) -> str:
        """Return human-readable summary."""
        edges = 'streamed' if self.edges is None else f"{self.edges:,}"
        return (
            f"Orientation Summary:\n"
            f"  Unitigs: {self.unitigs:,} (k = {self.k})\n"
            f"  Boundary keys: {self.border_keys:,}, edges: {edges}\n"
            f"  Components: {self.orientation.n_components:,}\n"
            f"  Reversed: {self.orientation.n_reversed:,}\n"
            f"  Conflicts: {self.orientation.n_conflicts:,}"
        )

    def save_report(self, report_path: Union[str, Path]):
        """Write the run report as JSON."""
        report_path = Path(report_path)
        report_path.parent.mkdir(parents=True, exist_ok=True)
        with open(report_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)


class OrientationPipeline:
    """
    Orchestrates border index -> edges -> resolution -> output.

    Configuration keys used:
        orientation.conflict_mode: 'ignore', 'report' or 'fail'
        orientation.streaming_edges: derive edges per unitig during traversal
        output.compress: gzip file output
        output.report: JSON report path (optional)
    """

    def __init__(self, k: int, config: Optional[Dict[str, Any]] = None):
        """
        Initialize pipeline.

        Args:
            k: K-mer size (boundaries are k-1 long)
            config: Configuration dictionary (defaults when omitted)
        """
        check_k(k)
        self.k = k
        self.config = config or default_config()

        orientation_config = self.config.get('orientation', {})
        self.conflict_mode = orientation_config.get('conflict_mode', 'report')
        self.streaming_edges = orientation_config.get('streaming_edges', False)

    def orient_store(self, store: UnitigStore) -> PipelineResult:
        """
        Run graph construction and orientation on an already loaded store.

        Args:
            store: Unitig store

        Returns:
            PipelineResult (nothing written yet)
        """
        timings = {}

        start = time.time()
        border_index = build_border_index(store, self.k)
        timings['border_index'] = time.time() - start

        start = time.time()
        deriver = EdgeDeriver(store, self.k, border_index)
        if self.streaming_edges:
            edges = deriver.lazy_edges()
            n_edges = None
        else:
            edges = deriver.derive_edges()
            n_edges = sum(len(out_edges) for out_edges in edges)
        timings['edges'] = time.time() - start

        start = time.time()
        orientation = resolve_orientations(store.count(), edges, self.conflict_mode)
        timings['resolve'] = time.time() - start

        return PipelineResult(
            k=self.k,
            unitigs=store.count(),
            border_keys=len(border_index),
            edges=n_edges,
            orientation=orientation,
            timings=timings,
        )

    def run(self, input_path: Union[str, Path],
            output: Optional[Union[str, Path, TextIO]] = None) -> PipelineResult:
        """
        Orient every unitig of a sequence file and write the result.

        Args:
            input_path: FASTA/FASTQ input (optionally gzipped)
            output: Output path, or an open text handle (e.g. stdout)

        Returns:
            PipelineResult
        """
        logger.info(f"Orienting unitigs from {input_path} with k = {self.k}")

        start = time.time()
        store = UnitigStore.from_file(input_path)
        load_time = time.time() - start

        result = self.orient_store(store)
        result.timings = {'load': load_time, **result.timings}
        result.input_path = str(input_path)

        start = time.time()
        if output is None:
            logger.debug("No output requested; skipping write")
        elif hasattr(output, 'write'):
            if self.config.get('output', {}).get('compress'):
                logger.warning("output.compress is ignored when writing to a stream")
            result.records_written = write_oriented(
                store, result.orientation.orientations, output
            )
        else:
            result.output_path = str(output)
            result.records_written = write_oriented_file(
                store, result.orientation.orientations, output,
                compress=self.config.get('output', {}).get('compress', False),
            )
        result.timings['write'] = time.time() - start

        logger.info(
            f"Oriented {result.unitigs} unitigs: {result.orientation.n_reversed} reversed, "
            f"{result.n_components} components"
        )

        report_path = self.config.get('output', {}).get('report')
        if report_path:
            result.save_report(report_path)
            logger.info(f"Run report written to {report_path}")

        return result


__all__ = [
    "OrientationPipeline",
    "PipelineResult",
]
