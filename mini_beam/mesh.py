# mesh.py - adaptive node generation along the beam axis

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from .config import AnalysisSettings, DEFAULT_SETTINGS
from .model import Load, Support

logger = logging.getLogger(__name__)


def closest_node_index(nodes: Sequence[float], x: float) -> int:
    """
    Map a position to the index of the nearest node.

    Ties (x exactly halfway between two nodes) resolve to the first, i.e.
    lower-x, node.
    """
    nodes = np.asarray(nodes, dtype=float)
    return int(np.argmin(np.abs(nodes - x)))


def critical_positions(
    length: float,
    supports: Iterable[Support],
    loads: Iterable[Load],
    probe_x: float,
) -> list[float]:
    """Sorted, de-duplicated positions that must be mesh nodes."""
    xs = {0.0, float(length), float(probe_x)}
    for s in supports:
        xs.add(s.position)
    for load in loads:
        xs.update(load.boundaries)
    return sorted(xs)


def generate_nodes(
    length: float,
    supports: Iterable[Support],
    loads: Iterable[Load],
    probe_x: float,
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> np.ndarray:
    """
    Node positions: every critical position, with each interval between two
    of them split into equal steps no wider than settings.min_interval(L).
    """
    xs = critical_positions(length, supports, loads, probe_x)
    min_interval = settings.min_interval(length)

    nodes = []
    for start, end in zip(xs[:-1], xs[1:]):
        nodes.append(start)
        n_sub = max(1, math.ceil((end - start) / min_interval))
        for j in range(1, n_sub):
            nodes.append(start + (j * (end - start)) / n_sub)
    nodes.append(float(length))
    return np.array(nodes, dtype=float)


@dataclass(frozen=True, eq=False)
class BeamMesh:
    """
    Nodes along the beam plus the nodes that carry an internal hinge.

    Element i spans nodes i and i+1. Built once per analysis, never mutated.
    """
    x: np.ndarray
    hinge_nodes: frozenset = frozenset()

    @property
    def n_nodes(self) -> int:
        return len(self.x)

    @property
    def n_elements(self) -> int:
        return len(self.x) - 1

    def closest(self, position: float) -> int:
        return closest_node_index(self.x, position)

    def element_span(self, i: int) -> tuple[float, float, float]:
        x1 = float(self.x[i])
        x2 = float(self.x[i + 1])
        return x1, x2, x2 - x1

    def releases(self, i: int) -> tuple[bool, bool]:
        """(release_start, release_end) for element i."""
        return i in self.hinge_nodes, (i + 1) in self.hinge_nodes


def build_mesh(
    length: float,
    supports: Sequence[Support],
    loads: Sequence[Load],
    probe_x: float,
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> BeamMesh:
    x = generate_nodes(length, supports, loads, probe_x, settings)
    hinges = frozenset(closest_node_index(x, s.position) for s in supports if s.is_hinge)
    logger.debug("Mesh: %d nodes, %d hinge node(s)", len(x), len(hinges))
    return BeamMesh(x=x, hinge_nodes=hinges)
