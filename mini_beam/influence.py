# influence.py - influence lines from repeated unit-load solves
"""
INFLUENCE LINES
===============

A unit point load (1 kN) travels across the beam. At each station the
already-factorized system is solved again and the response quantities of
interest are recorded:

- the reaction at every non-hinge support
- shear and bending moment at the probe section

Only the right-hand side changes between stations, so the O(n^3)
factorization is paid once and each station costs O(n^2).
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

import numpy as np

from .assembly import GlobalSystem
from .config import AnalysisSettings, DEFAULT_SETTINGS
from .kernel.solve import LUFactorization
from .loads import build_load_vector
from .model import PointLoad, Support
from .post import internal_forces_at, reaction_force

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InfluencePoint:
    x: float
    value: float


@dataclass
class InfluenceLines:
    reactions: Dict[str, List[InfluencePoint]] = field(default_factory=dict)
    shear_at_probe: List[InfluencePoint] = field(default_factory=list)
    moment_at_probe: List[InfluencePoint] = field(default_factory=list)


def influence_stations(length: float, steps: int) -> np.ndarray:
    """steps + 1 evenly spaced load positions from 0 to length inclusive."""
    return np.array([(i / steps) * length for i in range(steps + 1)], dtype=float)


def empty_influence_lines(supports: Sequence[Support]) -> InfluenceLines:
    """One empty reaction line per non-hinge support."""
    return InfluenceLines(reactions={s.id: [] for s in supports if not s.is_hinge})


def compute_influence_lines(
    system: GlobalSystem,
    factorization: LUFactorization,
    supports: Sequence[Support],
    length: float,
    probe_x: float,
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> InfluenceLines:
    """
    Sweep a unit load over settings.ild_steps + 1 stations.

    The probe is read from its right side while the load sits at or left of
    it and from its left side once the load has passed, so the ordinate jump
    as the load crosses the probe is captured.
    """
    mesh = system.mesh
    lines = empty_influence_lines(supports)
    reacting = [s for s in supports if not s.is_hinge]

    for x in influence_stations(length, settings.ild_steps):
        x = float(x)
        unit_load = [PointLoad(id="unit", magnitude=1.0, position=x)]
        F = build_load_vector(mesh, system.EI, unit_load, settings)
        d = factorization.solve(F)

        for s in reacting:
            value = reaction_force(mesh, s, d, system.penalty, settings)
            lines.reactions[s.id].append(InfluencePoint(x, float(value)))

        side = "right" if x <= probe_x else "left"
        shear, moment = internal_forces_at(mesh, d, probe_x, system.EI, unit_load, side, settings)
        lines.shear_at_probe.append(InfluencePoint(x, float(shear)))
        lines.moment_at_probe.append(InfluencePoint(x, float(moment)))

    logger.debug("Influence lines: %d stations, %d reaction line(s)",
                 settings.ild_steps + 1, len(lines.reactions))
    return lines
