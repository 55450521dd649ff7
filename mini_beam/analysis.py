# analysis.py - single entry point: beam description in, AnalysisResults out
"""
ANALYSIS PIPELINE
=================

    analyze(config, supports, loads, probe_x)

    1. Validate geometry (abort before any matrix work)
    2. Mesh the beam around every support, load boundary and the probe
    3. Assemble K with hinge releases, add penalty springs at supports
    4. Factorize K once
    5. Solve the main load case, recover diagrams and reactions
    6. If the support layout is stable, sweep a unit load for influence lines
       reusing the same factorization

Everything is built fresh per call; a call either returns complete results
or raises.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from .assembly import build_global_system
from .config import AnalysisSettings, DEFAULT_SETTINGS
from .influence import InfluencePoint, compute_influence_lines, empty_influence_lines
from .kernel.dof import DOF_BEAM, ROTATION
from .loads import build_load_vector
from .mesh import build_mesh
from .model import BeamConfig, InvalidBeamError, Load, MomentLoad, Support
from .post import Reaction, compute_reactions, determinacy, is_stable, nodal_diagrams

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResults:
    """
    Complete output of one analysis call.

    Per-node arrays share the order of `nodes`. Units: positions m, shear and
    reactions kN, moments kNm, deflection mm (positive upward). Influence
    ordinates are per unit load.
    """
    nodes: np.ndarray
    shear_force: np.ndarray
    bending_moment: np.ndarray
    deflection: np.ndarray
    reactions: List[Reaction]
    max_shear: float
    min_shear: float
    max_moment: float
    min_moment: float
    max_deflection: float
    min_deflection: float
    determinacy: int
    is_stable: bool
    ild_reactions: Dict[str, List[InfluencePoint]]
    ild_shear_at_probe: List[InfluencePoint]
    ild_moment_at_probe: List[InfluencePoint]
    warnings: List[str] = field(default_factory=list)

    def reaction(self, support_id: str) -> Reaction:
        for r in self.reactions:
            if r.id == support_id:
                return r
        raise KeyError(support_id)

    def to_dict(self) -> dict:
        """JSON-ready dict using the camelCase result keys of the web client."""
        def line(points):
            return [{"x": p.x, "value": p.value} for p in points]

        return {
            "nodes": self.nodes.tolist(),
            "shearForce": self.shear_force.tolist(),
            "bendingMoment": self.bending_moment.tolist(),
            "deflection": self.deflection.tolist(),
            "reactions": [
                {"position": r.position, "force": r.force, "moment": r.moment,
                 "label": r.label, "id": r.id}
                for r in self.reactions
            ],
            "maxShear": self.max_shear,
            "minShear": self.min_shear,
            "maxMoment": self.max_moment,
            "minMoment": self.min_moment,
            "maxDeflection": self.max_deflection,
            "minDeflection": self.min_deflection,
            "determinacy": self.determinacy,
            "isStable": self.is_stable,
            "ildReactions": {sid: line(pts) for sid, pts in self.ild_reactions.items()},
            "ildShearAtProbe": line(self.ild_shear_at_probe),
            "ildMomentAtProbe": line(self.ild_moment_at_probe),
            "warnings": list(self.warnings),
        }

    def to_frame(self) -> pd.DataFrame:
        """Per-node diagrams as a DataFrame (x, shear, moment, deflection)."""
        return pd.DataFrame({
            "x": self.nodes,
            "shear": self.shear_force,
            "moment": self.bending_moment,
            "deflection": self.deflection,
        })


def _check_positions(config: BeamConfig, supports, loads, probe_x: float) -> None:
    L = config.length
    if not math.isfinite(probe_x) or not 0.0 <= probe_x <= L:
        raise InvalidBeamError(f"Probe position {probe_x} is outside the beam [0, {L}]")
    for s in supports:
        if not 0.0 <= s.position <= L:
            raise InvalidBeamError(f"Support {s.id!r} at {s.position} is outside the beam [0, {L}]")
    for load in loads:
        for x in load.boundaries:
            if not 0.0 <= x <= L:
                raise InvalidBeamError(f"Load {load.id!r} at {x} is outside the beam [0, {L}]")


def analyze(
    config: BeamConfig,
    supports: Sequence[Support],
    loads: Sequence[Load],
    probe_x: float,
    settings: Optional[AnalysisSettings] = None,
) -> AnalysisResults:
    """
    Analyse a beam and return diagrams, reactions and influence lines.

    Raises:
        InvalidBeamError: non-positive length or EI, or any position
            (support, load boundary, probe) outside [0, L]
    """
    settings = settings or DEFAULT_SETTINGS
    supports = list(supports)
    loads = list(loads)
    probe_x = float(probe_x)

    L = config.length
    EI = config.flexural_rigidity(settings)
    if L <= 0.0 or not EI > 0.0:
        raise InvalidBeamError("Invalid beam geometry: length and EI must be positive.")
    _check_positions(config, supports, loads, probe_x)

    mesh = build_mesh(L, supports, loads, probe_x, settings)
    system = build_global_system(mesh, EI, supports, settings)
    lu = system.factorize()

    warnings = []
    hinge_dofs = {DOF_BEAM.idx(n, ROTATION) for n in mesh.hinge_nodes}
    unexpected = [i for i in lu.singular_pivots if i not in hinge_dofs]
    if unexpected:
        msg = (f"Stiffness matrix has {len(unexpected)} near-zero pivot(s) "
               f"(DOFs {unexpected}); those displacements were set to zero.")
        logger.warning(msg)
        warnings.append(msg)
    for load in loads:
        if isinstance(load, MomentLoad) and mesh.closest(load.position) in mesh.hinge_nodes:
            msg = f"Moment load {load.id!r} acts on a hinge and is not transmitted."
            logger.warning(msg)
            warnings.append(msg)

    F = build_load_vector(mesh, EI, loads, settings)
    d = lu.solve(F)
    logger.debug("Main load case solved (%d loads)", len(loads))

    shear, moment, deflection = nodal_diagrams(mesh, d, EI, loads, settings)
    reactions = compute_reactions(mesh, supports, d, system.penalty, settings)

    stable = is_stable(supports)
    if stable:
        lines = compute_influence_lines(system, lu, supports, L, probe_x, settings)
    else:
        logger.debug("Support layout is unstable; influence lines skipped")
        lines = empty_influence_lines(supports)

    return AnalysisResults(
        nodes=mesh.x.copy(),
        shear_force=shear,
        bending_moment=moment,
        deflection=deflection,
        reactions=reactions,
        max_shear=float(shear.max()),
        min_shear=float(shear.min()),
        max_moment=float(moment.max()),
        min_moment=float(moment.min()),
        max_deflection=float(deflection.max()),
        min_deflection=float(deflection.min()),
        determinacy=determinacy(supports, len(mesh.hinge_nodes)),
        is_stable=stable,
        ild_reactions=lines.reactions,
        ild_shear_at_probe=lines.shear_at_probe,
        ild_moment_at_probe=lines.moment_at_probe,
        warnings=warnings,
    )
