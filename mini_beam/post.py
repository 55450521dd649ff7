# element end forces, shear/moment recovery, reactions, determinacy

import numpy as np
from dataclasses import dataclass
from typing import List, Literal, Sequence, Tuple

from .assembly import element_stiffness
from .config import AnalysisSettings, DEFAULT_SETTINGS
from .kernel.dof import DOF_BEAM, TRANSLATION, ROTATION
from .loads import element_equivalent_load
from .mesh import BeamMesh
from .model import Load, Support

Side = Literal["left", "right"]


@dataclass(frozen=True)
class Reaction:
    """Support reaction in output units (kN, kNm)."""
    position: float
    force: float
    moment: float
    label: str
    id: str


def element_end_forces(
    mesh: BeamMesh,
    i: int,
    d_global: np.ndarray,
    EI: float,
    loads: Sequence[Load],
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> np.ndarray:
    """
    End forces of element i from the solved global displacements.

    The process:
    1. Gather the element's displacements [v1, th1, v2, th2]
    2. Compute f = k @ d with the (hinge-condensed) element stiffness
    3. Subtract the equivalent nodal loads of the line loads on the element,
       which adds back their fixed-end forces

    Returns:
    --------
    np.ndarray
        Shape (4,): [V_i, M_i, V_j, M_j] acting on the element (N, N*m),
        forces positive upward, moments positive counter-clockwise
    """
    dof_map = DOF_BEAM.element_dof_map([i, i + 1])
    d_elem = d_global[dof_map]
    ke = element_stiffness(mesh, i, EI, settings)
    f_eq = element_equivalent_load(mesh, i, EI, loads, settings)
    return ke @ d_elem - f_eq


def internal_forces_at(
    mesh: BeamMesh,
    d_global: np.ndarray,
    x: float,
    EI: float,
    loads: Sequence[Load],
    side: Side = "left",
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> Tuple[float, float]:
    """
    Shear and bending moment (kN, kNm) at the node closest to x.

    Shear and moment jump at point loads, couples and supports, so the side
    picks the branch: "left" reads the element ending at the node, "right"
    the element starting at it. At the beam ends the only element is used.

    Sign convention: positive shear when the part left of the section is
    pushed up, positive (sagging) moment when the bottom fibre is in tension.
    """
    node = mesh.closest(x)
    elem = node - 1 if side == "left" else node
    elem = min(max(elem, 0), mesh.n_elements - 1)

    if mesh.element_span(elem)[2] <= 0.0:
        return 0.0, 0.0

    f = element_end_forces(mesh, elem, d_global, EI, loads, settings)
    scale = settings.force_scale
    if node == elem:
        return f[0] / scale, -f[1] / scale
    return -f[2] / scale, f[3] / scale


def nodal_diagrams(
    mesh: BeamMesh,
    d_global: np.ndarray,
    EI: float,
    loads: Sequence[Load],
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Shear, moment and deflection at every node.

    Shear and moment are read from the left side of each node; moments
    smaller than settings.moment_zero_tol are reported as exactly zero.
    Deflection is in mm, positive upward.
    """
    shear = np.zeros(mesh.n_nodes, dtype=float)
    moment = np.zeros(mesh.n_nodes, dtype=float)
    for n, x in enumerate(mesh.x):
        V, M = internal_forces_at(mesh, d_global, x, EI, loads, "left", settings)
        shear[n] = V
        moment[n] = 0.0 if abs(M) < settings.moment_zero_tol else M

    deflection = d_global[TRANSLATION::DOF_BEAM.dof_per_node] * settings.deflection_scale
    return shear, moment, deflection


def reaction_force(mesh: BeamMesh, support: Support, d_global: np.ndarray,
                   penalty: float, settings: AnalysisSettings = DEFAULT_SETTINGS) -> float:
    """Vertical reaction (kN, positive upward) carried by the penalty spring."""
    node = mesh.closest(support.position)
    return penalty * d_global[DOF_BEAM.idx(node, TRANSLATION)] / -settings.force_scale


def compute_reactions(
    mesh: BeamMesh,
    supports: Sequence[Support],
    d_global: np.ndarray,
    penalty: float,
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> List[Reaction]:
    """
    One Reaction per non-hinge support, labelled R1, R2, ... in input order.

    The moment is only non-zero for FIXED supports and is reported with the
    bending-moment sign (hogging negative).
    """
    result = []
    for s in (s for s in supports if not s.is_hinge):
        node = mesh.closest(s.position)
        force = reaction_force(mesh, s, d_global, penalty, settings)
        moment = 0.0
        if s.restrains_rotation:
            moment = penalty * d_global[DOF_BEAM.idx(node, ROTATION)] / settings.force_scale
        result.append(Reaction(
            position=s.position,
            force=float(force),
            moment=float(moment),
            label=f"R{len(result) + 1}",
            id=s.id,
        ))
    return result


def reaction_count(supports: Sequence[Support]) -> int:
    """3 per FIXED, 2 per PINNED, 1 per ROLLER, 0 per HINGE."""
    return sum(s.reaction_count for s in supports)


def determinacy(supports: Sequence[Support], hinge_count: int) -> int:
    """
    Degree of static indeterminacy: reactions - 3 equilibrium equations -
    one condition per internal hinge. Negative values indicate a mechanism.
    """
    return reaction_count(supports) - 3 - hinge_count


def is_stable(supports: Sequence[Support]) -> bool:
    """
    Necessary condition only: at least three reaction components.
    Badly placed supports (geometric instability) are not detected.
    """
    return reaction_count(supports) >= 3
