# loads.py - Equivalent nodal loads for point, moment and line loads

import numpy as np
from typing import Iterable, Sequence

from .config import AnalysisSettings, DEFAULT_SETTINGS
from .elements import beam_local_stiffness, apply_moment_release
from .kernel.assemble import assemble_global_F
from .kernel.dof import DOF_BEAM, TRANSLATION, ROTATION
from .mesh import BeamMesh
from .model import DISTRIBUTED_LOADS, Load, MomentLoad, PointLoad


def trapezoid_equiv_nodal_load(q1: float, q2: float, a: float) -> np.ndarray:
    """
    Equivalent nodal loads of a linearly varying line load on one element.

    A load of intensity q1 at the start and q2 at the end over length a
    (positive = downward, N/m) is replaced by forces and moments at the two
    element nodes:

    - The resultant W = (q1 + q2) * a / 2 is split equally between the
      two end shears: -W/2 each (downward is negative DOF direction)
    - The end moments use the average intensity: (q1 + q2) * a^2 / 24,
      negative at the start node and positive at the end node

    For q1 == q2 == w this is the familiar [-wL/2, -wL^2/12, -wL/2, +wL^2/12].

    Parameters:
    -----------
    q1, q2 : float
        Intensities at the two ends of the loaded length (N/m)
    a : float
        Loaded length (m)

    Returns:
    --------
    np.ndarray
        Shape (4,): [Fv_i, M_i, Fv_j, M_j]
    """
    total_load = (q1 + q2) * a / 2.0
    moment_magnitude = (q1 + q2) * a * a / 24.0
    return np.array([
        -total_load / 2.0,
        -moment_magnitude,
        -total_load / 2.0,
        moment_magnitude,
    ], dtype=float)


def element_distributed_load(
    x1: float,
    x2: float,
    loads: Iterable[Load],
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> np.ndarray:
    """
    Sum the equivalent nodal loads of every UDL/UVL overlapping [x1, x2].

    Overlaps shorter than settings.overlap_tol are ignored. Returned in N and
    N*m, before any moment-release condensation.
    """
    fe = np.zeros(4, dtype=float)
    for load in loads:
        if not isinstance(load, DISTRIBUTED_LOADS):
            continue
        xa = max(x1, load.position)
        xb = min(x2, load.end_position)
        if xa >= xb - settings.overlap_tol:
            continue
        q1 = load.intensity_at(xa) * settings.force_scale
        q2 = load.intensity_at(xb) * settings.force_scale
        fe += trapezoid_equiv_nodal_load(q1, q2, xb - xa)
    return fe


def element_equivalent_load(
    mesh: BeamMesh,
    i: int,
    EI: float,
    loads: Sequence[Load],
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> np.ndarray:
    """Distributed-load vector of element i, condensed for hinge releases."""
    x1, x2, Le = mesh.element_span(i)
    fe = element_distributed_load(x1, x2, loads, settings)
    release_start, release_end = mesh.releases(i)
    if release_start or release_end:
        ke = beam_local_stiffness(EI, Le)
        _, fe = apply_moment_release(ke, fe, release_start, release_end, settings.release_tol)
    return fe


def build_load_vector(
    mesh: BeamMesh,
    EI: float,
    loads: Sequence[Load],
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> np.ndarray:
    """
    Global load vector for one load case.

    Line loads go through their element equivalent loads; point forces and
    couples are applied at the DOFs of the node closest to their position.
    """
    ndof = DOF_BEAM.ndof(mesh.n_nodes)

    contributions = []
    if any(isinstance(load, DISTRIBUTED_LOADS) for load in loads):
        for i in range(mesh.n_elements):
            if mesh.element_span(i)[2] <= 0.0:
                continue
            fe = element_equivalent_load(mesh, i, EI, loads, settings)
            contributions.append((DOF_BEAM.element_dof_map([i, i + 1]), fe))
    F = assemble_global_F(ndof, contributions)

    for load in loads:
        if isinstance(load, PointLoad):
            node = mesh.closest(load.position)
            F[DOF_BEAM.idx(node, TRANSLATION)] -= load.magnitude * settings.force_scale
        elif isinstance(load, MomentLoad):
            node = mesh.closest(load.position)
            F[DOF_BEAM.idx(node, ROTATION)] += load.magnitude * settings.force_scale

    return F
