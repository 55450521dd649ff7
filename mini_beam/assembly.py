# global K assembly for the meshed beam + penalty supports

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .config import AnalysisSettings, DEFAULT_SETTINGS
from .elements import beam_local_stiffness, apply_moment_release
from .kernel.assemble import assemble_global_K, add_penalty
from .kernel.dof import DOF_BEAM, TRANSLATION, ROTATION
from .kernel.solve import LUFactorization
from .mesh import BeamMesh
from .model import Support

logger = logging.getLogger(__name__)


def element_stiffness(
    mesh: BeamMesh,
    i: int,
    EI: float,
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> np.ndarray:
    """Stiffness of element i with hinge releases condensed out."""
    _, _, Le = mesh.element_span(i)
    ke = beam_local_stiffness(EI, Le)
    release_start, release_end = mesh.releases(i)
    if release_start or release_end:
        ke, _ = apply_moment_release(ke, np.zeros(4), release_start, release_end,
                                     settings.release_tol)
    return ke


def assemble_beam_K(
    mesh: BeamMesh,
    EI: float,
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> np.ndarray:
    """Unrestrained global stiffness (2N x 2N). Zero-length elements are skipped."""
    contributions = []
    for i in range(mesh.n_elements):
        if mesh.element_span(i)[2] <= 0.0:
            continue
        contributions.append((DOF_BEAM.element_dof_map([i, i + 1]),
                              element_stiffness(mesh, i, EI, settings)))
    return assemble_global_K(DOF_BEAM.ndof(mesh.n_nodes), contributions)


def restrained_dofs(mesh: BeamMesh, supports: Sequence[Support]) -> list[int]:
    """
    DOFs that receive a penalty spring, one entry per restraint.

    PINNED/ROLLER restrain the translation of the closest node, FIXED also
    its rotation. HINGE restrains nothing.
    """
    dofs = []
    for s in supports:
        node = mesh.closest(s.position)
        if s.restrains_translation:
            dofs.append(DOF_BEAM.idx(node, TRANSLATION))
        if s.restrains_rotation:
            dofs.append(DOF_BEAM.idx(node, ROTATION))
    return dofs


@dataclass(eq=False)
class GlobalSystem:
    """
    Penalty-augmented stiffness of one analysis call.

    Owns K and its factorization; nothing here is shared between calls.
    """
    mesh: BeamMesh
    EI: float
    penalty: float
    K: np.ndarray
    settings: AnalysisSettings = DEFAULT_SETTINGS

    @property
    def ndof(self) -> int:
        return self.K.shape[0]

    def factorize(self) -> LUFactorization:
        return LUFactorization(self.K, self.settings.pivot_tol, self.settings.diagonal_tol)


def build_global_system(
    mesh: BeamMesh,
    EI: float,
    supports: Sequence[Support],
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> GlobalSystem:
    K = assemble_beam_K(mesh, EI, settings)
    penalty = settings.penalty_factor * EI
    add_penalty(K, restrained_dofs(mesh, supports), penalty)
    logger.debug("Assembled %dx%d system, penalty=%.3e", K.shape[0], K.shape[1], penalty)
    return GlobalSystem(mesh=mesh, EI=EI, penalty=penalty, K=K, settings=settings)
