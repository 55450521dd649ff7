# mini_beam/kernel/assemble.py
"""
ASSEMBLY: Scatter-Add of Element Contributions
==============================================

Element matrices and vectors are added into the global system through their
DOF maps:

    K = zeros(ndof x ndof)
    for each element:
        K[dof_map, dof_map] += ke

The same loop builds load vectors from element equivalent loads. Boundary
conditions are applied afterwards by penalty augmentation of the diagonal.
"""

import numpy as np
from typing import Iterable, List, Tuple


def assemble_global_K(
    ndof: int,
    contributions: Iterable[Tuple[List[int], np.ndarray]]
) -> np.ndarray:
    """
    Assemble the global stiffness matrix.

    Parameters:
    -----------
    ndof : int
        Total number of DOFs (2 x n_nodes for a beam)
    contributions : iterable of (dof_map, ke)
        dof_map lists the global indices of the element DOFs,
        ke is the matching (len(dof_map) x len(dof_map)) element matrix

    Returns:
    --------
    np.ndarray
        Dense (ndof, ndof) matrix
    """
    K = np.zeros((ndof, ndof), dtype=float)

    for dof_map, ke in contributions:
        n = len(dof_map)
        assert ke.shape == (n, n), \
            f"Element ke shape {ke.shape} doesn't match dof_map length {n}"
        K[np.ix_(dof_map, dof_map)] += ke

    return K


def assemble_global_F(
    ndof: int,
    contributions: Iterable[Tuple[List[int], np.ndarray]]
) -> np.ndarray:
    """Assemble a global load vector from (dof_map, fe) pairs."""
    F = np.zeros(ndof, dtype=float)

    for dof_map, fe in contributions:
        n = len(dof_map)
        assert fe.shape == (n,), \
            f"Element fe shape {fe.shape} doesn't match dof_map length {n}"
        F[dof_map] += fe

    return F


def add_penalty(K: np.ndarray, dofs: Iterable[int], penalty: float) -> None:
    """
    Enforce zero displacement at dofs by adding a large spring (in-place).

    The constraint force at a restrained DOF is later recovered as
    -penalty * d[dof].
    """
    for dof in dofs:
        K[dof, dof] += penalty
