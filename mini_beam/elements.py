# Beam element stiffness + moment-release condensation

import numpy as np

# Local DOF order: [v1, th1, v2, th2]
START_ROTATION = 1
END_ROTATION = 3


def beam_local_stiffness(EI: float, L: float) -> np.ndarray:
    """
    Euler-Bernoulli bending stiffness of a two-node element.
    DOF order: [v1, th1, v2, th2]
    """
    L2 = L * L
    L3 = L2 * L

    k = np.array([
        [ 12*EI/L3,   6*EI/L2, -12*EI/L3,   6*EI/L2],
        [  6*EI/L2,    4*EI/L,  -6*EI/L2,    2*EI/L],
        [-12*EI/L3,  -6*EI/L2,  12*EI/L3,  -6*EI/L2],
        [  6*EI/L2,    2*EI/L,  -6*EI/L2,    4*EI/L],
    ], dtype=float)
    return k


def apply_moment_release(
    ke: np.ndarray,
    fe: np.ndarray,
    release_start: bool = False,
    release_end: bool = False,
    tol: float = 1e-12,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Statically condense released end rotations out of an element.

    For each released local DOF r (start before end):

        f_i  -= k_ir / k_rr * f_r
        k_ij -= k_ir * k_rj / k_rr

    The released row, column and force entry come out exactly zero, so the
    element transmits no moment through that end. A release whose k_rr is
    below tol is skipped and the end stays rigid.

    Returns new arrays; the inputs are not modified.
    """
    ke_mod = np.array(ke, dtype=float, copy=True)
    fe_mod = np.array(fe, dtype=float, copy=True)

    released = []
    if release_start:
        released.append(START_ROTATION)
    if release_end:
        released.append(END_ROTATION)

    for r in released:
        krr = ke_mod[r, r]
        if abs(krr) < tol:
            continue
        col = ke_mod[:, r].copy()
        row = ke_mod[r, :].copy()
        fe_mod -= col / krr * fe_mod[r]
        ke_mod -= np.outer(col, row) / krr
        # clean round-off so the released DOF is exactly decoupled
        ke_mod[r, :] = 0.0
        ke_mod[:, r] = 0.0
        fe_mod[r] = 0.0

    return ke_mod, fe_mod

