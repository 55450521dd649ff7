# mini_beam/kernel - DOF indexing, scatter assembly and the dense solver
"""
KERNEL: THE NUMERICAL PLUMBING
==============================

Nothing in here knows about supports, loads or hinges. It only needs:
- A way to map (node, local_dof) -> global row/column
- Element matrices and vectors to scatter
- A matrix to factorize and right-hand sides to solve
"""

from .dof import DOFManager, DOF_BEAM, TRANSLATION, ROTATION
from .assemble import assemble_global_K, assemble_global_F, add_penalty
from .solve import LUFactorization

__all__ = [
    'DOFManager', 'DOF_BEAM', 'TRANSLATION', 'ROTATION',
    'assemble_global_K', 'assemble_global_F', 'add_penalty',
    'LUFactorization',
]
