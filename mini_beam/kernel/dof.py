# mini_beam/kernel/dof.py
"""
DOF MANAGER: Node -> Global Degree of Freedom Indexing
======================================================

PURPOSE:
--------
A beam node owns two degrees of freedom:

    local DOF 0:  v   (vertical translation)
    local DOF 1:  th  (rotation)

Node i therefore maps to the global pair (2i, 2i+1) and an element spanning
nodes i and i+1 maps to [2i, 2i+1, 2i+2, 2i+3]. Assembly, load building and
recovery all go through this one mapping.

USAGE:
------
    dof = DOFManager()
    dof.idx(3, TRANSLATION)      # -> 6
    dof.idx(3, ROTATION)         # -> 7
    dof.element_dof_map([3, 4])  # -> [6, 7, 8, 9]
"""

from dataclasses import dataclass
from typing import List

TRANSLATION = 0
ROTATION = 1


@dataclass(frozen=True)
class DOFManager:
    """
    Maps (node index, local DOF) to a row/column of the global system.

    Attributes:
    -----------
    dof_per_node : int
        2 for planar bending (v, th).

    Examples:
    ---------
    >>> dof = DOFManager()
    >>> dof.ndof(11)
    22
    >>> dof.node_dofs(2)
    [4, 5]
    """
    dof_per_node: int = 2

    def idx(self, node_id: int, local_dof: int) -> int:
        return self.dof_per_node * node_id + local_dof

    def ndof(self, n_nodes: int) -> int:
        """Size of the global system for n_nodes nodes."""
        return self.dof_per_node * n_nodes

    def node_dofs(self, node_id: int) -> List[int]:
        base = self.dof_per_node * node_id
        return list(range(base, base + self.dof_per_node))

    def element_dof_map(self, node_ids: List[int]) -> List[int]:
        """
        Scatter/gather indices for an element, in node order.

        >>> DOFManager().element_dof_map([2, 3])
        [4, 5, 6, 7]
        """
        result = []
        for node_id in node_ids:
            result.extend(self.node_dofs(node_id))
        return result


DOF_BEAM = DOFManager(dof_per_node=2)   # v, th
