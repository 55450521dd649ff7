# mini_beam - Direct-stiffness analysis of straight elastic beams
"""
MINI-BEAM: Beam Analysis Engine
===============================

This package provides:
- Shear, moment and deflection diagrams for a 1-D Euler-Bernoulli beam
- Support reactions and a static determinacy / stability check
- Influence lines for reactions and for shear/moment at a probe section

ARCHITECTURE:
-------------
    kernel/         DOF indexing, scatter assembly, dense LU solver
    config.py       AnalysisSettings (unit scales, tolerances, penalty)
    model.py        BeamConfig, Support, load variants, record parsing
    mesh.py         Adaptive node generation + closest-node mapping
    elements.py     Element stiffness + moment-release condensation
    assembly.py     Global K with hinge releases and penalty supports
    loads.py        Equivalent nodal loads, load vectors
    post.py         End forces, diagrams, reactions, determinacy
    influence.py    Unit-load sweeps
    analysis.py     analyze() entry point and AnalysisResults
    presets.py      Default example problem
"""

from .config import AnalysisSettings, DEFAULT_SETTINGS
from .model import (
    BeamConfig,
    InvalidBeamError,
    LoadType,
    MomentLoad,
    PointLoad,
    Support,
    SupportType,
    UniformLoad,
    VaryingLoad,
    load_from_record,
    support_from_record,
)
from .analysis import AnalysisResults, analyze
from .influence import InfluencePoint
from .post import Reaction

__version__ = "0.1.0"

__all__ = [
    'AnalysisSettings', 'DEFAULT_SETTINGS',
    'BeamConfig', 'InvalidBeamError', 'LoadType', 'MomentLoad', 'PointLoad',
    'Support', 'SupportType', 'UniformLoad', 'VaryingLoad',
    'load_from_record', 'support_from_record',
    'AnalysisResults', 'analyze', 'InfluencePoint', 'Reaction',
]
