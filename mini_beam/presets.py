# presets.py - ready-made beam problems
"""
The default problem is the one the interactive client starts with: a 10 m
simply supported steel beam under a full-span 10 kN/m UDL, probed at midspan.
"""

from .model import BeamConfig, Support, SupportType, UniformLoad


def default_problem():
    """Return (config, supports, loads, probe_x)."""
    config = BeamConfig(length=10.0, elastic_modulus=200000.0, moment_of_inertia=5e8)
    supports = [
        Support("1", SupportType.PINNED, 0.0),
        Support("2", SupportType.ROLLER, 10.0),
    ]
    loads = [UniformLoad("l1", magnitude=10.0, position=0.0, end_position=10.0)]
    return config, supports, loads, 5.0
