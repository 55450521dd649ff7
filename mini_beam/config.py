# mini_beam/config.py
"""
Analysis settings and defaults.

Every numeric constant the engine relies on lives here so that callers can
tune it per call instead of patching module globals.
"""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class AnalysisSettings:
    """Numeric configuration for one analysis call."""

    # Unit scaling (input: m, MPa, mm^4, kN, kN/m, kNm)
    modulus_scale: float = 1e6        # MPa -> Pa
    inertia_scale: float = 1e-12      # mm^4 -> m^4
    force_scale: float = 1000.0       # kN -> N
    deflection_scale: float = 1000.0  # m -> mm

    # Meshing: minInterval = max(min_interval_floor, L / mesh_divisions)
    min_interval_floor: float = 0.1
    mesh_divisions: int = 100

    # Supports are enforced with penalty = penalty_factor * EI.
    # Larger factors pin supports harder but widen the dynamic range of K.
    penalty_factor: float = 1e18

    # Numerical tolerances
    release_tol: float = 1e-12
    pivot_tol: float = 1e-18
    diagonal_tol: float = 1e-22
    overlap_tol: float = 1e-9
    moment_zero_tol: float = 1e-7

    # Influence lines: ild_steps intervals -> ild_steps + 1 stations
    ild_steps: int = 30

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not value > 0:
                raise ValueError(f"{f.name} must be positive, got {value!r}")
        if self.mesh_divisions < 1 or self.ild_steps < 1:
            raise ValueError("mesh_divisions and ild_steps must be at least 1")

    def min_interval(self, length: float) -> float:
        return max(self.min_interval_floor, length / self.mesh_divisions)


# Global default instance
DEFAULT_SETTINGS = AnalysisSettings()
