# BeamConfig, Support, load variants (dataclasses) + record parsing

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Mapping, Union

from .config import AnalysisSettings, DEFAULT_SETTINGS


class InvalidBeamError(ValueError):
    """Raised when a beam description cannot be analysed."""
    pass


class SupportType(str, Enum):
    PINNED = "PINNED"
    ROLLER = "ROLLER"
    FIXED = "FIXED"
    HINGE = "HINGE"   # internal moment release, not a boundary condition


# Planar restraint components (horizontal, vertical, rotation). The beam has
# no axial DOF, so horizontal components only enter the determinacy count.
_REACTION_COUNTS = {
    SupportType.FIXED: 3,
    SupportType.PINNED: 2,
    SupportType.ROLLER: 1,
    SupportType.HINGE: 0,
}


class LoadType(str, Enum):
    POINT = "POINT"
    UDL = "UDL"
    UVL = "UVL"
    MOMENT = "MOMENT"


def _finite(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidBeamError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(value):
        raise InvalidBeamError(f"{name} must be finite, got {value!r}")
    return value


@dataclass(frozen=True)
class BeamConfig:
    """
    Beam geometry and section properties in input units.

    length in m, elastic_modulus in MPa, moment_of_inertia in mm^4.
    """
    length: float
    elastic_modulus: float
    moment_of_inertia: float

    def __post_init__(self):
        for name in ("length", "elastic_modulus", "moment_of_inertia"):
            object.__setattr__(self, name, _finite(name, getattr(self, name)))
        if self.length <= 0.0:
            raise InvalidBeamError(f"Beam length must be positive, got {self.length}")
        if self.elastic_modulus <= 0.0 or self.moment_of_inertia <= 0.0:
            raise InvalidBeamError("Flexural rigidity EI must be positive.")

    def flexural_rigidity(self, settings: AnalysisSettings = DEFAULT_SETTINGS) -> float:
        """EI in N*m^2."""
        E = self.elastic_modulus * settings.modulus_scale
        I = self.moment_of_inertia * settings.inertia_scale
        return E * I


@dataclass(frozen=True)
class Support:
    id: str
    type: SupportType
    position: float

    def __post_init__(self):
        try:
            object.__setattr__(self, "type", SupportType(self.type))
        except ValueError:
            raise InvalidBeamError(f"Unknown support type {self.type!r}") from None
        object.__setattr__(self, "position", _finite("position", self.position))

    @property
    def is_hinge(self) -> bool:
        return self.type is SupportType.HINGE

    @property
    def restrains_translation(self) -> bool:
        return self.type in (SupportType.PINNED, SupportType.ROLLER, SupportType.FIXED)

    @property
    def restrains_rotation(self) -> bool:
        return self.type is SupportType.FIXED

    @property
    def reaction_count(self) -> int:
        """Planar restraint components: FIXED 3, PINNED 2, ROLLER 1, HINGE 0."""
        return _REACTION_COUNTS[self.type]


@dataclass(frozen=True)
class PointLoad:
    """Concentrated force in kN, positive downward."""
    id: str
    magnitude: float
    position: float

    kind: ClassVar[LoadType] = LoadType.POINT

    def __post_init__(self):
        object.__setattr__(self, "magnitude", _finite("magnitude", self.magnitude))
        object.__setattr__(self, "position", _finite("position", self.position))

    @property
    def boundaries(self) -> tuple:
        return (self.position,)


@dataclass(frozen=True)
class MomentLoad:
    """Concentrated couple in kNm, positive counter-clockwise."""
    id: str
    magnitude: float
    position: float

    kind: ClassVar[LoadType] = LoadType.MOMENT

    def __post_init__(self):
        object.__setattr__(self, "magnitude", _finite("magnitude", self.magnitude))
        object.__setattr__(self, "position", _finite("position", self.position))

    @property
    def boundaries(self) -> tuple:
        return (self.position,)


class _Distributed:
    """Shared behaviour of UDL/UVL: linear intensity between two positions."""

    def _validate_extent(self):
        object.__setattr__(self, "position", _finite("position", self.position))
        object.__setattr__(self, "end_position", _finite("end_position", self.end_position))
        if self.end_position <= self.position:
            raise InvalidBeamError(
                f"Load {self.id!r}: end_position ({self.end_position}) must be "
                f"greater than position ({self.position})"
            )

    @property
    def boundaries(self) -> tuple:
        return (self.position, self.end_position)

    def intensity_at(self, x: float) -> float:
        """Intensity in kN/m at x, linearly interpolated over the load extent."""
        t = (x - self.position) / (self.end_position - self.position)
        return self.magnitude + (self.end_magnitude - self.magnitude) * t

    @property
    def total(self) -> float:
        """Resultant in kN."""
        return 0.5 * (self.magnitude + self.end_magnitude) * (self.end_position - self.position)


@dataclass(frozen=True)
class UniformLoad(_Distributed):
    """Uniform line load in kN/m over [position, end_position], positive downward."""
    id: str
    magnitude: float
    position: float
    end_position: float

    kind: ClassVar[LoadType] = LoadType.UDL

    def __post_init__(self):
        object.__setattr__(self, "magnitude", _finite("magnitude", self.magnitude))
        self._validate_extent()

    @property
    def end_magnitude(self) -> float:
        return self.magnitude


@dataclass(frozen=True)
class VaryingLoad(_Distributed):
    """Trapezoidal line load: magnitude at position, end_magnitude at end_position."""
    id: str
    magnitude: float
    end_magnitude: float
    position: float
    end_position: float

    kind: ClassVar[LoadType] = LoadType.UVL

    def __post_init__(self):
        object.__setattr__(self, "magnitude", _finite("magnitude", self.magnitude))
        object.__setattr__(self, "end_magnitude", _finite("end_magnitude", self.end_magnitude))
        self._validate_extent()


Load = Union[PointLoad, MomentLoad, UniformLoad, VaryingLoad]
DISTRIBUTED_LOADS = (UniformLoad, VaryingLoad)


def _require(record: Mapping, key: str):
    value = record.get(key)
    if value is None:
        raise InvalidBeamError(f"Record {dict(record)!r} is missing {key!r}")
    return value


def support_from_record(record: Mapping) -> Support:
    """Build a Support from {'id', 'type', 'position'}."""
    return Support(
        id=str(_require(record, "id")),
        type=_require(record, "type"),
        position=_require(record, "position"),
    )


def load_from_record(record: Mapping) -> Load:
    """
    Build a load variant from a camelCase record.

    Records look like {'id': 'l1', 'type': 'UDL', 'magnitude': 10,
    'position': 0, 'endPosition': 10}. Fields that do not belong to the
    load kind are ignored; missing required fields raise InvalidBeamError.
    """
    try:
        kind = LoadType(_require(record, "type"))
    except ValueError:
        raise InvalidBeamError(f"Unknown load type {record.get('type')!r}") from None

    load_id = str(_require(record, "id"))
    magnitude = _require(record, "magnitude")
    position = _require(record, "position")

    if kind is LoadType.POINT:
        return PointLoad(load_id, magnitude, position)
    if kind is LoadType.MOMENT:
        return MomentLoad(load_id, magnitude, position)
    end_position = _require(record, "endPosition")
    if kind is LoadType.UDL:
        return UniformLoad(load_id, magnitude, position, end_position)
    # UVL without an end magnitude degrades to uniform intensity
    end_magnitude = record.get("endMagnitude")
    if end_magnitude is None:
        end_magnitude = magnitude
    return VaryingLoad(load_id, magnitude, end_magnitude, position, end_position)
