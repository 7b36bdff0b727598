"""Apollonian gasket generation with Descartes' circle theorem."""

import logging as _logging

__all__ = [
    "Complex",
    "Circle",
    "Triplet",
    "descartes_curvatures",
    "complex_descartes",
    "solve",
    "is_tangent",
    "is_duplicate",
    "validate",
    "CircleGrid",
    "GasketConfig",
    "GasketPhase",
    "GasketState",
    "random_seed_circles",
    "seed_from_circles",
    "initialize",
    "step",
    "circles",
    "run",
    "to_array",
    "export_points_json",
    "GasketError",
    "ConfigurationError",
    "SeedTangencyError",
    "DegenerateCircleError",
]

_logging.getLogger("apollonian").addHandler(_logging.NullHandler())

from .complexnum import Complex
from .circle import Circle, Triplet
from .descartes import complex_descartes, descartes_curvatures, solve
from .validator import is_duplicate, is_tangent, validate
from .spatial import CircleGrid
from .gasket import (
    GasketConfig,
    GasketPhase,
    GasketState,
    circles,
    initialize,
    random_seed_circles,
    run,
    seed_from_circles,
    step,
)
from .export import export_points_json, to_array
from .errors import (
    ConfigurationError,
    DegenerateCircleError,
    GasketError,
    SeedTangencyError,
)
