"""Generation-by-generation construction of an Apollonian gasket.

A gasket starts from three mutually tangent circles: a bounding circle with
negative bend and two circles inside it. Each generation solves every queued
triplet with Descartes' theorem, keeps the candidates that pass
:func:`apollonian.validator.validate`, and queues the three triplets each new
circle forms with pairs of its parents. Growth stops once a generation adds
nothing, which the size floor guarantees eventually happens.

State is immutable: :func:`step` returns a new :class:`GasketState` and the
caller decides how often to call it (once per animation frame, or in a tight
loop through :func:`run`).

Usage:
    state = initialize(400, 400, seed=1)
    state = run(state)
    for c in circles(state):
        print(c.center.a, c.center.b, c.radius)
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple, Union

import numpy as np

from . import settings
from .circle import Circle, Triplet
from .descartes import solve
from .errors import ConfigurationError, SeedTangencyError
from .spatial import CircleGrid
from .validator import is_tangent, validate

log = logging.getLogger("apollonian.gasket")

SeedLike = Union[None, int, np.random.Generator]


@dataclass(frozen=True)
class GasketConfig:
    epsilon: float = settings.EPSILON
    min_radius: float = settings.MIN_RADIUS
    seed_min_radius: float = settings.SEED_MIN_RADIUS
    use_spatial_index: bool = settings.USE_SPATIAL_INDEX

    def __post_init__(self) -> None:
        for name in ("epsilon", "min_radius", "seed_min_radius"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ConfigurationError(f"{name} must be positive and finite, got {value!r}")


class GasketPhase(enum.Enum):
    SEEDED = "seeded"
    EXPANDING = "expanding"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class GasketState:
    """Snapshot of a gasket between generations.

    Attributes
    ----------
    circles : tuple of Circle
        Every accepted circle in discovery order, seeds first.
    queue : tuple of Triplet
        Triplets the next generation will expand.
    config : GasketConfig
        Tolerances the state was built with.
    generation : int
        Number of completed steps.
    terminal : bool
        True once a generation accepted no circles.
    """

    circles: Tuple[Circle, ...]
    queue: Tuple[Triplet, ...]
    config: GasketConfig = field(default_factory=GasketConfig)
    generation: int = 0
    terminal: bool = False
    index: Optional[CircleGrid] = field(default=None, repr=False, compare=False)

    @property
    def phase(self) -> GasketPhase:
        if self.terminal:
            return GasketPhase.TERMINAL
        if self.generation == 0:
            return GasketPhase.SEEDED
        return GasketPhase.EXPANDING

    def __len__(self) -> int:
        return len(self.circles)


def random_seed_circles(
    width: float,
    height: float,
    rng: SeedLike = None,
    seed_min_radius: float = settings.SEED_MIN_RADIUS,
) -> Triplet:
    """Place a bounding circle on the canvas and two random circles inside it.

    The bounding circle fills the canvas. The second circle gets a random
    radius ``r2`` between ``seed_min_radius`` (capped at half the bounding
    radius) and half the bounding radius, and touches the boundary in a
    random direction. The third circle has radius ``R - r2`` and touches the
    boundary on the opposite side, which makes all three pairwise tangent.
    """
    if not (width > 0 and height > 0):
        raise ConfigurationError(f"canvas size must be positive, got {width!r}x{height!r}")
    rng = np.random.default_rng(rng)

    cx, cy = width / 2, height / 2
    outer = min(width, height) / 2
    c1 = Circle.from_xy(-1 / outer, cx, cy)

    r2 = float(rng.uniform(min(seed_min_radius, outer / 2), outer / 2))
    angle = float(rng.uniform(0.0, 2 * math.pi))
    ux, uy = math.cos(angle), math.sin(angle)

    d2 = outer - r2
    c2 = Circle.from_xy(1 / r2, cx + d2 * ux, cy + d2 * uy)
    r3 = d2
    c3 = Circle.from_xy(1 / r3, cx - r2 * ux, cy - r2 * uy)
    return c1, c2, c3


def seed_from_circles(
    c1: Circle, c2: Circle, c3: Circle, config: Optional[GasketConfig] = None
) -> GasketState:
    """Build the seeded state from three pairwise tangent circles.

    Raises:
        SeedTangencyError: if any pair is not tangent within ``config.epsilon``.
            Such a seed would never grow.
    """
    config = config or GasketConfig()
    for name, (a, b) in (("c1/c2", (c1, c2)), ("c1/c3", (c1, c3)), ("c2/c3", (c2, c3))):
        if not is_tangent(a, b, config.epsilon):
            raise SeedTangencyError(
                f"seed circles {name} are not tangent within epsilon={config.epsilon}: {a!r}, {b!r}"
            )
    seeds = (c1, c2, c3)
    index = CircleGrid(2 * config.epsilon, seeds) if config.use_spatial_index else None
    return GasketState(circles=seeds, queue=(seeds,), config=config, index=index)


def initialize(
    width: float = settings.CANVAS_WIDTH,
    height: float = settings.CANVAS_HEIGHT,
    seed: SeedLike = None,
    config: Optional[GasketConfig] = None,
) -> GasketState:
    """Return the seeded state for a canvas of the given size.

    ``seed`` only affects where the second and third circles land; pass an
    int or a ``numpy.random.Generator`` for reproducible runs.
    """
    config = config or GasketConfig()
    c1, c2, c3 = random_seed_circles(width, height, seed, config.seed_min_radius)
    return seed_from_circles(c1, c2, c3, config)


def step(state: GasketState) -> Tuple[GasketState, bool]:
    """Expand every queued triplet once.

    Each candidate is checked against all circles accepted before it,
    including circles accepted earlier in the same generation. Returns the
    new state and whether any circle was added; ``False`` means the new
    state is terminal.
    """
    if state.terminal:
        return state, False

    config = state.config
    depth = state.generation + 1
    accepted: List[Circle] = list(state.circles)
    index = state.index.copy() if state.index is not None else None
    next_queue: List[Triplet] = []

    for c1, c2, c3 in state.queue:
        for candidate in solve((c1, c2, c3), depth):
            known = index.near(candidate) if index is not None else accepted
            if not validate(candidate, c1, c2, c3, known, config.epsilon, config.min_radius):
                continue
            accepted.append(candidate)
            if index is not None:
                index.add(candidate)
            # New triplets formed with the new circle for the next generation
            next_queue.append((c1, c2, candidate))
            next_queue.append((c1, c3, candidate))
            next_queue.append((c2, c3, candidate))

    added = len(accepted) - len(state.circles)
    grew = added > 0
    log.info("generation %d: added %d circles (total %d)", depth, added, len(accepted))
    new_state = GasketState(
        circles=tuple(accepted),
        queue=tuple(next_queue),
        config=config,
        generation=depth,
        terminal=not grew,
        index=index,
    )
    return new_state, grew


def circles(state: GasketState) -> Tuple[Circle, ...]:
    """Read-only snapshot of the circles, in discovery order."""
    return state.circles


def run(
    state: GasketState,
    max_generations: Optional[int] = None,
    on_generation: Optional[Callable[[GasketState], None]] = None,
) -> GasketState:
    """Step until the gasket stops growing.

    Args:
        state: Starting state, usually from :func:`initialize`.
        max_generations: Optional cap on the number of steps taken.
        on_generation: Called with each new state, e.g. to redraw.

    Returns:
        GasketState: the terminal state, or the last state reached before
        the cap.
    """
    taken = 0
    while not state.terminal:
        if max_generations is not None and taken >= max_generations:
            log.info("stopping after %d generations (%d circles)", taken, len(state.circles))
            break
        state, _ = step(state)
        taken += 1
        if on_generation is not None:
            on_generation(state)
    else:
        log.info("gasket complete: %d circles in %d generations", len(state.circles), state.generation)
    return state


__all__ = [
    "GasketConfig",
    "GasketPhase",
    "GasketState",
    "random_seed_circles",
    "seed_from_circles",
    "initialize",
    "step",
    "circles",
    "run",
]
