"""Point-mass bodies and their read-only snapshots."""

import math
import random
import uuid
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional, Sequence, Tuple

import numpy as np

from nbody_sim.errors import InvalidParameterError

DEFAULT_MAX_TRAIL_LENGTH = 500
RADIUS_SCALE = 0.5  # radius = mass^(1/3) * RADIUS_SCALE

Vector3 = Tuple[float, float, float]


def validate_positive(name: str, value: float) -> float:
    """Return ``value`` as a float, rejecting non-finite or non-positive input."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidParameterError(f"{name} must be finite and positive, got {value!r}")
    return value


def as_vector(name: str, value) -> np.ndarray:
    """Convert ``value`` to a finite float64 3-vector (a fresh copy)."""
    try:
        vec = np.array(value, dtype=np.float64).reshape(-1)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{name} must be a 3-vector, got {value!r}")
    if vec.shape != (3,):
        raise InvalidParameterError(f"{name} must have 3 components, got shape {vec.shape}")
    if not np.all(np.isfinite(vec)):
        raise InvalidParameterError(f"{name} must be finite, got {vec.tolist()}")
    return vec


def radius_for_mass(mass: float, scale: float = RADIUS_SCALE) -> float:
    """Display radius derived from mass (cube-root scaling)."""
    return mass ** (1.0 / 3.0) * scale


def random_color(rng: Optional[random.Random] = None) -> str:
    """Random HSL colour tag, e.g. ``hsl(212, 70%, 60%)``."""
    rng = rng or random
    return f"hsl({int(rng.random() * 360)}, 70%, 60%)"


def new_body_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class BodySnapshot:
    """Immutable view of a body handed out to renderers and UI code."""
    id: str
    position: Vector3
    velocity: Vector3
    mass: float
    radius: float
    color: str
    trail: Tuple[Vector3, ...]


@dataclass
class Body:
    """A simulated point mass.

    ``position`` and ``velocity`` are float64 arrays of shape (3,). ``trail``
    is a bounded deque of past positions, oldest first; appending past its
    capacity drops the oldest entry.
    """
    position: np.ndarray
    velocity: np.ndarray
    mass: float
    color: str
    radius: Optional[float] = None
    id: str = field(default_factory=new_body_id)
    trail: Deque[np.ndarray] = field(
        default_factory=lambda: deque(maxlen=DEFAULT_MAX_TRAIL_LENGTH)
    )

    def __post_init__(self):
        self.position = as_vector("position", self.position)
        self.velocity = as_vector("velocity", self.velocity)
        self.mass = validate_positive("mass", self.mass)
        if self.radius is None:
            self.radius = radius_for_mass(self.mass)
        else:
            self.radius = validate_positive("radius", self.radius)
        if not isinstance(self.trail, deque):
            self.trail = deque(self.trail, maxlen=DEFAULT_MAX_TRAIL_LENGTH)

    @property
    def max_trail_length(self) -> int:
        return self.trail.maxlen

    def set_max_trail_length(self, max_length: int):
        """Rebound the trail, keeping the newest ``max_length`` positions."""
        self.trail = deque(self.trail, maxlen=max_length)

    def record_position(self):
        self.trail.append(self.position.copy())

    def clear_trail(self):
        self.trail.clear()

    def copy(self) -> "Body":
        """Deep copy: no array or trail is shared with the original."""
        return Body(
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            mass=self.mass,
            color=self.color,
            radius=self.radius,
            id=self.id,
            trail=deque((p.copy() for p in self.trail), maxlen=self.trail.maxlen),
        )

    def snapshot(self) -> BodySnapshot:
        return BodySnapshot(
            id=self.id,
            position=tuple(float(x) for x in self.position),
            velocity=tuple(float(x) for x in self.velocity),
            mass=self.mass,
            radius=self.radius,
            color=self.color,
            trail=tuple(tuple(float(x) for x in p) for p in self.trail),
        )


def create_body(
    position: Sequence[float],
    velocity: Sequence[float] = (0.0, 0.0, 0.0),
    mass: float = 1.0,
    radius: Optional[float] = None,
    color: Optional[str] = None,
) -> Body:
    """Build a body with a fresh id and an empty trail.

    Args:
        position: Initial position (x, y, z)
        velocity: Initial velocity (vx, vy, vz)
        mass: Mass, must be finite and positive
        radius: Display radius (derived from mass if None)
        color: Colour tag (random HSL colour if None)

    Returns:
        New Body
    """
    return Body(
        position=position,
        velocity=velocity,
        mass=mass,
        color=color if color is not None else random_color(),
        radius=radius,
    )
