"""Main simulation core."""

import logging
from typing import Callable, Iterable, Optional, Sequence, Tuple

import numpy as np

from nbody_sim.errors import BodyNotFoundError, InvalidParameterError, SimulationRunningError
from nbody_sim.physics.body import (
    DEFAULT_MAX_TRAIL_LENGTH,
    Body,
    BodySnapshot,
    create_body,
    validate_positive,
)
from nbody_sim.physics.diagnostics import Diagnostics
from nbody_sim.physics.edits import EDIT_TYPES, BodyEdit
from nbody_sim.physics.force_calculator import ForceCalculator
from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.euler import SymplecticEulerIntegrator
from nbody_sim.presets import get_preset
from nbody_sim.utils.config import Config

logger = logging.getLogger(__name__)

BASE_TIME_STEP = 1.0 / 60.0


class SimulationCore:
    """Owns the bodies and physical parameters and advances them tick by tick.

    The core never schedules itself: a host loop calls ``tick()`` (or
    ``step()``) once per frame. Readers get immutable ``BodySnapshot``
    objects; every mutation goes through the methods below.
    """

    def __init__(
        self,
        gravitational_constant: float = 1.0,
        time_scale: float = 1.0,
        base_time_step: float = BASE_TIME_STEP,
        max_trail_length: int = DEFAULT_MAX_TRAIL_LENGTH,
        force_calculator: Optional[ForceCalculator] = None,
        integrator: Optional[Integrator] = None,
    ):
        """Initialize simulation core.

        Args:
            gravitational_constant: G, finite and positive
            time_scale: Multiplier on base_time_step
            base_time_step: Time step at time_scale 1 (one 60 Hz frame)
            max_trail_length: Maximum number of stored trail positions per body
            force_calculator: Force law (default: vectorized, 0.1 cutoff)
            integrator: Integrator (default: symplectic Euler)
        """
        self._bodies = []
        self.force_calculator = force_calculator or ForceCalculator()
        self.integrator = integrator or SymplecticEulerIntegrator()

        self._G = validate_positive("gravitational constant", gravitational_constant)
        self._base_time_step = validate_positive("base time step", base_time_step)
        self._time_scale = validate_positive("time scale", time_scale)
        self._dt = self._base_time_step * self._time_scale
        self._max_trail_length = self._validate_trail_length(max_trail_length)

        self._running = False
        self.time = 0.0
        self.step_count = 0

        self.on_step_callback: Optional[Callable[["SimulationCore"], None]] = None

    @classmethod
    def from_config(cls, config: Config) -> "SimulationCore":
        """Build a core from a ``Config`` (bodies are not loaded)."""
        return cls(
            gravitational_constant=config.gravitational_constant,
            time_scale=config.time_scale,
            base_time_step=config.base_time_step,
            max_trail_length=config.max_trail_length,
            force_calculator=ForceCalculator(
                method=config.force_method, min_distance=config.min_distance
            ),
        )

    # ------------------------------------------------------------------
    # Parameters

    @property
    def gravitational_constant(self) -> float:
        return self._G

    @property
    def time_step(self) -> float:
        return self._dt

    @property
    def time_scale(self) -> float:
        return self._time_scale

    @property
    def base_time_step(self) -> float:
        return self._base_time_step

    @property
    def max_trail_length(self) -> int:
        return self._max_trail_length

    @property
    def min_distance(self) -> float:
        return self.force_calculator.min_distance

    def set_gravitational_constant(self, G: float):
        self._G = validate_positive("gravitational constant", G)
        logger.debug("G set to %g", self._G)

    def set_time_step(self, dt: float):
        """Set dt directly; time_scale is updated to match."""
        self._dt = validate_positive("time step", dt)
        self._time_scale = self._dt / self._base_time_step
        logger.debug("dt set to %g", self._dt)

    def set_time_scale(self, scale: float):
        """dt = base_time_step * scale."""
        self._time_scale = validate_positive("time scale", scale)
        self._dt = self._base_time_step * self._time_scale
        logger.debug("time scale set to %g (dt=%g)", self._time_scale, self._dt)

    def set_max_trail_length(self, max_length: int):
        """Rebound every trail; the oldest positions are dropped first."""
        self._max_trail_length = self._validate_trail_length(max_length)
        for body in self._bodies:
            body.set_max_trail_length(self._max_trail_length)

    @staticmethod
    def _validate_trail_length(max_length) -> int:
        if isinstance(max_length, bool) or not isinstance(max_length, (int, np.integer)) or max_length < 1:
            raise InvalidParameterError(f"max trail length must be an integer >= 1, got {max_length!r}")
        return int(max_length)

    # ------------------------------------------------------------------
    # Run flag

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self):
        self._running = True

    def pause(self):
        self._running = False

    # ------------------------------------------------------------------
    # Body collection

    def set_bodies(self, bodies: Iterable[Body]):
        """Replace the managed bodies.

        Bodies are copied in; the caller's objects are never aliased by the
        core. Rejects duplicate ids without touching the current collection.
        """
        new_bodies = [self._adopt(body) for body in bodies]
        ids = [body.id for body in new_bodies]
        if len(set(ids)) != len(ids):
            raise InvalidParameterError("Body ids must be unique")
        self._bodies = new_bodies
        logger.debug("Loaded %d bodies", len(new_bodies))

    def add_body(self, body: Body) -> BodySnapshot:
        """Add a copy of ``body``; its id must not already be managed."""
        adopted = self._adopt(body)
        if any(existing.id == adopted.id for existing in self._bodies):
            raise InvalidParameterError(f"Duplicate body id: {adopted.id!r}")
        self._bodies.append(adopted)
        return adopted.snapshot()

    def place_body(
        self,
        point: Sequence[float],
        mass: float = 1.0,
        color: Optional[str] = None,
    ) -> BodySnapshot:
        """Create a default body at ``point`` (zero velocity, derived radius)."""
        return self.add_body(create_body(point, (0.0, 0.0, 0.0), mass, color=color))

    def update_body(self, body_id: str, *edits: BodyEdit) -> BodySnapshot:
        """Apply edits to one body atomically.

        Every edit is validated before any is applied. Mass, position and
        velocity edits are refused while the simulation is running.

        Raises:
            BodyNotFoundError: unknown id
            InvalidParameterError: an edit carries an invalid value
            SimulationRunningError: kinematic edit while running
        """
        body = self._find(body_id)
        validated = []
        for edit in edits:
            if not isinstance(edit, EDIT_TYPES):
                raise InvalidParameterError(f"Unsupported edit: {edit!r}")
            if edit.kinematic and self._running:
                raise SimulationRunningError(
                    f"Cannot apply {type(edit).__name__} to {body_id!r} while the simulation is running"
                )
            validated.append(edit.validated())
        for edit in validated:
            edit.apply(body)
        return body.snapshot()

    def remove_body(self, body_id: str):
        body = self._find(body_id)
        self._bodies.remove(body)

    def load_preset(self, name: str, seed: Optional[int] = None):
        """Replace all bodies with a named preset configuration."""
        preset = get_preset(name, seed=seed)
        self.set_bodies(preset.generate())
        logger.debug("Loaded preset %s", preset.name)

    def get_bodies(self) -> Tuple[BodySnapshot, ...]:
        return tuple(body.snapshot() for body in self._bodies)

    def get_body(self, body_id: str) -> BodySnapshot:
        return self._find(body_id).snapshot()

    def __len__(self) -> int:
        return len(self._bodies)

    def _find(self, body_id: str) -> Body:
        for body in self._bodies:
            if body.id == body_id:
                return body
        raise BodyNotFoundError(body_id)

    def _adopt(self, body: Body) -> Body:
        if not isinstance(body, Body):
            raise InvalidParameterError(f"Expected Body, got {type(body).__name__}")
        adopted = body.copy()
        adopted.set_max_trail_length(self._max_trail_length)
        return adopted

    # ------------------------------------------------------------------
    # Stepping

    def step(self) -> bool:
        """Advance the system by one time step.

        Does nothing and returns False with fewer than two bodies. Forces for
        all pairs are accumulated first; only then are velocities, positions
        and trails updated.

        Returns:
            True if the system advanced
        """
        if len(self._bodies) < 2:
            return False

        positions, velocities, masses = self._arrays()
        forces = self.force_calculator.compute_forces(positions, masses, self._G)
        new_positions, new_velocities = self.integrator.step(
            positions, velocities, masses, forces, self._dt
        )

        for i, body in enumerate(self._bodies):
            body.velocity = new_velocities[i].copy()
            body.position = new_positions[i].copy()
            body.record_position()

        self.time += self._dt
        self.step_count += 1

        if self.on_step_callback:
            self.on_step_callback(self)
        return True

    def tick(self) -> bool:
        """Per-frame entry point for a host loop: step only while running.

        Returns whether a step actually happened, so it is False while
        paused and also while fewer than two bodies are present.
        """
        if not self._running:
            return False
        return self.step()

    def run_steps(self, k: int):
        """Run k steps regardless of the run flag."""
        for _ in range(k):
            self.step()

    def reset(self):
        """Stop the run flag and clear every trail.

        Positions, velocities and masses keep their current values; this
        does not rewind to the initial configuration.
        """
        self._running = False
        for body in self._bodies:
            body.clear_trail()

    # ------------------------------------------------------------------
    # State and diagnostics

    def _arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        if not self._bodies:
            return np.zeros((0, 3)), np.zeros((0, 3)), np.zeros(0)
        positions = np.array([body.position for body in self._bodies], dtype=np.float64)
        velocities = np.array([body.velocity for body in self._bodies], dtype=np.float64)
        masses = np.array([body.mass for body in self._bodies], dtype=np.float64)
        return positions, velocities, masses

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, masses, time, step_count)
        """
        positions, velocities, masses = self._arrays()
        return positions, velocities, masses, self.time, self.step_count

    def _diagnostics(self) -> Diagnostics:
        return Diagnostics(G=self._G, min_distance=self.min_distance)

    def total_momentum(self) -> np.ndarray:
        _, velocities, masses = self._arrays()
        return self._diagnostics().total_momentum(velocities, masses)

    def kinetic_energy(self) -> float:
        _, velocities, masses = self._arrays()
        return self._diagnostics().kinetic_energy(velocities, masses)

    def potential_energy(self) -> float:
        positions, _, masses = self._arrays()
        return self._diagnostics().potential_energy(positions, masses)

    def total_energy(self) -> float:
        return self.kinetic_energy() + self.potential_energy()

    def center_of_mass(self) -> np.ndarray:
        positions, _, masses = self._arrays()
        return self._diagnostics().center_of_mass(positions, masses)
