"""Basic example of driving the simulation core from a host loop."""

from nbody_sim import SimulationCore
from nbody_sim.physics.edits import SetMass, SetVelocity


def main():
    """Place two bodies by hand, then run the figure-eight preset."""
    core = SimulationCore(gravitational_constant=1.0)

    # Bodies placed the way a pointer click would place them
    sun = core.place_body((0.0, 0.0, 0.0))
    planet = core.place_body((2.0, 0.0, 0.0))
    core.update_body(sun.id, SetMass(10.0))
    core.update_body(planet.id, SetVelocity((0.0, 2.2, 0.0)))

    core.start()
    for frame in range(300):
        core.tick()
        if frame % 100 == 0:
            print(f"Frame {frame}: planet at {core.get_body(planet.id).position}")
    core.reset()

    # Swap in a preset
    core.load_preset("figure8")
    print(f"Initial energy: {core.total_energy():.6f}")

    core.start()
    for _ in range(600):
        core.tick()
    core.pause()

    print(f"Final energy: {core.total_energy():.6f}")
    for body in core.get_bodies():
        print(f"{body.color}: {len(body.trail)} trail points")


if __name__ == "__main__":
    main()
