"""Basic example of using the orbit sandbox."""

from orbit_sandbox import Config, Simulator
from orbit_sandbox.physics.diagnostics import compute_kinetic_energy

def main():
    """Spawn a few satellites around the anchor and run headless."""
    sim = Simulator(Config(seed=42))

    # Anchor alone at the center of an 800x600 viewport
    state = sim.initialize(800, 600)

    # Same as clicking on the canvas
    for x, y in [(500, 300), (400, 140), (220, 300), (400, 520)]:
        state = sim.spawn_at(state, x, y)

    print(f"Bodies: {len(state)}")
    print(f"Initial kinetic energy: {compute_kinetic_energy(state):.3f}")

    for step in range(1000):
        state = sim.step(state, time_scale=1.0)
        if step % 200 == 0:
            print(f"Step {step}: K={compute_kinetic_energy(state):.3f}")

    for body in state:
        print(f"{body.color:>8} at ({body.x:7.1f}, {body.y:7.1f}), trail {len(body.trail)}")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
