"""Example with real-time rendering."""

from orbit_sandbox import Config, Simulator
from orbit_sandbox.render import Renderer2D

def main():
    """Run a small system in a matplotlib window, speeding up halfway through."""
    config = Config(seed=123)
    sim = Simulator(config)

    state = sim.initialize(config.width, config.height)
    for x, y in [(520, 300), (400, 120), (250, 380), (600, 450), (330, 260)]:
        state = sim.spawn_at(state, x, y)

    renderer = Renderer2D(width=config.width, height=config.height)

    print("Running simulation with rendering...")
    print("Close the matplotlib window to stop.")

    try:
        for step in range(2000):
            time_scale = 1.0 if step < 1000 else 3.0
            state = sim.step(state, time_scale)

            # Render every 2 steps for better performance
            if step % 2 == 0:
                renderer.render(state)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
    finally:
        renderer.close()
        print("Simulation complete!")

if __name__ == "__main__":
    main()
