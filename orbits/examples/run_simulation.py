#!/usr/bin/env python3
"""
Orbits Simulation Example
=========================

Example script demonstrating the orbits and impact simulators.
"""

import numpy as np
import time

# Add parent directory to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from orbits.core.config import OrbitalConfig, CONTROL_RANGES
from orbits.core.integrator import OrbitalIntegrator
from orbits.core.loop import SimulationLoop
from orbits.dynamics.diagnostics import orbital_elements, specific_energy


def run_quick_simulation(frames: int = 250, image: str = None):
    """Run the default orbit for a few years of simulated time."""
    print("=" * 60)
    print("Asteroid Orbits Quick Simulation")
    print("=" * 60)

    config = OrbitalConfig(semi_major_axis=2.5, eccentricity=0.2, inclination_offset=0.1)
    loop = SimulationLoop(OrbitalIntegrator(config), steps_per_frame=10)

    print(f"\nSimulation Configuration:")
    print(f"  Semi-major axis: {config.semi_major_axis} AU")
    print(f"  Eccentricity: {config.eccentricity}")
    print(f"  Inclination offset: {config.inclination_offset} AU")
    print(f"  Step size: {loop.integrator.step_size} yr x {loop.steps_per_frame} per frame")

    print("\nRunning simulation...")
    start_time = time.time()

    history = loop.run(frames)

    elapsed = time.time() - start_time
    print(f"Simulation complete in {elapsed:.2f}s")
    print(f"  Simulated {len(history)} frames ({history[-1].time_yr:.2f} yr)")

    distances = np.array([f.distance_au for f in history])
    final = history[-1]
    print(f"\nFinal State:")
    print(f"  Time: {final.time_yr:.2f} yr")
    print(f"  Earth-asteroid distance: {final.distance_au:.3f} AU")
    print(f"  Asteroid speed: {final.asteroid_speed_au_yr:.3f} AU/yr")
    print(f"  Closest approach: {distances.min():.3f} AU")

    elements = orbital_elements(final.state.asteroid)
    print(f"  Osculating a: {elements['semi_major_axis_au']:.3f} AU, "
          f"e: {elements['eccentricity']:.3f}")

    if image:
        from orbits.rendering import OrbitRenderer
        renderer = OrbitRenderer()
        renderer.draw(final.state, loop.trails())
        renderer.save(image)
        renderer.close()
        print(f"  Frame saved to {image}")


def run_energy_check(n_steps: int = 10000):
    """Show bounded energy error of Earth's orbit."""
    print("\n" + "=" * 60)
    print("Energy Conservation Check")
    print("=" * 60)

    from orbits.dynamics.gravity import GravityModel

    integrator = OrbitalIntegrator(gravity=GravityModel(enable_mutual_perturbation=False))
    e0 = specific_energy(integrator.snapshot().earth)

    radii = []
    for _ in range(n_steps):
        state = integrator.step()
        radii.append(state.earth.radius)

    e1 = specific_energy(integrator.snapshot().earth)
    print(f"  Steps: {n_steps} ({integrator.elapsed_time:.1f} yr)")
    print(f"  Earth radius: {min(radii):.6f} - {max(radii):.6f} AU")
    print(f"  Relative energy error: {abs((e1 - e0) / e0):.2e}")


def run_impact_estimate():
    """Run the default impact estimate."""
    print("\n" + "=" * 60)
    print("Impact Estimate")
    print("=" * 60)

    from impact import ImpactEstimator, ImpactParameters, format_summary

    estimator = ImpactEstimator(rng=np.random.default_rng(0))
    result = estimator.estimate(ImpactParameters())
    print(format_summary(result))


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Orbits Simulation Examples")
    parser.add_argument('--all', action='store_true', help='Run all examples')
    parser.add_argument('--quick', action='store_true', help='Run quick simulation')
    parser.add_argument('--energy', action='store_true', help='Run energy check')
    parser.add_argument('--impact', action='store_true', help='Run impact estimate')
    parser.add_argument('--image', default=None, help='Save final frame to PNG')

    args = parser.parse_args()

    # Default to quick if no args
    if not (args.all or args.quick or args.energy or args.impact):
        args.quick = True

    if args.all or args.quick:
        run_quick_simulation(image=args.image)

    if args.all or args.energy:
        run_energy_check()

    if args.all or args.impact:
        run_impact_estimate()

    print("\n" + "=" * 60)
    print("Examples complete!")
    print(f"Slider ranges: {CONTROL_RANGES}")
    print("=" * 60)
