"""
Main entry point for the flocking simulation.

Run with:
    python -m flocksim.main                         # Interactive simulation
    python -m flocksim.main --headless              # Headless run with CSV/JSON export
    python -m flocksim.main --headless --plot       # ... plus a classification plot
"""

import os
import random


def set_headless():
    """Enable headless mode for pygame and matplotlib."""
    os.environ["SDL_VIDEODRIVER"] = "dummy"
    os.environ.setdefault("MPLBACKEND", "Agg")


def run_interactive(boids: int = None):
    """Run the interactive simulation with GUI."""
    from .simulation.interactive import Simulation
    from .core.config import SimulationParameters

    print("=" * 60)
    print("Boids Simulation")
    print("=" * 60)
    print("\nControls:")
    print("  ESC        - Quit")
    print("  SPACE      - Pause / resume")
    print("  R          - Reset parameters to defaults")
    print("  UP / DOWN  - Add / remove 10 boids")
    print("  1-4        - Select separation / alignment / cohesion / avoidance weight")
    print("  + / -      - Adjust the selected weight")
    print("\nMove the mouse over the window to act as the predator.")
    print("Colours: yellow=separation, green=alignment, blue=cohesion, red=avoidance")
    print("\nStarting simulation...")

    params = SimulationParameters()
    if boids is not None:
        params.target_population = boids
    sim = Simulation(params=params)
    sim.run()


def run_headless(num_trials: int = 1, duration: int = 2000, boids: int = None,
                 predator_orbit: float = None, plot: bool = False):
    """
    Run the flock without a window and export the collected statistics.

    Args:
        num_trials: Number of independent runs
        duration: Duration in frames per run
        boids: Target population (default parameters if None)
        predator_orbit: Radius of the scripted predator's path, or None
        plot: Save a classification plot of the first trial
    """
    set_headless()

    from .simulation.headless import HeadlessSimulation
    from .analysis.export import export_results_to_csv, export_report, calculate_aggregate_stats
    from .core.config import SimulationConfig, SimulationParameters

    config = SimulationConfig()
    params = SimulationParameters()
    if boids is not None:
        params.target_population = boids

    print("=" * 60)
    print("HEADLESS FLOCK RUN")
    print("=" * 60)
    print(f"Duration per trial: {duration} frames")
    print(f"Trials: {num_trials}")
    print(f"Boids: {params.target_population}")
    print(f"Predator: {'orbit r=%.0f' % predator_orbit if predator_orbit is not None else 'none'}")
    print()

    results = []
    for trial in range(num_trials):
        print(f"\nTrial {trial + 1}/{num_trials}")
        random.seed(42 + trial)

        sim = HeadlessSimulation(SimulationParameters.from_dict(params.to_dict()), config,
                                 predator_orbit=predator_orbit)
        result = sim.run(duration)
        result["trial"] = trial + 1
        results.append(result)

    aggregates = calculate_aggregate_stats(results)
    report = {
        "run_config": {
            "duration_frames": duration,
            "trials": num_trials,
            "predator_orbit": predator_orbit,
            "domain": config.to_dict(),
        },
        "params": params.to_dict(),
        "trial_results": results,
        "aggregates": aggregates,
    }

    export_report(report, config.reportOutputFile)
    export_results_to_csv(results)

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    print(f"   Avg Speed: {aggregates.get('avg_speed_mean', 0):.2f} ± {aggregates.get('avg_speed_std', 0):.2f}")
    print(f"   Avg Cohesion: {aggregates.get('avg_cohesion_mean', 0):.2f} ± {aggregates.get('avg_cohesion_std', 0):.2f}")
    print(f"   Final tags (trial 1): {results[0]['final_classification_counts']}")

    if plot:
        from .analysis.plotting import plot_classification_over_time
        print("\nGenerating classification plot...")
        plot_classification_over_time(results[0])

    return report


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Boids Flocking Simulation")
    parser.add_argument("--headless", action="store_true", help="Run without a window and export statistics")
    parser.add_argument("--trials", type=int, default=1, help="Number of headless trials")
    parser.add_argument("--duration", type=int, default=2000, help="Simulation duration in frames")
    parser.add_argument("--boids", type=int, default=None, help="Target number of boids")
    parser.add_argument("--predator-orbit", type=float, default=None,
                        help="Radius of the scripted predator's circular path (headless only)")
    parser.add_argument("--plot", action="store_true", help="Save a classification plot (headless only)")

    args = parser.parse_args()

    if args.headless:
        run_headless(
            num_trials=args.trials,
            duration=args.duration,
            boids=args.boids,
            predator_orbit=args.predator_orbit,
            plot=args.plot,
        )
    else:
        run_interactive(boids=args.boids)


if __name__ == "__main__":
    main()
