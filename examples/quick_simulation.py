#!/usr/bin/env python3
"""Quick simulation example with a small room.

Runs both strategies on 20 prisoners, then shows how the loop strategy
improves as the pick budget grows.

Usage:
    python examples/quick_simulation.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from prisoners.analysis import MonteCarloRunner
from prisoners.models import ExperimentConfig
from prisoners.output import ConsoleOutput
from prisoners.simulation import StrategyKind, cycle_lengths, make_boxes


def main():
    print("Prisoners Monte Carlo Simulation - Quick Example")
    print("=" * 50)

    config = ExperimentConfig(num_tries=20_000, num_boxes=20, num_picks=10, seed=123)
    print(f"Prisoners: {config.num_boxes}")
    print(f"Picks:     {config.num_picks}")
    print(f"Trials:    {config.num_tries}")
    print()

    # One room first, to show why the loop strategy works
    boxes = make_boxes(config.num_boxes)
    print(f"Example room: {list(boxes)}")
    print(f"Cycle lengths: {cycle_lengths(boxes)}")
    print()

    # Use quick run (non-parallel) for simplicity
    runner = MonteCarloRunner(config)
    for kind in StrategyKind:
        results = runner.run_quick(kind, num_tries=config.num_tries)
        ConsoleOutput.print_strategy_result(results, precision=2)

    print("\nLoop strategy by pick budget:")
    print("-" * 50)
    for picks in range(2, config.num_boxes + 1, 2):
        sweep = MonteCarloRunner(config.model_copy(update={"num_picks": picks}))
        results = sweep.run_quick(StrategyKind.LOOP, num_tries=config.num_tries)
        bar = "#" * int(results.success_rate / 2)
        print(f"{picks:3d} picks {results.success_rate:6.2f}% {bar}")

    print("\nDone!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
