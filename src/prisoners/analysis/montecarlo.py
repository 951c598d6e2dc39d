"""Monte Carlo simulation runner and statistics."""

import logging
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass

import numpy as np

from prisoners.models import ExperimentConfig
from prisoners.simulation.strategy import StrategyKind
from prisoners.simulation.trial import run_trial

logger = logging.getLogger("prisoners.montecarlo")

# (strategy, num_boxes, num_picks, rng) -> did every prisoner succeed
TrialRunner = Callable[[StrategyKind, int, int, np.random.Generator], bool]


@dataclass
class SimulationResults:
    """Results from Monte Carlo simulation of one strategy."""

    strategy: StrategyKind
    num_tries: int
    successes: int

    @property
    def success_rate(self) -> float:
        """Success percentage."""
        return 100 * self.successes / self.num_tries if self.num_tries else 0.0


def _run_chunk(args: tuple) -> int:
    """Run a chunk of trials (for multiprocessing).

    Args:
        args: Tuple of (trial_runner, strategy, num_boxes, num_picks, num_trials, seed)

    Returns:
        Number of successful trials in the chunk
    """
    trial_runner, strategy, num_boxes, num_picks, num_trials, seed = args

    rng = np.random.default_rng(seed)
    kind = StrategyKind(strategy)

    successes = 0
    for _ in range(num_trials):
        if trial_runner(kind, num_boxes, num_picks, rng):
            successes += 1

    return successes


class MonteCarloRunner:
    """Runs Monte Carlo simulations of the prisoners problem."""

    def __init__(
        self,
        config: ExperimentConfig | None = None,
        trial_runner: TrialRunner = run_trial,
    ):
        """Initialize Monte Carlo runner.

        Args:
            config: Experiment parameters (None = the classic 100 prisoners setup)
            trial_runner: Function deciding a single trial; must be picklable
                for parallel runs
        """
        self.config = config if config is not None else ExperimentConfig()
        self.trial_runner = trial_runner
        self.base_seed = (
            self.config.seed
            if self.config.seed is not None
            else int(np.random.default_rng().integers(0, 2**31))
        )

    def run(self, strategy: StrategyKind | str) -> SimulationResults:
        """Run Monte Carlo simulations for one strategy.

        Args:
            strategy: Strategy every prisoner uses

        Returns:
            SimulationResults with the success count over all trials
        """
        kind = StrategyKind(strategy)
        config = self.config

        # Chunk i always gets seed base_seed + i, whatever the worker count
        chunk_sizes = [
            min(config.chunk_size, config.num_tries - start)
            for start in range(0, config.num_tries, config.chunk_size)
        ]
        args_list = [
            (self.trial_runner, kind.value, config.num_boxes, config.num_picks, size, self.base_seed + i)
            for i, size in enumerate(chunk_sizes)
        ]

        logger.info(
            "Running %s strategy: %d trials, %d boxes, %d picks, %d chunks, seed %d",
            kind.value,
            config.num_tries,
            config.num_boxes,
            config.num_picks,
            len(args_list),
            self.base_seed,
        )

        if config.parallel and len(args_list) > 1:
            with ProcessPoolExecutor(max_workers=config.max_workers) as executor:
                chunk_counts = list(executor.map(_run_chunk, args_list))
        else:
            chunk_counts = [_run_chunk(args) for args in args_list]

        for i, count in enumerate(chunk_counts):
            logger.debug("Chunk %d: %d/%d successes", i, count, chunk_sizes[i])

        results = SimulationResults(
            strategy=kind,
            num_tries=config.num_tries,
            successes=sum(chunk_counts),
        )
        logger.info(
            "%s strategy: %d/%d successes (%.4f%%)",
            kind.label,
            results.successes,
            results.num_tries,
            results.success_rate,
        )
        return results

    def run_all_strategies(self) -> list[SimulationResults]:
        """Run every strategy, random first."""
        return [self.run(kind) for kind in (StrategyKind.RANDOM, StrategyKind.LOOP)]

    def run_quick(self, strategy: StrategyKind | str, num_tries: int = 1000) -> SimulationResults:
        """Run a quick simulation without parallelization.

        Useful for testing or when running in environments
        where multiprocessing is problematic.
        """
        config = self.config.model_copy(
            update={"num_tries": num_tries, "parallel": False, "seed": self.base_seed}
        )
        return MonteCarloRunner(config, trial_runner=self.trial_runner).run(strategy)
