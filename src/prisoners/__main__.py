"""Entry point: estimate both strategies for the classic 100 prisoners."""

import logging
import sys

from prisoners.analysis import MonteCarloRunner
from prisoners.models import ExperimentConfig
from prisoners.output import ConsoleOutput

logger = logging.getLogger("prisoners.cli")


def main() -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ExperimentConfig()
    logger.info("Starting experiment with %s", config.model_dump())

    runner = MonteCarloRunner(config)
    for results in runner.run_all_strategies():
        ConsoleOutput.print_strategy_result(results, config.precision)

    return 0


if __name__ == "__main__":
    sys.exit(main())
