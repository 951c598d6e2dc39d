"""Console output formatting."""

from prisoners.analysis.montecarlo import SimulationResults


class ConsoleOutput:
    """Formats simulation results for console display."""

    @staticmethod
    def format_strategy_result(results: SimulationResults, precision: int = 1) -> str:
        """Format one strategy's success rate.

        Args:
            results: Aggregated simulation results
            precision: Decimal places of the percentage

        Returns:
            Line such as "Loop strategy: 31.2% success"
        """
        return f"{results.strategy.label} strategy: {results.success_rate:.{precision}f}% success"

    @staticmethod
    def print_strategy_result(results: SimulationResults, precision: int = 1) -> None:
        """Print one strategy's success rate to console."""
        print(ConsoleOutput.format_strategy_result(results, precision))
