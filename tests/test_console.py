import pytest

from prisoners.__main__ import main
from prisoners.analysis import MonteCarloRunner, SimulationResults
from prisoners.models import ExperimentConfig
from prisoners.output import ConsoleOutput
from prisoners.simulation.strategy import StrategyKind


def test_format_strategy_result() -> None:
    results = SimulationResults(StrategyKind.LOOP, num_tries=1000, successes=312)
    assert ConsoleOutput.format_strategy_result(results) == "Loop strategy: 31.2% success"
    assert ConsoleOutput.format_strategy_result(results, precision=3) == "Loop strategy: 31.200% success"


def test_print_strategy_result(capsys: pytest.CaptureFixture) -> None:
    ConsoleOutput.print_strategy_result(SimulationResults(StrategyKind.RANDOM, num_tries=8, successes=0))
    assert capsys.readouterr().out == "Random strategy: 0.0% success\n"


def test_main_prints_two_lines(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    small = ExperimentConfig(num_tries=100, num_boxes=10, num_picks=5, parallel=False, seed=0)
    monkeypatch.setattr("prisoners.__main__.ExperimentConfig", lambda: small)

    assert main() == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("Random strategy: ")
    assert lines[1].startswith("Loop strategy: ")
    assert all(line.endswith("% success") for line in lines)


def test_main_uses_default_runner(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = []
    monkeypatch.setattr(MonteCarloRunner, "run_all_strategies", lambda self: seen.append(self.config) or [])
    assert main() == 0
    assert seen == [ExperimentConfig()]
