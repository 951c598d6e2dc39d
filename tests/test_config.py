import pytest
from pydantic import ValidationError

from prisoners.models import NUM_BOXES, NUM_PICKS, NUM_TRIES, ExperimentConfig


def test_defaults_are_classic_puzzle() -> None:
    config = ExperimentConfig()
    assert (config.num_tries, config.num_boxes, config.num_picks) == (NUM_TRIES, NUM_BOXES, NUM_PICKS)
    assert (NUM_TRIES, NUM_BOXES, NUM_PICKS) == (1_000_000, 100, 50)
    assert config.seed is None
    assert config.parallel


def test_picks_may_equal_boxes() -> None:
    assert ExperimentConfig(num_boxes=5, num_picks=5).num_picks == 5


@pytest.mark.parametrize(
    "kwargs",
    [
        {"num_tries": 0},
        {"num_boxes": 0},
        {"num_picks": 0},
        {"num_boxes": 4, "num_picks": 5},
        {"seed": -1},
        {"max_workers": 0},
        {"chunk_size": 0},
        {"precision": 0},
    ],
)
def test_invalid_config_rejected(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        ExperimentConfig(**kwargs)
