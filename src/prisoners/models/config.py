"""Experiment configuration."""

from pydantic import BaseModel, Field, model_validator

# Defaults for the classic puzzle
NUM_TRIES = 1_000_000
NUM_BOXES = 100
NUM_PICKS = 50


class ExperimentConfig(BaseModel):
    """Parameters for one Monte Carlo experiment."""

    num_tries: int = Field(
        default=NUM_TRIES,
        gt=0,
        description="Number of independent trials per strategy",
    )
    num_boxes: int = Field(
        default=NUM_BOXES,
        gt=0,
        description="Number of boxes, equal to the number of prisoners",
    )
    num_picks: int = Field(
        default=NUM_PICKS,
        gt=0,
        description="Boxes each prisoner may open",
    )
    seed: int | None = Field(
        default=None,
        ge=0,
        description="Base random seed (None = draw from OS entropy)",
    )

    # Execution
    parallel: bool = Field(default=True, description="Run chunks in a process pool")
    max_workers: int | None = Field(
        default=None,
        gt=0,
        description="Maximum parallel workers (None = CPU count)",
    )
    chunk_size: int = Field(
        default=10_000,
        gt=0,
        description="Trials handed to a worker at a time",
    )

    # Output
    precision: int = Field(
        default=1,
        ge=1,
        description="Decimal places of the reported percentage",
    )

    @model_validator(mode="after")
    def _check_pick_budget(self) -> "ExperimentConfig":
        # The random strategy cannot open more boxes than exist
        if self.num_picks > self.num_boxes:
            raise ValueError(
                f"num_picks ({self.num_picks}) must not exceed num_boxes ({self.num_boxes})"
            )
        return self

