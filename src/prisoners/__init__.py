"""Monte Carlo simulation of the 100 prisoners problem."""

__version__ = "0.1.0"
