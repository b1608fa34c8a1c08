"""Public package interface for almanac."""

from .cli import main
from .solver import SolverConfig, lowest_location, solve_puzzle

__all__ = ["main", "SolverConfig", "lowest_location", "solve_puzzle"]
