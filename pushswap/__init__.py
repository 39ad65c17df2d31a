"""Two-stack integer sorting: a solver that emits operations and a checker that verifies them."""

__version__ = "1.0.0"
__all__ = ["stack", "parsing", "operations", "sorter", "cli", "checker"]