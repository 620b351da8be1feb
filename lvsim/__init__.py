"""Lotka-Volterra predator-prey simulation, named scenarios and a parameter grid search."""

__version__ = "0.1.0"
__all__ = ["model", "scenarios", "optimize"]