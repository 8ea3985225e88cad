"""Sorting with operation counts, Horspool search, knapsack, subset sums, n-queens and graph algorithms."""

__version__ = "0.1.0"

__all__ = ["cli", "combinatorics", "graphs", "search", "sorting"]