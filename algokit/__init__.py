"""Classic algorithms: sorting, string matching, knapsack, matrices, graphs and backtracking."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "knapsack",
    "matching",
    "matrix",
    "shortest_paths",
    "sorting",
    "spanning_tree",
]