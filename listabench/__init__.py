"""Sequential and linked record lists with comparison and move counters, sorting algorithms and an interactive menu."""

__version__ = "0.1.0"