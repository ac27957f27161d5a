"""Classic programming drills: sorting, searching, matrices, number bases, patterns, dates and more."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "calculator",
    "containers",
    "dates",
    "matrix",
    "patterns",
    "radix",
    "searching",
    "sorting",
    "student_records",
    "text",
]