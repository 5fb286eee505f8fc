"""Daily puzzle solvers that take input text, with shared text-parsing helpers."""

__version__ = "2022.0.0"