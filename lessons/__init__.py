"""
Beginner exercises: variables, data types, functions, control flow,
and a few small practice problems.

Every lesson module has a main() and can be run on its own:

    python -m lessons.control_flow
    python -m lessons.practice.fizzbuzz

or all at once with `python -m lessons`.
"""

__version__ = "0.1.0"
