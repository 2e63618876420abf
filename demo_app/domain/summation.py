"""Summation domain service."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SummationService:
    """Domain service adding two integers."""

    def add(self, arg_one: int, arg_two: int) -> int:
        """Return the arithmetic sum of both arguments."""
        return arg_one + arg_two
