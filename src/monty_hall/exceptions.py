"""Custom exceptions for the Monty Hall simulator."""


class MontyHallError(Exception):
    """Base exception for all simulator errors."""

    pass


class InvalidInputError(MontyHallError, ValueError):
    """Exception raised for out-of-range doors, malformed arrangements or trial counts."""

    pass
