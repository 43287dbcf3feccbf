"""Exceptions raised by the oscillator Monte Carlo functions."""


class InvalidInputError(ValueError):
    """Bad parameters or malformed data handed to the library."""


class EquilibrationError(RuntimeError):
    """The trajectory never returned to state 0, so no relaxation time exists."""
