"""Exceptions raised by the gasket builder."""


class GasketError(Exception):
    """Base class for gasket errors."""


class ConfigurationError(GasketError, ValueError):
    """Invalid tolerance, size floor or seed configuration."""


class SeedTangencyError(ConfigurationError):
    """The three seed circles are not pairwise tangent within epsilon."""


class DegenerateCircleError(GasketError, ValueError):
    """A circle was built from a zero or non-finite bend, or a non-finite center."""


__all__ = [
    "GasketError",
    "ConfigurationError",
    "SeedTangencyError",
    "DegenerateCircleError",
]
