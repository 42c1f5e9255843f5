"""
Exceptions
==========

Errors raised by distributions. Both classes derive from :class:`ValueError`
so that callers catching the built-in type keep working.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidArgumentError(ValueError):
    """Raised for invalid parameter values or malformed evaluation points."""


class InvalidProbabilityError(InvalidArgumentError):
    """Raised when a probability lies outside ``[0, 1]``."""


__all__ = [
    "InvalidArgumentError",
    "InvalidProbabilityError",
]
