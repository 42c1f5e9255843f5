"""
Built-in distribution families for PySATL uncertainty.

This package contains implementations of standard statistical distribution families
that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_uncertainty.families.builtins.continuous import (
    Exponential,
    ExponentialParametrization,
)

__all__ = [
    "Exponential",
    "ExponentialParametrization",
]
