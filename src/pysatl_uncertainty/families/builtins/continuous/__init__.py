"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_uncertainty.families.builtins.continuous.exponential import (
    Exponential,
    ExponentialParametrization,
)

__all__ = [
    "Exponential",
    "ExponentialParametrization",
]
