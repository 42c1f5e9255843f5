"""
Parametric Families module.

Parametrization machinery (constraints, named frozen parameter containers)
and the built-in closed-form distributions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import Exponential, ExponentialParametrization
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)

__all__ = [
    "ParametrizationConstraint",
    "Parametrization",
    "constraint",
    "parametrization",
    "Exponential",
    "ExponentialParametrization",
]
