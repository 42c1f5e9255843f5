"""
Distributions subpackage

Interfaces and default implementations for probability distributions:

- distribution protocol and continuous base (:mod:`.distribution`);
- numerical fallbacks (:mod:`.fitters`);
- sample containers and the uniform source (:mod:`.sampling`);
- distribution ranges (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .distribution import ContinuousDistribution, Distribution
from .sampling import ArraySample, Sample, resolve_random_state
from .support import ContinuousSupport, Support

__all__ = [
    # distribution
    "Distribution",
    "ContinuousDistribution",
    # sampling
    "Sample",
    "ArraySample",
    "resolve_random_state",
    # support
    "Support",
    "ContinuousSupport",
]
