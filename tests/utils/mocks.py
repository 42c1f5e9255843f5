from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Any

import numpy as np

from pysatl_uncertainty.distributions import ContinuousDistribution, ContinuousSupport
from pysatl_uncertainty.exceptions import InvalidArgumentError


class LogisticDistribution(ContinuousDistribution):
    """
    Logistic distribution exposing only ``pdf`` and ``cdf``.

    Everything else goes through the generic fallbacks of the base class.
    """

    def __init__(self, mu: float = 0.0, s: float = 1.0, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._set(mu, s)

    def _set(self, mu: float, s: float) -> None:
        if not s > 0:
            raise InvalidArgumentError("s must be positive")
        self._mu = float(mu)
        self._s = float(s)
        self._update_derived_state()

    def get_parameter(self) -> np.ndarray:
        return np.array([self._mu, self._s])

    def set_parameter(self, parameter: Any) -> None:
        mu, s = np.asarray(parameter, dtype=float)
        self._set(mu, s)

    def get_parameter_description(self) -> tuple[str, ...]:
        return ("mu", "s")

    def compute_range(self) -> None:
        self._range = ContinuousSupport()

    def _compute_mean(self) -> np.ndarray:
        return np.array([self._mu])

    def _compute_covariance(self) -> np.ndarray:
        return np.array([[(math.pi * self._s) ** 2 / 3.0]])

    def compute_pdf(self, point: Any) -> float:
        z = (self._as_scalar(point) - self._mu) / self._s
        e = math.exp(-abs(z))
        return e / (self._s * (1.0 + e) ** 2)

    def compute_cdf(self, point: Any) -> float:
        z = (self._as_scalar(point) - self._mu) / self._s
        if z >= 0:
            return 1.0 / (1.0 + math.exp(-z))
        e = math.exp(z)
        return e / (1.0 + e)


class UniformDistribution(ContinuousDistribution):
    """Uniform distribution on ``[a, b]`` exposing only ``pdf`` and ``cdf``."""

    def __init__(self, a: float = 0.0, b: float = 1.0) -> None:
        super().__init__()
        self._a = float(a)
        self._b = float(b)
        self._update_derived_state()

    def get_parameter(self) -> np.ndarray:
        return np.array([self._a, self._b])

    def set_parameter(self, parameter: Any) -> None:
        self._a, self._b = (float(v) for v in parameter)
        self._update_derived_state()

    def get_parameter_description(self) -> tuple[str, ...]:
        return ("a", "b")

    def compute_range(self) -> None:
        self._range = ContinuousSupport(self._a, self._b)

    def _compute_mean(self) -> np.ndarray:
        return np.array([0.5 * (self._a + self._b)])

    def _compute_covariance(self) -> np.ndarray:
        return np.array([[(self._b - self._a) ** 2 / 12.0]])

    def compute_pdf(self, point: Any) -> float:
        x = self._as_scalar(point)
        return 1.0 / (self._b - self._a) if self._a <= x <= self._b else 0.0

    def compute_cdf(self, point: Any) -> float:
        x = self._as_scalar(point)
        return min(max((x - self._a) / (self._b - self._a), 0.0), 1.0)
