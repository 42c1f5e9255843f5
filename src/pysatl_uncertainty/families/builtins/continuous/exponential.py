"""
Exponential distribution.

The (possibly shifted) exponential distribution with rate ``lambda_ > 0`` and
shift ``gamma`` has density

    f(x) = λ * exp(-λ * (x - γ)) for x ≥ γ, and 0 otherwise.

Every characteristic is evaluated in closed form.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import cmath
import math
from operator import index
from typing import TYPE_CHECKING

import numpy as np

from pysatl_uncertainty.distributions.distribution import ContinuousDistribution
from pysatl_uncertainty.distributions.sampling import (
    ArraySample,
    open_uniform,
    resolve_random_state,
)
from pysatl_uncertainty.distributions.support import ContinuousSupport
from pysatl_uncertainty.exceptions import InvalidArgumentError, InvalidProbabilityError
from pysatl_uncertainty.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_uncertainty.types import FamilyName

if TYPE_CHECKING:
    from collections.abc import Mapping, MutableMapping
    from typing import Any

    from numpy.typing import ArrayLike, NDArray

    from pysatl_uncertainty.config import NumericalSettings
    from pysatl_uncertainty.distributions.sampling import RandomState
    from pysatl_uncertainty.types import PointLike


@parametrization(name="rate")
class ExponentialParametrization(Parametrization):
    """
    Rate parametrization of the shifted exponential distribution.

    Parameters
    ----------
    lambda_ : float
        Rate parameter (λ) of the distribution.
    gamma : float
        Shift (γ), the lower bound of the support.
    """

    lambda_: float
    gamma: float = 0.0

    @constraint(description="lambda_ > 0")
    def check_lambda_positive(self) -> bool:
        """Check that the rate is a positive finite real."""
        return math.isfinite(self.lambda_) and self.lambda_ > 0

    @constraint(description="gamma is finite")
    def check_gamma_finite(self) -> bool:
        """Check that the shift is a finite real."""
        return math.isfinite(self.gamma)


class Exponential(ContinuousDistribution):
    """
    Shifted exponential distribution.

    Parameters
    ----------
    lambda_ : float, default 1.0
        Rate parameter, must be positive.
    gamma : float, default 0.0
        Shift parameter.
    name : str, optional
        Human-readable name, ``"Exponential"`` by default.
    settings : NumericalSettings, optional
        Settings of the inherited numerical fallbacks.

    Raises
    ------
    InvalidArgumentError
        If ``lambda_`` is not a positive finite real or ``gamma`` is not finite.

    Examples
    --------
    >>> dist = Exponential(2.0, 1.0)
    >>> dist.compute_pdf(1.0)
    2.0
    >>> dist.get_mean()
    array([1.5])
    """

    def __init__(
        self,
        lambda_: float = 1.0,
        gamma: float = 0.0,
        *,
        name: str | None = None,
        settings: NumericalSettings | None = None,
    ) -> None:
        if name is None:
            name = FamilyName.EXPONENTIAL.value
        super().__init__(name=name, settings=settings)
        self._assign(ExponentialParametrization.from_vector([lambda_, gamma]))

    def _assign(self, parameters: ExponentialParametrization) -> None:
        self._parameters = parameters
        self._update_derived_state()

    def __str__(self) -> str:
        lambda_, gamma = self._parameters.lambda_, self._parameters.gamma
        return f"{type(self).__name__}(lambda = {lambda_:g}, gamma = {gamma:g})"

    # ------------------------------------------------------------------ #
    # Parameters
    # ------------------------------------------------------------------ #

    @property
    def parameters(self) -> ExponentialParametrization:
        """Current parameters as an immutable parametrization object."""
        return self._parameters

    def get_lambda(self) -> float:
        return self._parameters.lambda_

    def set_lambda(self, lambda_: float) -> None:
        """
        Set the rate.

        Raises
        ------
        InvalidArgumentError
            If ``lambda_ <= 0``; the distribution is left unchanged.
        """
        self._assign(self._parameters.replace(lambda_=float(lambda_)))

    def get_gamma(self) -> float:
        return self._parameters.gamma

    def set_gamma(self, gamma: float) -> None:
        """Set the shift (lower bound of the support)."""
        self._assign(self._parameters.replace(gamma=float(gamma)))

    def get_parameter(self) -> NDArray[np.float64]:
        return np.array(self._parameters.values, dtype=np.float64)

    def set_parameter(self, parameter: ArrayLike) -> None:
        """
        Set ``[lambda, gamma]`` at once.

        Raises
        ------
        InvalidArgumentError
            If the vector does not hold two values or ``lambda <= 0``.
        """
        self._assign(ExponentialParametrization.from_vector(parameter))

    def get_parameter_description(self) -> tuple[str, ...]:
        return self._parameters.description

    # ------------------------------------------------------------------ #
    # Derived state
    # ------------------------------------------------------------------ #

    def compute_range(self) -> None:
        self._range = ContinuousSupport(left=self._parameters.gamma, left_closed=True)

    def _compute_mean(self) -> NDArray[np.float64]:
        return np.array([self._parameters.gamma + 1.0 / self._parameters.lambda_])

    def _compute_covariance(self) -> NDArray[np.float64]:
        return np.array([[1.0 / self._parameters.lambda_**2]])

    # ------------------------------------------------------------------ #
    # Closed-form characteristics
    # ------------------------------------------------------------------ #

    def compute_pdf(self, point: PointLike) -> float:
        y = self._as_scalar(point) - self._parameters.gamma
        if y < 0.0:
            return 0.0
        lambda_ = self._parameters.lambda_
        return lambda_ * math.exp(-lambda_ * y)

    def compute_log_pdf(self, point: PointLike) -> float:
        y = self._as_scalar(point) - self._parameters.gamma
        if y < 0.0:
            return float("-inf")
        lambda_ = self._parameters.lambda_
        return math.log(lambda_) - lambda_ * y

    def compute_ddf(self, point: PointLike) -> NDArray[np.float64]:
        y = self._as_scalar(point) - self._parameters.gamma
        if y < 0.0:
            return np.zeros(1)
        lambda_ = self._parameters.lambda_
        return np.array([-lambda_ * lambda_ * math.exp(-lambda_ * y)])

    def compute_cdf(self, point: PointLike) -> float:
        y = self._as_scalar(point) - self._parameters.gamma
        if y < 0.0:
            return 0.0
        return -math.expm1(-self._parameters.lambda_ * y)

    def compute_complementary_cdf(self, point: PointLike) -> float:
        y = self._as_scalar(point) - self._parameters.gamma
        if y < 0.0:
            return 1.0
        return math.exp(-self._parameters.lambda_ * y)

    def compute_characteristic_function(self, u: float) -> complex:
        """φ(u) = exp(iuγ) λ / (λ - iu)."""
        u = self._as_scalar(u)
        lambda_ = self._parameters.lambda_
        return cmath.exp(1j * u * self._parameters.gamma) * lambda_ / complex(lambda_, -u)

    def compute_log_characteristic_function(self, u: float) -> complex:
        u = self._as_scalar(u)
        lambda_ = self._parameters.lambda_
        return complex(math.log(lambda_), u * self._parameters.gamma) - cmath.log(
            complex(lambda_, -u)
        )

    def compute_pdf_gradient(self, point: PointLike) -> NDArray[np.float64]:
        """Gradient of the density with respect to ``(lambda, gamma)``."""
        y = self._as_scalar(point) - self._parameters.gamma
        if y < 0.0:
            return np.zeros(2)
        lambda_ = self._parameters.lambda_
        exp_y = math.exp(-lambda_ * y)
        if exp_y == 0.0:
            return np.zeros(2)
        return np.array([exp_y * (1.0 - lambda_ * y), lambda_ * lambda_ * exp_y])

    def compute_cdf_gradient(self, point: PointLike) -> NDArray[np.float64]:
        """Gradient of the CDF with respect to ``(lambda, gamma)``."""
        y = self._as_scalar(point) - self._parameters.gamma
        if y < 0.0:
            return np.zeros(2)
        lambda_ = self._parameters.lambda_
        exp_y = math.exp(-lambda_ * y)
        if exp_y == 0.0:
            return np.zeros(2)
        return np.array([y * exp_y, -lambda_ * exp_y])

    def _compute_scalar_quantile(self, prob: float, tail: bool) -> float:
        lambda_, gamma = self._parameters.lambda_, self._parameters.gamma
        with np.errstate(divide="ignore"):
            if tail:
                return float(gamma - np.log(prob) / lambda_)
            return float(gamma - np.log1p(-prob) / lambda_)

    # ------------------------------------------------------------------ #
    # Moments
    # ------------------------------------------------------------------ #

    def get_standard_deviation(self) -> NDArray[np.float64]:
        return np.array([1.0 / self._parameters.lambda_])

    def get_skewness(self) -> NDArray[np.float64]:
        return np.array([2.0])

    def get_kurtosis(self) -> NDArray[np.float64]:
        return np.array([9.0])

    def get_standard_moment(self, n: int) -> NDArray[np.float64]:
        """
        Raw moment of order ``n`` of ``Exponential(1, 0)``, i.e. ``n!``.

        Raises
        ------
        InvalidArgumentError
            If ``n`` is not a non-negative integer.
        """
        try:
            order = index(n)
        except TypeError as exc:
            raise InvalidArgumentError(f"Moment order must be an integer, got {n!r}") from exc
        if order < 0:
            raise InvalidArgumentError(f"Moment order must be non-negative, got {order}")
        return np.array([float(math.factorial(order))])

    def get_standard_representative(self) -> Exponential:
        return Exponential(1.0, 0.0, settings=self.settings)

    # ------------------------------------------------------------------ #
    # Sampling
    # ------------------------------------------------------------------ #

    def get_realization(self, random_state: RandomState = None) -> float:
        u = open_uniform(resolve_random_state(random_state))
        return self._parameters.gamma - math.log(u) / self._parameters.lambda_

    def get_sample(self, size: int, random_state: RandomState = None) -> ArraySample:
        size = self._check_size(size)
        u = open_uniform(resolve_random_state(random_state), size)
        values = self._parameters.gamma - np.log(u) / self._parameters.lambda_
        return ArraySample.from_values(values)

    # ------------------------------------------------------------------ #
    # Vectorized characteristics
    # ------------------------------------------------------------------ #

    def _shifted(self, points: ArrayLike) -> NDArray[np.float64]:
        return self._as_points(points) - self._parameters.gamma

    def compute_pdf_batch(self, points: ArrayLike) -> NDArray[np.float64]:
        y = self._shifted(points)
        lambda_ = self._parameters.lambda_
        return np.where(y < 0, 0.0, lambda_ * np.exp(-lambda_ * np.maximum(y, 0.0)))

    def compute_log_pdf_batch(self, points: ArrayLike) -> NDArray[np.float64]:
        y = self._shifted(points)
        lambda_ = self._parameters.lambda_
        return np.where(y < 0, -np.inf, math.log(lambda_) - lambda_ * y)

    def compute_cdf_batch(self, points: ArrayLike) -> NDArray[np.float64]:
        y = self._shifted(points)
        return np.where(y < 0, 0.0, -np.expm1(-self._parameters.lambda_ * np.maximum(y, 0.0)))

    def compute_complementary_cdf_batch(self, points: ArrayLike) -> NDArray[np.float64]:
        y = self._shifted(points)
        return np.where(y < 0, 1.0, np.exp(-self._parameters.lambda_ * np.maximum(y, 0.0)))

    def compute_quantile_batch(self, probs: ArrayLike, tail: bool = False) -> NDArray[np.float64]:
        p = self._as_points(probs)
        if np.any(~((p >= 0.0) & (p <= 1.0))):
            raise InvalidProbabilityError("Probability must be in [0, 1]")
        lambda_, gamma = self._parameters.lambda_, self._parameters.gamma
        with np.errstate(divide="ignore"):
            if tail:
                return gamma - np.log(p) / lambda_
            return gamma - np.log1p(-p) / lambda_

    # ------------------------------------------------------------------ #
    # Persistence
    # ------------------------------------------------------------------ #

    def save(self, store: MutableMapping[str, Any]) -> None:
        super().save(store)
        store["lambda_"] = self._parameters.lambda_
        store["gamma_"] = self._parameters.gamma

    def load(self, store: Mapping[str, Any]) -> None:
        try:
            vector = [store["lambda_"], store["gamma_"]]
        except KeyError as exc:
            raise InvalidArgumentError(
                f"Exponential state is missing field {exc.args[0]!r}"
            ) from exc
        parameters = ExponentialParametrization.from_vector(vector)
        super().load(store)
        self._assign(parameters)
