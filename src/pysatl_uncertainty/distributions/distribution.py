"""
Distribution Interfaces and the Continuous Base
===============================================

This module defines the public :class:`Distribution` protocol and the abstract
univariate continuous implementation every concrete distribution derives from:

- :class:`Distribution` protocol – abstract interface used throughout the package.
- :class:`ContinuousDistribution` – shared state (range, mean, covariance),
  point validation, and generic numerical defaults that a concrete
  distribution overrides with closed forms.

Notes
-----
- Derived state is recomputed eagerly by :meth:`ContinuousDistribution._update_derived_state`
  after every successful parameter write; there is no lazy cache to invalidate.
- Scalar operations (``compute_pdf``) and their vectorized counterparts
  (``compute_pdf_batch``) are distinct methods.
- The generic sampler draws from the distribution's quantile applied to
  uniforms on ``(0, 1)``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import cmath
import copy
import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

import numpy as np

from pysatl_uncertainty.config import DEFAULT_SETTINGS, NumericalSettings
from pysatl_uncertainty.distributions.fitters import (
    characteristic_function_by_quadrature,
    num_derivative,
    parameter_gradient,
    ppf_from_cdf,
)
from pysatl_uncertainty.distributions.sampling import (
    ArraySample,
    open_uniform,
    resolve_random_state,
)
from pysatl_uncertainty.distributions.support import ContinuousSupport
from pysatl_uncertainty.exceptions import InvalidArgumentError, InvalidProbabilityError
from pysatl_uncertainty.types import UnivariateContinuous

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, MutableMapping
    from typing import Any

    from numpy.typing import ArrayLike, NDArray

    from pysatl_uncertainty.distributions.sampling import RandomState, Sample
    from pysatl_uncertainty.distributions.support import Support
    from pysatl_uncertainty.types import DistributionType, PointLike


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface shared by every distribution type."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def support(self) -> Support | None: ...

    def get_realization(self, random_state: RandomState = None) -> float: ...
    def get_sample(self, size: int, random_state: RandomState = None) -> Sample: ...

    def compute_pdf(self, point: PointLike) -> float: ...
    def compute_log_pdf(self, point: PointLike) -> float: ...
    def compute_ddf(self, point: PointLike) -> NDArray[np.float64]: ...
    def compute_cdf(self, point: PointLike) -> float: ...
    def compute_complementary_cdf(self, point: PointLike) -> float: ...
    def compute_characteristic_function(self, u: float) -> complex: ...
    def compute_log_characteristic_function(self, u: float) -> complex: ...
    def compute_pdf_gradient(self, point: PointLike) -> NDArray[np.float64]: ...
    def compute_cdf_gradient(self, point: PointLike) -> NDArray[np.float64]: ...
    def compute_scalar_quantile(self, prob: float, tail: bool = False) -> float: ...

    def get_mean(self) -> NDArray[np.float64]: ...
    def get_covariance(self) -> NDArray[np.float64]: ...
    def get_standard_deviation(self) -> NDArray[np.float64]: ...
    def get_skewness(self) -> NDArray[np.float64]: ...
    def get_kurtosis(self) -> NDArray[np.float64]: ...
    def get_standard_moment(self, n: int) -> NDArray[np.float64]: ...
    def get_standard_representative(self) -> Distribution: ...

    def get_parameter(self) -> NDArray[np.float64]: ...
    def set_parameter(self, parameter: ArrayLike) -> None: ...
    def get_parameter_description(self) -> tuple[str, ...]: ...

    def clone(self) -> Distribution: ...


class ContinuousDistribution(ABC):
    """
    Abstract univariate continuous distribution.

    Parameters
    ----------
    name : str, optional
        Human-readable name; defaults to the class name.
    settings : NumericalSettings, optional
        Tolerances of the generic fallbacks; defaults to :data:`DEFAULT_SETTINGS`.

    Notes
    -----
    Subclasses store their parameters, then call :meth:`_update_derived_state`
    from the constructor and from every setter once the new parameters have
    been validated.
    """

    settings: NumericalSettings = DEFAULT_SETTINGS

    def __init__(self, name: str | None = None, settings: NumericalSettings | None = None) -> None:
        self._name = type(self).__name__ if name is None else name
        if settings is not None:
            self.settings = settings
        self._range = ContinuousSupport()
        self._mean = np.full(1, np.nan)
        self._covariance = np.full((1, 1), np.nan)

    # ------------------------------------------------------------------ #
    # Identity and structure
    # ------------------------------------------------------------------ #

    @property
    def name(self) -> str:
        """Human-readable name of the distribution."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return UnivariateContinuous

    @property
    def dimension(self) -> int:
        return 1

    @property
    def support(self) -> ContinuousSupport:
        """Get the support (range) of this distribution."""
        return self._range

    def get_range(self) -> ContinuousSupport:
        """Return the range computed by the last :meth:`compute_range`."""
        return self._range

    def clone(self) -> Self:
        """Return an independent copy with identical parameter state."""
        return copy.deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ContinuousDistribution):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return bool(np.array_equal(self.get_parameter(), other.get_parameter()))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parameters = " ".join(
            f"{label}={value!r}"
            for label, value in zip(
                self.get_parameter_description(), self.get_parameter().tolist(), strict=True
            )
        )
        return (
            f"class={type(self).__name__} name={self._name} "
            f"dimension={self.dimension} {parameters}"
        )

    # ------------------------------------------------------------------ #
    # Parameters and derived state
    # ------------------------------------------------------------------ #

    @abstractmethod
    def get_parameter(self) -> NDArray[np.float64]:
        """Return the ordered parameter vector."""

    @abstractmethod
    def set_parameter(self, parameter: ArrayLike) -> None:
        """Set all parameters from an ordered vector."""

    @abstractmethod
    def get_parameter_description(self) -> tuple[str, ...]:
        """Return parameter names, ordered like :meth:`get_parameter`."""

    @abstractmethod
    def compute_range(self) -> None:
        """Recompute ``self._range`` from the current parameters."""

    @abstractmethod
    def _compute_mean(self) -> NDArray[np.float64]: ...

    @abstractmethod
    def _compute_covariance(self) -> NDArray[np.float64]: ...

    def _update_derived_state(self) -> None:
        self.compute_range()
        self._mean = self._compute_mean()
        self._covariance = self._compute_covariance()

    # ------------------------------------------------------------------ #
    # Input validation
    # ------------------------------------------------------------------ #

    @staticmethod
    def _as_scalar(point: PointLike) -> float:
        """
        Coerce a univariate point to ``float``.

        Raises
        ------
        InvalidArgumentError
            If the point does not hold exactly one coordinate.
        """
        arr = np.asarray(point, dtype=float)
        if arr.size != 1:
            raise InvalidArgumentError(
                f"Expected a point of dimension 1, got a point of dimension {arr.size}"
            )
        return float(arr.reshape(-1)[0])

    @staticmethod
    def _as_points(points: ArrayLike) -> NDArray[np.float64]:
        """
        Coerce a batch of univariate points to a 1D float array.

        Accepts shape ``(n,)`` or the ``(n, 1)`` layout of :class:`ArraySample`.
        """
        arr = np.atleast_1d(np.asarray(points, dtype=float))
        if arr.ndim == 2 and arr.shape[1] == 1:
            arr = arr[:, 0]
        if arr.ndim != 1:
            raise InvalidArgumentError(
                f"Expected points of shape (n,) or (n, 1), got shape {arr.shape}"
            )
        return arr

    @staticmethod
    def _check_probability(prob: float) -> float:
        prob = float(prob)
        if not 0.0 <= prob <= 1.0:
            raise InvalidProbabilityError(f"Probability must be in [0, 1], got {prob}")
        return prob

    # ------------------------------------------------------------------ #
    # Scalar characteristics
    # ------------------------------------------------------------------ #

    @abstractmethod
    def compute_pdf(self, point: PointLike) -> float:
        """Probability density at ``point``."""

    @abstractmethod
    def compute_cdf(self, point: PointLike) -> float:
        """Cumulative probability ``P(X <= point)``."""

    def compute_log_pdf(self, point: PointLike) -> float:
        """Logarithm of the density; ``-inf`` where the density vanishes."""
        pdf = self.compute_pdf(point)
        return math.log(pdf) if pdf > 0.0 else float("-inf")

    def compute_complementary_cdf(self, point: PointLike) -> float:
        """Survival function ``P(X > point)``."""
        return 1.0 - self.compute_cdf(point)

    def compute_ddf(self, point: PointLike) -> NDArray[np.float64]:
        """Derivative of the density with respect to the point."""
        x = self._as_scalar(point)
        return np.array([num_derivative(self.compute_pdf, x, h=self.settings.derivative_step)])

    def compute_characteristic_function(self, u: float) -> complex:
        """Characteristic function ``E[exp(i u X)]``."""
        return characteristic_function_by_quadrature(
            self.compute_pdf,
            self._as_scalar(u),
            self._range.left,
            self._range.right,
            limit=self.settings.quadrature_limit,
        )

    def compute_log_characteristic_function(self, u: float) -> complex:
        """Principal logarithm of the characteristic function."""
        return cmath.log(self.compute_characteristic_function(u))

    def _parameter_gradient(
        self, characteristic: Callable[[Self, float], float], x: float
    ) -> NDArray[np.float64]:
        work = self.clone()

        def evaluate(parameter: NDArray[np.float64]) -> float:
            work.set_parameter(parameter)
            return characteristic(work, x)

        return parameter_gradient(evaluate, self.get_parameter(), self.settings.gradient_step)

    def compute_pdf_gradient(self, point: PointLike) -> NDArray[np.float64]:
        """Gradient of the density with respect to the parameter vector."""
        return self._parameter_gradient(type(self).compute_pdf, self._as_scalar(point))

    def compute_cdf_gradient(self, point: PointLike) -> NDArray[np.float64]:
        """Gradient of the CDF with respect to the parameter vector."""
        return self._parameter_gradient(type(self).compute_cdf, self._as_scalar(point))

    def compute_scalar_quantile(self, prob: float, tail: bool = False) -> float:
        """
        Quantile of level ``prob``.

        Parameters
        ----------
        prob : float
            Probability in ``[0, 1]``; the endpoints map to the range bounds.
        tail : bool, default False
            If ``True``, ``prob`` is an upper-tail probability: the result
            ``x`` satisfies ``P(X > x) = prob``.

        Raises
        ------
        InvalidProbabilityError
            If ``prob`` lies outside ``[0, 1]``.
        """
        return self._compute_scalar_quantile(self._check_probability(prob), tail)

    def compute_quantile(self, prob: float, tail: bool = False) -> NDArray[np.float64]:
        """Quantile as a one-coordinate point."""
        return np.array([self.compute_scalar_quantile(prob, tail)])

    def _compute_scalar_quantile(self, prob: float, tail: bool) -> float:
        q = 1.0 - prob if tail else prob
        lower, upper = self._range.left, self._range.right
        if q <= 0.0:
            return lower
        if q >= 1.0:
            return upper

        if self._range.is_left_bounded:
            x0 = lower
        elif self._range.is_right_bounded:
            x0 = upper
        else:
            x0 = 0.0
        settings = self.settings
        ppf = ppf_from_cdf(
            self.compute_cdf,
            x0=x0,
            init_step=settings.bracket_init_step,
            expand_factor=settings.bracket_expand_factor,
            max_expand=settings.bracket_max_expand,
            x_tol=settings.quantile_x_tol,
            max_iter=settings.quantile_max_iter,
        )
        return self._range.clip(ppf(q))

    # ------------------------------------------------------------------ #
    # Moments
    # ------------------------------------------------------------------ #

    def get_mean(self) -> NDArray[np.float64]:
        return self._mean.copy()

    def get_covariance(self) -> NDArray[np.float64]:
        return self._covariance.copy()

    def get_standard_deviation(self) -> NDArray[np.float64]:
        return np.sqrt(np.diag(self._covariance))

    def get_skewness(self) -> NDArray[np.float64]:
        raise NotImplementedError(f"{type(self).__name__} provides no closed-form skewness")

    def get_kurtosis(self) -> NDArray[np.float64]:
        raise NotImplementedError(f"{type(self).__name__} provides no closed-form kurtosis")

    def get_standard_moment(self, n: int) -> NDArray[np.float64]:
        raise NotImplementedError(f"{type(self).__name__} provides no closed-form standard moments")

    def get_standard_representative(self) -> ContinuousDistribution:
        """Canonical member of the family; a copy unless overridden."""
        return self.clone()

    # ------------------------------------------------------------------ #
    # Sampling
    # ------------------------------------------------------------------ #

    def get_realization(self, random_state: RandomState = None) -> float:
        """Draw one value by inverting the CDF at a uniform on ``(0, 1)``."""
        rng = resolve_random_state(random_state)
        return self._compute_scalar_quantile(open_uniform(rng), False)

    def get_sample(self, size: int, random_state: RandomState = None) -> ArraySample:
        """
        Draw ``size`` i.i.d. realizations.

        Returns
        -------
        ArraySample
            A 2D sample of shape ``(size, 1)``.
        """
        size = self._check_size(size)
        rng = resolve_random_state(random_state)
        values = np.array([self.get_realization(rng) for _ in range(size)], dtype=np.float64)
        return ArraySample.from_values(values)

    @staticmethod
    def _check_size(size: int) -> int:
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 0:
            raise InvalidArgumentError(f"Sample size must be a non-negative integer, got {size!r}")
        return int(size)

    # ------------------------------------------------------------------ #
    # Vectorized characteristics
    # ------------------------------------------------------------------ #

    def _map_points(
        self, func: Callable[[float], float], points: ArrayLike
    ) -> NDArray[np.float64]:
        arr = self._as_points(points)
        return np.fromiter((func(x) for x in arr), dtype=np.float64, count=arr.size)

    def compute_pdf_batch(self, points: ArrayLike) -> NDArray[np.float64]:
        return self._map_points(self.compute_pdf, points)

    def compute_log_pdf_batch(self, points: ArrayLike) -> NDArray[np.float64]:
        return self._map_points(self.compute_log_pdf, points)

    def compute_cdf_batch(self, points: ArrayLike) -> NDArray[np.float64]:
        return self._map_points(self.compute_cdf, points)

    def compute_complementary_cdf_batch(self, points: ArrayLike) -> NDArray[np.float64]:
        return self._map_points(self.compute_complementary_cdf, points)

    def compute_quantile_batch(self, probs: ArrayLike, tail: bool = False) -> NDArray[np.float64]:
        return self._map_points(lambda p: self.compute_scalar_quantile(p, tail), probs)

    def log_likelihood(self, sample: Sample | ArrayLike) -> float:
        """
        Log-likelihood of a sample.

        Parameters
        ----------
        sample : Sample or array_like
            Points of shape ``(n,)`` or ``(n, 1)``.

        Returns
        -------
        float
            Sum of ``log_pdf`` over the points; ``-inf`` if any point lies
            outside the support.
        """
        data = getattr(sample, "array", sample)
        return float(np.sum(self.compute_log_pdf_batch(data)))

    # ------------------------------------------------------------------ #
    # Persistence
    # ------------------------------------------------------------------ #

    def save(self, store: MutableMapping[str, Any]) -> None:
        """Write the persistent state into ``store``."""
        store["class_name"] = type(self).__name__
        store["name"] = self._name
        store["dimension"] = self.dimension

    def load(self, store: Mapping[str, Any]) -> None:
        """
        Restore the state written by :meth:`save`.

        Raises
        ------
        InvalidArgumentError
            If ``store`` was written by another distribution class.
        """
        class_name = store.get("class_name")
        if class_name != type(self).__name__:
            raise InvalidArgumentError(
                f"Cannot load a {class_name} state into {type(self).__name__}"
            )
        self._name = store["name"]


__all__ = [
    "Distribution",
    "ContinuousDistribution",
]
