"""
Numerical Fallbacks
===================

Generic numerical procedures used by
:class:`~pysatl_uncertainty.distributions.distribution.ContinuousDistribution`
when a concrete distribution does not provide a closed form:

- ``ppf_from_cdf`` — bracket expansion and bisection on a monotone CDF;
- ``num_derivative`` — 5-point central stencil;
- ``parameter_gradient`` — central differences with respect to parameters;
- ``characteristic_function_by_quadrature`` — ``E[exp(iuX)]`` via ``quad``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from math import cos, isfinite, sin
from typing import TYPE_CHECKING

import numpy as np
from scipy import integrate as _sp_integrate

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_uncertainty.types import ScalarFunc


def ppf_from_cdf(
    cdf: ScalarFunc,
    *,
    x0: float = 0.0,
    init_step: float = 1.0,
    expand_factor: float = 2.0,
    max_expand: int = 60,
    x_tol: float = 1e-12,
    max_iter: int = 200,
) -> ScalarFunc:
    """
    Build a scalar ``ppf`` from a scalar ``cdf`` using bracket expansion
    and a bisection-like search.

    Parameters
    ----------
    cdf : Callable[[float], float]
        Monotone CDF in ``[-inf, +inf] -> [0, 1]``.
    x0 : float, default 0.0
        Initial bracket center.
    init_step : float, default 1.0
        Initial half-width for the bracket.
    expand_factor : float, default 2.0
        Multiplicative factor for exponential bracket growth.
    max_expand : int, default 60
        Maximum expansions while searching for a valid bracket.
    x_tol : float, default 1e-12
        Relative tolerance in ``x`` for stopping criterion.
    max_iter : int, default 200
        Maximum iterations for the bisection refinement.

    Returns
    -------
    Callable[[float], float]
        Scalar ``ppf`` such that ``cdf(ppf(q)) ≈ q``.

    Notes
    -----
    ``q <= 0`` maps to ``-inf`` and ``q >= 1`` maps to ``+inf``; callers
    that know a finite range clamp the result to it.
    """

    def _expand_bracket(q: float) -> tuple[float, float]:
        step = init_step
        L = x0 - step
        R = x0 + step
        FL = float(cdf(L))
        FR = float(cdf(R))

        for _ in range(max_expand):
            if FL <= q < FR:
                return L, R
            if q < FL:
                step *= expand_factor
                L -= step
                FL = float(cdf(L))
            if q >= FR:
                step *= expand_factor
                R += step
                FR = float(cdf(R))

        if not FL <= q < FR:
            warnings.warn(
                f"Could not bracket quantile of level {q} after {max_expand} expansions; "
                "returning the nearest bound",
                UserWarning,
                stacklevel=4,
            )
        return L, R

    def _ppf(q: float) -> float:
        if q <= 0.0:
            return float("-inf")
        if q >= 1.0:
            return float("inf")

        L, R = _expand_bracket(q)

        it = 0
        while it < max_iter and x_tol * (1.0 + max(abs(L), abs(R))) < (R - L):
            M = 0.5 * (L + R)
            if q < float(cdf(M)):
                R = M
            else:
                L = M
            it += 1

        return 0.5 * (L + R)

    return _ppf


def num_derivative(f: ScalarFunc, x: float, h: float = 1e-5) -> float:
    """
    5-point central numerical derivative used for ``pdf -> ddf``.

    Parameters
    ----------
    f : Callable[[float], float]
        Scalar function.
    x : float
        Evaluation point.
    h : float, default 1e-5
        Step for the stencil.

    Returns
    -------
    float
        Approximated derivative ``f'(x)``.
    """
    if not isfinite(x):
        return float("nan")
    f1 = float(f(x + h))
    f_1 = float(f(x - h))
    f2 = float(f(x + 2 * h))
    f_2 = float(f(x - 2 * h))
    return float((-f2 + 8 * f1 - 8 * f_1 + f_2) / (12.0 * h))


def parameter_gradient(
    evaluate: Callable[[np.ndarray], float],
    parameter: np.ndarray,
    relative_step: float = 1e-6,
) -> np.ndarray:
    """
    Central finite-difference gradient with respect to a parameter vector.

    Parameters
    ----------
    evaluate : Callable[[ndarray], float]
        Function of the full parameter vector.
    parameter : ndarray
        Point at which the gradient is taken.
    relative_step : float, default 1e-6
        Step relative to ``max(1, |parameter_i|)``.

    Returns
    -------
    ndarray
        Gradient, ordered like ``parameter``.
    """
    parameter = np.asarray(parameter, dtype=float)
    gradient = np.empty(parameter.size)
    for i in range(parameter.size):
        h = relative_step * max(1.0, abs(parameter[i]))
        up = parameter.copy()
        down = parameter.copy()
        up[i] += h
        down[i] -= h
        gradient[i] = (evaluate(up) - evaluate(down)) / (2.0 * h)
    return gradient


def characteristic_function_by_quadrature(
    pdf: ScalarFunc,
    u: float,
    lower: float = float("-inf"),
    upper: float = float("inf"),
    limit: int = 200,
) -> complex:
    """
    Compute ``E[exp(i u X)]`` by integrating the density.

    Parameters
    ----------
    pdf : Callable[[float], float]
        Density of ``X``.
    u : float
        Frequency.
    lower, upper : float
        Integration bounds, usually the distribution range.
    limit : int, default 200
        Subinterval limit forwarded to :func:`scipy.integrate.quad`.

    Returns
    -------
    complex
    """
    real, _ = _sp_integrate.quad(lambda t: cos(u * t) * pdf(t), lower, upper, limit=limit)
    imag, _ = _sp_integrate.quad(lambda t: sin(u * t) * pdf(t), lower, upper, limit=limit)
    return complex(real, imag)


__all__ = [
    "ppf_from_cdf",
    "num_derivative",
    "parameter_gradient",
    "characteristic_function_by_quadrature",
]
