"""
Numerical Settings
==================

Tolerances and step sizes used by the generic (non closed-form) fallbacks of
:class:`~pysatl_uncertainty.distributions.distribution.ContinuousDistribution`.

Notes
-----
- Settings are immutable; derive a variant with :func:`dataclasses.replace`.
- A distribution reads ``self.settings``, which defaults to
  :data:`DEFAULT_SETTINGS` and may be overridden per instance.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NumericalSettings:
    """
    Numerical knobs for generic computations.

    Parameters
    ----------
    derivative_step : float, default 1e-5
        Step of the 5-point stencil used for ``pdf -> ddf``.
    gradient_step : float, default 1e-6
        Relative step of central differences with respect to parameters.
    quantile_x_tol : float, default 1e-12
        Relative tolerance in ``x`` of the bisection quantile search.
    quantile_max_iter : int, default 200
        Maximum bisection iterations.
    bracket_init_step : float, default 1.0
        Initial half-width of the quantile bracket.
    bracket_expand_factor : float, default 2.0
        Multiplicative growth of the quantile bracket.
    bracket_max_expand : int, default 60
        Maximum bracket expansions before giving up with a warning.
    quadrature_limit : int, default 200
        Subinterval limit passed to :func:`scipy.integrate.quad`.
    """

    derivative_step: float = 1e-5
    gradient_step: float = 1e-6
    quantile_x_tol: float = 1e-12
    quantile_max_iter: int = 200
    bracket_init_step: float = 1.0
    bracket_expand_factor: float = 2.0
    bracket_max_expand: int = 60
    quadrature_limit: int = 200


DEFAULT_SETTINGS = NumericalSettings()
"""Settings used by distributions constructed without an explicit ``settings``."""


__all__ = [
    "NumericalSettings",
    "DEFAULT_SETTINGS",
]
