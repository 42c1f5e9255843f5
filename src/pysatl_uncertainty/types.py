"""
Core Type Definitions
=====================

Distribution type descriptors, numeric aliases and the one-dimensional
interval that backs every distribution range.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from enum import Enum, StrEnum, auto
from math import inf
from typing import Any, TypeAlias, cast, overload

import numpy as np
from numpy.typing import ArrayLike, NDArray


class Kind(StrEnum):
    """Kind of the sample space: discrete or continuous."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """Base class for distribution type descriptors."""

    __slots__ = ()

    @property
    def features(self) -> Mapping[str, Any]:
        """Descriptor fields as a name to value mapping."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution on a Euclidean space.

    Parameters
    ----------
    kind : Kind
        Discrete or continuous.
    dimension : int
        Number of coordinates of a realization.
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type shared by every univariate continuous distribution."""

NumPyNumber = np.floating[Any] | np.integer[Any]
Number = NumPyNumber | int | float
NumericArray = NDArray[NumPyNumber]
BoolArray = NDArray[np.bool_]

PointLike = Number | ArrayLike
"""A univariate evaluation point: a scalar or a one-element array-like."""

ScalarFunc = Callable[[float], float]


class ContinuousSupportShape1D(Enum):
    """
    Topological shape of a one-dimensional interval.

    ``RAY_RIGHT`` is ``[a, inf)`` or ``(a, inf)``, the range of a shifted
    exponential; ``RAY_LEFT`` is its mirror image.
    """

    REAL_LINE = auto()
    RAY_LEFT = auto()
    RAY_RIGHT = auto()
    BOUNDED_INTERVAL = auto()
    EMPTY = auto()
    SINGLE_POINT = auto()


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Interval of the real line with configurable closure.

    Parameters
    ----------
    left : float, default=-inf
        Lower bound.
    right : float, default=inf
        Upper bound.
    left_closed : bool, default=True
        Whether ``left`` belongs to the interval; forced to ``False`` when
        ``left`` is infinite.
    right_closed : bool, default=True
        Same for ``right``.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if self.left == -inf:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Elementwise membership test.

        Returns a ``bool`` for a scalar and a boolean array otherwise.
        """
        arr = np.asarray(x)
        above = arr >= self.left if self.left_closed else arr > self.left
        below = arr <= self.right if self.right_closed else arr < self.right
        result = above & below
        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def clip(self, x: float) -> float:
        """Project ``x`` onto the closure of the interval."""
        return float(min(max(x, self.left), self.right))

    @property
    def is_empty(self) -> bool:
        if self.left > self.right:
            return True
        return bool(self.left == self.right) and not (self.left_closed and self.right_closed)

    @property
    def is_left_bounded(self) -> bool:
        """Whether the lower bound is finite."""
        return bool(self.left > -inf)

    @property
    def is_right_bounded(self) -> bool:
        """Whether the upper bound is finite."""
        return bool(self.right < inf)

    @property
    def shape(self) -> ContinuousSupportShape1D:
        if self.is_empty:
            return ContinuousSupportShape1D.EMPTY
        if self.left == self.right:
            return ContinuousSupportShape1D.SINGLE_POINT
        match self.is_left_bounded, self.is_right_bounded:
            case True, True:
                return ContinuousSupportShape1D.BOUNDED_INTERVAL
            case True, False:
                return ContinuousSupportShape1D.RAY_RIGHT
            case False, True:
                return ContinuousSupportShape1D.RAY_LEFT
            case _:
                return ContinuousSupportShape1D.REAL_LINE

    def __str__(self) -> str:
        opening = "[" if self.left_closed else "("
        closing = "]" if self.right_closed else ")"
        return f"{opening}{self.left:g}, {self.right:g}{closing}"


ParametrizationName: TypeAlias = str
"""Type alias for parametrization names."""


class FamilyName(StrEnum):
    """Names of the built-in distribution families."""

    EXPONENTIAL = "Exponential"


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "BoolArray",
    "PointLike",
    "ScalarFunc",
    "ContinuousSupportShape1D",
    "Interval1D",
    "ParametrizationName",
    "FamilyName",
]
