"""
Sampling Interfaces
===================

Sample containers returned by ``get_sample`` and the resolution of the
uniform random source a distribution draws from.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, TypeAlias

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt

RandomState: TypeAlias = int | np.random.Generator | None
"""Seed, generator, or ``None`` for a fresh default generator."""


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Realizations as rows of a 2D array.
    shape : tuple[int, ...]
        Shape of ``array``.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Sample stored as a float array of shape ``(size, dimension)``.

    Parameters
    ----------
    data : numpy.ndarray
        2D array; each row is one realization.

    Raises
    ------
    ValueError
        If ``data`` is not 2D.
    """

    __slots__ = ("data",)

    data: npt.NDArray[np.float64]

    def __init__(self, data: npt.ArrayLike) -> None:
        data = np.asarray(data, dtype=np.float64)
        if data.ndim != 2:
            raise ValueError(f"ArraySample expects a 2D array of shape (n, d), got {data.shape}")
        self.data = data

    @classmethod
    def from_values(cls, values: npt.ArrayLike) -> ArraySample:
        """Wrap a flat sequence of univariate realizations as an ``(n, 1)`` sample."""
        return cls(np.asarray(values, dtype=np.float64).reshape(-1, 1))

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.float64]]:
        yield from self.data

    @property
    def dimension(self) -> int:
        return int(self.data.shape[1])

    @property
    def array(self) -> npt.NDArray[np.float64]:
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)

    def compute_mean(self) -> npt.NDArray[np.float64]:
        """Empirical mean per coordinate."""
        return self.data.mean(axis=0)

    def compute_standard_deviation(self) -> npt.NDArray[np.float64]:
        """Unbiased empirical standard deviation per coordinate."""
        return self.data.std(axis=0, ddof=1)


def resolve_random_state(random_state: RandomState = None) -> np.random.Generator:
    """
    Turn a seed-like argument into a :class:`numpy.random.Generator`.

    Parameters
    ----------
    random_state : int, Generator or None
        ``None`` creates a fresh default generator, an ``int`` seeds a new
        one, and a generator is returned unchanged.

    Returns
    -------
    numpy.random.Generator
    """
    if random_state is None:
        return np.random.default_rng()
    if isinstance(random_state, np.random.Generator):
        return random_state
    return np.random.default_rng(random_state)


def open_uniform(rng: np.random.Generator, size: int | None = None) -> Any:
    """
    Draw uniforms on the open interval ``(0, 1)``.

    ``Generator.random`` samples ``[0, 1)``; an exact zero is redrawn.
    """
    u = rng.random(size)
    if size is None:
        while u == 0.0:
            u = rng.random()
        return float(u)
    zeros = u == 0.0
    while np.any(zeros):
        u[zeros] = rng.random(int(np.count_nonzero(zeros)))
        zeros = u == 0.0
    return u
