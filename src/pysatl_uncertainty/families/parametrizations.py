"""
Parametrizations of distribution families.

A parametrization is a frozen dataclass whose fields, in declaration order,
form the parameter vector of a distribution. Predicates marked with
:func:`constraint` are collected by :func:`parametrization` and checked by
:meth:`Parametrization.validate`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
from abc import ABC
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec, Self

import numpy as np

from pysatl_uncertainty.exceptions import InvalidArgumentError
from pysatl_uncertainty.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from numpy.typing import ArrayLike


@dataclasses.dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Named predicate on parameter values.

    Parameters
    ----------
    description : str
        Text reported when the predicate fails, e.g. ``"lambda_ > 0"``.
    check : Callable[[Any], bool]
        Predicate taking the parametrization instance.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    Field declaration order is the order of the parameter vector.
    """

    # Set by the @parametrization decorator
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Field names mapped to their values."""
        fields = dataclasses.fields(self)  # type: ignore[arg-type]
        return {f.name: getattr(self, f.name) for f in fields}

    @property
    def values(self) -> tuple[Any, ...]:
        return tuple(self.parameters.values())

    @property
    def description(self) -> tuple[str, ...]:
        """
        Public parameter names in declaration order.

        A trailing underscore, used to avoid clashes with Python keywords
        (``lambda_``), is stripped.
        """
        return tuple(name.rstrip("_") for name in self.parameters)

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return self._constraints

    def validate(self) -> Self:
        """
        Check every constraint.

        Returns
        -------
        Self
            The instance itself, so that construction and validation chain.

        Raises
        ------
        InvalidArgumentError
            On the first constraint that does not hold.
        """
        for item in self._constraints:
            if not item.check(self):
                raise InvalidArgumentError(
                    f'Constraint "{item.description}" does not hold for {self.parameters}'
                )
        return self

    def replace(self, **changes: Any) -> Self:
        """Return a validated copy with some fields changed."""
        return dataclasses.replace(self, **changes).validate()  # type: ignore[type-var]

    @classmethod
    def from_vector(cls, vector: ArrayLike) -> Self:
        """
        Build and validate a parametrization from an ordered parameter vector.

        Raises
        ------
        InvalidArgumentError
            If the vector length differs from the number of fields, or a
            constraint fails.
        """
        values = np.asarray(vector, dtype=np.float64).reshape(-1)
        names = [f.name for f in dataclasses.fields(cls)]  # type: ignore[arg-type]
        if values.size != len(names):
            labels = ", ".join(name.rstrip("_") for name in names)
            raise InvalidArgumentError(
                f"{cls.__name__} expects {len(names)} parameter values [{labels}], "
                f"got {values.size}"
            )
        return cls(**dict(zip(names, values.tolist(), strict=True))).validate()


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Text reported when the constraint fails.

    Notes
    -----
    Sets the ``__is_constraint`` and ``__constraint_description`` markers
    read by :func:`parametrization`.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return bool(func(*args, **kwargs))

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
    collected: list[ParametrizationConstraint] = []
    for attr_name, attr in cls.__dict__.items():
        if isinstance(attr, staticmethod | classmethod):
            if getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(
                    f"@constraint '{attr_name}' must be an instance method, "
                    f"not @{type(attr).__name__}"
                )
            continue
        if isfunction(attr) and getattr(attr, "__is_constraint", False):
            description = getattr(attr, "__constraint_description", attr.__name__)
            collected.append(ParametrizationConstraint(description=description, check=attr))
    return collected


def parametrization(*, name: str) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Declare a class as a named parametrization.

    The class is turned into a frozen slotted dataclass unless it already is
    a dataclass, and its ``@constraint`` methods are collected in
    declaration order.

    Parameters
    ----------
    name : str
        Name of the parametrization, e.g. ``"rate"``.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not dataclasses.is_dataclass(cls):
            cls = dataclasses.dataclass(slots=True, frozen=True)(cls)
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)
        return cls

    return decorator


__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
]
