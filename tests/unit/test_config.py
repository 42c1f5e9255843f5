__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses

import pytest

from pysatl_uncertainty import DEFAULT_SETTINGS, Exponential, NumericalSettings
from tests.utils.mocks import LogisticDistribution


class TestNumericalSettings:
    def test_defaults_are_shared(self):
        assert Exponential().settings is DEFAULT_SETTINGS
        assert LogisticDistribution().settings is DEFAULT_SETTINGS

    def test_settings_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_SETTINGS.quantile_max_iter = 1  # type: ignore[misc]

    def test_per_instance_override(self):
        coarse = dataclasses.replace(DEFAULT_SETTINGS, quantile_x_tol=1e-3, quantile_max_iter=5)
        dist = LogisticDistribution(settings=coarse)

        assert dist.settings is coarse
        assert LogisticDistribution().settings is DEFAULT_SETTINGS
        # a handful of bisection steps cannot reach full precision
        fine = LogisticDistribution().compute_scalar_quantile(0.7)
        rough = dist.compute_scalar_quantile(0.7)
        assert rough != fine
        assert rough == pytest.approx(fine, abs=0.5)

    def test_settings_survive_clone_and_standard_representative(self):
        settings = NumericalSettings(derivative_step=1e-4)
        dist = Exponential(2.0, 1.0, settings=settings)

        assert dist.clone().settings == settings
        assert dist.get_standard_representative().settings == settings
