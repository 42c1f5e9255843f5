"""
Property checks of the Exponential distribution over a parameter grid,
and consistency of the cached range and moments with the parameters.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math

import numpy as np
import pytest

from pysatl_uncertainty import Exponential
from pysatl_uncertainty.exceptions import InvalidArgumentError

from .base import BaseDistributionTest

GRID = BaseDistributionTest.PARAMETER_GRID


def _points(dist: Exponential) -> np.ndarray:
    gamma = dist.get_gamma()
    scale = 1.0 / dist.get_lambda()
    return gamma + scale * np.array([-1.0, 0.0, 0.01, 0.5, 1.0, 2.5, 10.0])


class TestExponentialProperties(BaseDistributionTest):
    @pytest.mark.parametrize("lambda_, gamma", GRID)
    def test_cdf_and_complementary_cdf_sum_to_one(self, lambda_, gamma):
        dist = Exponential(lambda_, gamma)
        for x in _points(dist):
            assert dist.compute_cdf(x) + dist.compute_complementary_cdf(x) == pytest.approx(1.0)

    @pytest.mark.parametrize("lambda_, gamma", GRID)
    def test_pdf_is_exp_of_log_pdf(self, lambda_, gamma):
        dist = Exponential(lambda_, gamma)
        for x in _points(dist):
            assert dist.compute_pdf(x) == pytest.approx(math.exp(dist.compute_log_pdf(x)))

    @pytest.mark.parametrize("lambda_, gamma", GRID)
    def test_quantile_inverts_cdf(self, lambda_, gamma):
        dist = Exponential(lambda_, gamma)
        for q in [1e-3, 0.1, 0.5, 0.9, 0.999]:
            assert dist.compute_cdf(dist.compute_scalar_quantile(q)) == pytest.approx(q, rel=1e-9)
            x = dist.compute_scalar_quantile(q, tail=True)
            assert dist.compute_complementary_cdf(x) == pytest.approx(q, rel=1e-9)

    @pytest.mark.parametrize("lambda_, gamma", GRID)
    def test_cdf_inverts_quantile(self, lambda_, gamma):
        dist = Exponential(lambda_, gamma)
        for x in _points(dist)[1:]:
            q = dist.compute_cdf(x)
            assert dist.compute_scalar_quantile(q) == pytest.approx(x, rel=1e-9, abs=1e-9)

    @pytest.mark.parametrize("lambda_, gamma", GRID)
    def test_cdf_monotone_and_bounded(self, lambda_, gamma):
        dist = Exponential(lambda_, gamma)
        values = dist.compute_cdf_batch(np.linspace(gamma - 1.0, gamma + 20.0 / lambda_, 200))

        assert np.all(np.diff(values) >= 0.0)
        assert np.all((values >= 0.0) & (values <= 1.0))

    @pytest.mark.parametrize("lambda_, gamma", GRID)
    def test_gradients_match_finite_differences(self, lambda_, gamma):
        dist = Exponential(lambda_, gamma)
        # points strictly inside the support, away from the kink at gamma
        for x in _points(dist)[3:6]:
            pdf_gradient = dist.compute_pdf_gradient(x)
            cdf_gradient = dist.compute_cdf_gradient(x)

            def pdf_lambda(value, x=x):
                return Exponential(value, gamma).compute_pdf(x)

            def pdf_gamma(value, x=x):
                return Exponential(lambda_, value).compute_pdf(x)

            def cdf_lambda(value, x=x):
                return Exponential(value, gamma).compute_cdf(x)

            def cdf_gamma(value, x=x):
                return Exponential(lambda_, value).compute_cdf(x)

            h_lambda = 1e-6 * lambda_
            h_gamma = 1e-6 / lambda_
            expected_pdf = [
                self.central_difference(pdf_lambda, lambda_, h_lambda),
                self.central_difference(pdf_gamma, gamma, h_gamma),
            ]
            expected_cdf = [
                self.central_difference(cdf_lambda, lambda_, h_lambda),
                self.central_difference(cdf_gamma, gamma, h_gamma),
            ]
            scale = max(1.0, lambda_ * lambda_)
            np.testing.assert_allclose(pdf_gradient, expected_pdf, rtol=1e-5, atol=1e-6 * scale)
            np.testing.assert_allclose(cdf_gradient, expected_cdf, rtol=1e-5, atol=1e-6 * scale)

    @pytest.mark.parametrize("lambda_, gamma", GRID)
    def test_closed_gradients_match_generic_fallback(self, lambda_, gamma):
        dist = Exponential(lambda_, gamma)
        x = gamma + 0.75 / lambda_
        generic_pdf = super(Exponential, dist).compute_pdf_gradient(x)
        generic_cdf = super(Exponential, dist).compute_cdf_gradient(x)

        np.testing.assert_allclose(dist.compute_pdf_gradient(x), generic_pdf, rtol=1e-4)
        np.testing.assert_allclose(dist.compute_cdf_gradient(x), generic_cdf, rtol=1e-4)

    @pytest.mark.parametrize("lambda_, gamma", GRID)
    def test_moments(self, lambda_, gamma):
        dist = Exponential(lambda_, gamma)

        np.testing.assert_allclose(dist.get_mean(), [gamma + 1.0 / lambda_])
        np.testing.assert_allclose(dist.get_covariance(), [[1.0 / lambda_**2]])
        np.testing.assert_allclose(
            dist.get_standard_deviation() ** 2, np.diag(dist.get_covariance())
        )

    @pytest.mark.parametrize("lambda_, gamma", GRID)
    def test_scalar_and_point_quantile_agree(self, lambda_, gamma):
        dist = Exponential(lambda_, gamma)
        for q in [0.2, 0.8]:
            np.testing.assert_array_equal(
                dist.compute_quantile(q), [dist.compute_scalar_quantile(q)]
            )


class TestExponentialDerivedState(BaseDistributionTest):
    def test_set_lambda_updates_moments(self):
        dist = Exponential(2.0, 1.0)
        dist.set_lambda(4.0)

        assert dist.get_lambda() == 4.0
        np.testing.assert_allclose(dist.get_mean(), [1.25])
        np.testing.assert_allclose(dist.get_covariance(), [[1.0 / 16.0]])
        assert dist.support.left == 1.0

    def test_set_gamma_updates_range_and_mean(self):
        dist = Exponential(2.0, 1.0)
        dist.set_gamma(-3.0)

        assert dist.get_gamma() == -3.0
        assert dist.get_range().left == -3.0
        np.testing.assert_allclose(dist.get_mean(), [-2.5])
        assert dist.compute_cdf(-3.0) == 0.0
        assert dist.compute_scalar_quantile(0.0) == -3.0

    def test_set_parameter(self):
        dist = Exponential()
        dist.set_parameter([0.5, 2.0])

        np.testing.assert_array_equal(dist.get_parameter(), [0.5, 2.0])
        np.testing.assert_allclose(dist.get_mean(), [4.0])
        assert dist.support.left == 2.0

    @pytest.mark.parametrize("vector", [[1.0], [1.0, 2.0, 3.0], []])
    def test_set_parameter_wrong_size(self, vector):
        dist = Exponential(2.0, 1.0)

        with pytest.raises(InvalidArgumentError, match="2 parameter values"):
            dist.set_parameter(vector)
        assert dist == Exponential(2.0, 1.0)

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda dist: dist.set_lambda(0.0),
            lambda dist: dist.set_lambda(-2.0),
            lambda dist: dist.set_gamma(float("inf")),
            lambda dist: dist.set_lambda(float("inf")),
            lambda dist: dist.set_gamma(float("nan")),
            lambda dist: dist.set_parameter([-1.0, 0.0]),
        ],
    )
    def test_failed_update_leaves_state_unchanged(self, mutate):
        dist = Exponential(2.0, 1.0)
        mean = dist.get_mean()
        covariance = dist.get_covariance()

        with pytest.raises(InvalidArgumentError):
            mutate(dist)

        np.testing.assert_array_equal(dist.get_parameter(), [2.0, 1.0])
        np.testing.assert_array_equal(dist.get_mean(), mean)
        np.testing.assert_array_equal(dist.get_covariance(), covariance)
        assert dist.support.left == 1.0

    def test_returned_moments_are_copies(self):
        dist = Exponential(2.0, 1.0)
        mean = dist.get_mean()
        mean[0] = 100.0

        assert dist.get_mean()[0] == 1.5

    def test_parameters_object_is_immutable(self):
        dist = Exponential(2.0, 1.0)

        with pytest.raises(AttributeError):
            dist.parameters.lambda_ = 3.0  # type: ignore[misc]
