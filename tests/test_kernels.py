"""
Tests for the kernel density functions: moment transforms, recurrences,
secondary quadratures and densities.
"""

import numpy as np
import pytest
import scipy.stats as stats
from scipy.integrate import trapezoid
from eqmomframework import KERNELS, ConfigurationError, UnivariateMomentSet, new_kernel
from eqmomframework.kernel.kernel_gamma import stirling_first_kind_unsigned, stirling_second_kind
from eqmomframework.utils.func import jit_qmom
from eqmomframework.utils.func.static_method import calc_quadrature_moments
from conftest import lognormal_mixture_moments

KERNEL_NAMES = ["lognormal", "gamma", "gaussian"]


def secondary_nodes(kernel, sigma, primary_abscissa, n_nodes):
    a, b = kernel.recurrence_relation(sigma, primary_abscissa, n_nodes)
    local_abscissae, weights = jit_qmom.recurrence_jacobi_nodes_weights(1.0, a, b)
    return weights, kernel.secondary_abscissa(primary_abscissa, local_abscissae, sigma)


class TestRegistry:

    def test_registered_kernels(self):
        assert set(KERNEL_NAMES) <= set(KERNELS)
        for name in KERNEL_NAMES:
            kernel = new_kernel(name)
            assert kernel.name == name

    def test_unknown_kernel(self):
        with pytest.raises(ConfigurationError, match="beta"):
            new_kernel("beta")

    def test_supports(self):
        assert new_kernel("lognormal").support == "RPlus"
        assert new_kernel("gamma").support == "RPlus"
        assert new_kernel("gaussian").support == "R"


class TestMomentTransforms:

    @pytest.mark.parametrize("name", KERNEL_NAMES)
    @pytest.mark.parametrize("sigma", [0.0, 0.3, 1.0])
    def test_round_trip(self, name, sigma):
        kernel = new_kernel(name)
        moments = np.array([1.0, 1.0, 2.0, 6.0, 24.0, 120.0])
        moments_star = kernel.moments_to_moments_star(sigma, moments)
        np.testing.assert_allclose(kernel.moments_star_to_moments(sigma, moments_star), moments, rtol=1e-10)

    @pytest.mark.parametrize("name", KERNEL_NAMES)
    def test_zero_sigma_is_identity(self, name):
        moments = np.array([2.0, 3.0, 5.0, 9.0, 17.0])
        np.testing.assert_allclose(new_kernel(name).moments_to_moments_star(0.0, moments), moments)

    def test_lognormal_transform(self):
        moments = np.array([1.0, 2.0, 3.0, 4.0])
        k = np.arange(4)
        expected = moments * np.exp(-0.5 * 0.4**2 * k**2)
        np.testing.assert_allclose(new_kernel("lognormal").moments_to_moments_star(0.4, moments), expected)

    def test_gamma_kernel_moments(self):
        """A Dirac at x maps to the moments of Gamma(x / sigma, sigma)."""
        x, sigma = 2.0, 0.5
        dirac = x ** np.arange(6)
        expected = [stats.gamma(x / sigma, scale=sigma).moment(k) for k in range(6)]
        np.testing.assert_allclose(new_kernel("gamma").moments_star_to_moments(sigma, dirac), expected, rtol=1e-12)

    def test_gaussian_kernel_moments(self):
        x, sigma = -1.0, 0.7
        dirac = x ** np.arange(6)
        expected = [stats.norm(loc=x, scale=sigma).moment(k) for k in range(6)]
        np.testing.assert_allclose(new_kernel("gaussian").moments_star_to_moments(sigma, dirac), expected,
                                   rtol=1e-12, atol=1e-12)

    def test_stirling_tables(self):
        c = stirling_first_kind_unsigned(5)
        s = stirling_second_kind(5)
        np.testing.assert_array_equal(c[4], [0, 6, 11, 6, 1])
        np.testing.assert_array_equal(s[4], [0, 1, 7, 6, 1])


class TestRecurrence:

    def test_lognormal_first_coefficient(self):
        a, b = new_kernel("lognormal").recurrence_relation(0.5, 2.0, 10)
        assert a[0] == np.exp(0.125)
        assert b[0] == 0.0
        assert len(a) == len(b) == 10

    def test_hermite(self):
        a, b = new_kernel("gaussian").recurrence_relation(0.5, 1.0, 4)
        np.testing.assert_array_equal(a, 0.0)
        np.testing.assert_array_equal(b, [0.0, 1.0, 2.0, 3.0])

    def test_laguerre(self):
        a, b = new_kernel("gamma").recurrence_relation(0.5, 2.0, 3)
        np.testing.assert_allclose(a, [4.0, 6.0, 8.0])
        np.testing.assert_allclose(b, [0.0, 4.0, 10.0])

    def test_lognormal_secondary_quadrature(self):
        kernel = new_kernel("lognormal")
        sigma, x = 0.5, 2.0
        weights, abscissae = secondary_nodes(kernel, sigma, x, 10)
        assert np.all(weights > 0.0)
        assert np.sum(weights) == pytest.approx(1.0, rel=1e-12)
        assert np.all(abscissae > 0.0)
        expected = lognormal_mixture_moments([1.0], [x], sigma, 6)
        np.testing.assert_allclose(calc_quadrature_moments(weights, abscissae, 6), expected, rtol=1e-8)

    def test_gamma_secondary_quadrature(self):
        kernel = new_kernel("gamma")
        sigma, x = 0.5, 2.0
        weights, abscissae = secondary_nodes(kernel, sigma, x, 8)
        assert np.all(weights > 0.0)
        assert np.all(abscissae > 0.0)
        expected = [stats.gamma(x / sigma, scale=sigma).moment(k) for k in range(8)]
        np.testing.assert_allclose(calc_quadrature_moments(weights, abscissae, 8), expected, rtol=1e-9)

    def test_gaussian_secondary_quadrature(self):
        kernel = new_kernel("gaussian")
        sigma, x = 0.7, -1.0
        weights, abscissae = secondary_nodes(kernel, sigma, x, 6)
        expected = [stats.norm(loc=x, scale=sigma).moment(k) for k in range(8)]
        np.testing.assert_allclose(calc_quadrature_moments(weights, abscissae, 8), expected, rtol=1e-9, atol=1e-12)


class TestSigmaMax:

    def test_lognormal(self):
        moments = UnivariateMomentSet(lognormal_mixture_moments([1.0], [1.5], 0.4, 5))
        assert new_kernel("lognormal").sigma_max(moments) == pytest.approx(0.4, rel=1e-10)

    def test_gamma(self):
        dist = stats.gamma(3.0, scale=0.7)
        moments = UnivariateMomentSet([dist.moment(k) for k in range(5)])
        assert new_kernel("gamma").sigma_max(moments) == pytest.approx(0.7, rel=1e-10)

    def test_gaussian(self):
        moments = UnivariateMomentSet([1.0, 1.0, 5.0], support="R")
        assert new_kernel("gaussian").sigma_max(moments) == pytest.approx(2.0)


class TestDensity:

    @pytest.mark.parametrize("name, x_range", [
        ("lognormal", (0.0, 40.0)),
        ("gamma", (0.0, 40.0)),
        ("gaussian", (-10.0, 10.0)),
    ])
    def test_unit_mass(self, name, x_range):
        x = np.linspace(*x_range, 40001)
        y = new_kernel(name).f(x, 2.0, 0.5)
        assert np.all(y >= 0.0)
        assert trapezoid(y, x) == pytest.approx(1.0, rel=1e-4)

    def test_lognormal_zero_outside_support(self):
        y = new_kernel("lognormal").f(np.array([-1.0, 0.0]), 1.0, 0.5)
        np.testing.assert_array_equal(y, 0.0)


class TestLastMoment:

    def test_m2n_back_transform(self):
        kernel = new_kernel("lognormal")
        moments_star = UnivariateMomentSet([1.0, 1.0, 2.0, 6.0, 24.0])
        expected = kernel.moments_star_to_moments(0.3, np.asarray(moments_star))[-1]
        assert kernel.m2n(0.3, moments_star) == pytest.approx(expected)

    def test_m2n_not_realizable(self):
        moments_star = UnivariateMomentSet([1.0, 1.0, 0.5, 1.0])
        assert new_kernel("lognormal").m2n(0.3, moments_star) is None
