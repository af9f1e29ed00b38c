"""
Recovery of kernel mixtures with two and three modes by both sigma searches.

The moments of sum_i w_i delta_sigma(x, x_i) lie on the boundary of the moment
space once transformed with the exact sigma, so both algorithms must return
that sigma and the moments must be reproduced.
"""

import numpy as np
import pytest
import scipy.stats as stats
from eqmomframework import new_extended_inversion
from conftest import dist_mixture_moments, lognormal_mixture_moments

MIXTURES = [
    ("lognormal", [0.5, 0.5], [1.0, 2.5], 0.2),
    ("lognormal", [0.6, 0.4], [2.0, 5.0], 0.35),
    ("lognormal", [0.3, 0.5, 0.2], [1.0, 3.0, 8.0], 0.25),
    ("gamma", [0.6, 0.4], [2.0, 6.0], 0.5),
    ("gamma", [0.3, 0.4, 0.3], [1.0, 4.0, 9.0], 0.3),
    ("gaussian", [0.3, 0.7], [-1.0, 1.5], 0.4),
    ("gaussian", [0.25, 0.5, 0.25], [-3.0, 0.0, 4.0], 0.6),
]


def mixture_moments(kernel, weights, abscissae, sigma, n_moments):
    if kernel == "lognormal":
        return lognormal_mixture_moments(weights, abscissae, sigma, n_moments)
    if kernel == "gamma":
        dists = [stats.gamma(x / sigma, scale=sigma) for x in abscissae]
    else:
        dists = [stats.norm(loc=x, scale=sigma) for x in abscissae]
    return dist_mixture_moments(weights, dists, n_moments)


@pytest.mark.parametrize("strategy", ["mStarRealizability", "momentMatching"])
@pytest.mark.parametrize("kernel, weights, abscissae, sigma", MIXTURES)
def test_mixture_recovery(strategy, kernel, weights, abscissae, sigma):
    n_nodes = len(weights)
    moments = mixture_moments(kernel, weights, abscissae, sigma, 2*n_nodes + 1)
    eqmom = new_extended_inversion(n_moments=2*n_nodes + 1, kernel=kernel, strategy=strategy)
    eqmom.invert(moments)

    assert eqmom.result.state == "converged"
    assert eqmom.sigma == pytest.approx(sigma, abs=1e-4)
    np.testing.assert_allclose(eqmom.primary_weights, weights, rtol=1e-3)
    np.testing.assert_allclose(eqmom.primary_abscissae, abscissae, rtol=1e-3, atol=1e-3)
    np.testing.assert_allclose(eqmom.calc_moments(), moments, rtol=1e-4, atol=1e-8)
