import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest
import scipy.stats as stats


def lognormal_mixture_moments(weights, medians, sigma, n_moments):
    """Moments of sum_i w_i LogNormal(ln x_i, sigma^2)."""
    k = np.arange(n_moments)
    return np.array([np.sum(np.asarray(weights) * np.asarray(medians)**j) for j in k]) \
        * np.exp(0.5 * sigma**2 * k**2)


def dist_mixture_moments(weights, dists, n_moments):
    """Moments of a mixture of frozen scipy.stats distributions."""
    return np.array([sum(w * d.moment(k) for w, d in zip(weights, dists)) for k in range(n_moments)])


@pytest.fixture
def bimodal_lognormal():
    weights = np.array([0.6, 0.4])
    medians = np.array([1.0, 3.0])
    sigma = 0.3
    return weights, medians, sigma, lognormal_mixture_moments(weights, medians, sigma, 5)


@pytest.fixture
def bimodal_gaussian():
    weights = np.array([0.5, 0.5])
    means = np.array([-1.0, 2.0])
    sigma = 0.5
    dists = [stats.norm(loc=m, scale=sigma) for m in means]
    return weights, means, sigma, dist_mixture_moments(weights, dists, 5)


@pytest.fixture
def bimodal_gamma():
    weights = np.array([0.5, 0.5])
    means = np.array([1.0, 4.0])
    sigma = 0.2
    dists = [stats.gamma(m / sigma, scale=sigma) for m in means]
    return dist_mixture_moments(weights, dists, 5)
