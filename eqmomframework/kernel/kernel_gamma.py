# -*- coding: utf-8 -*-
"""
Created on Tue Oct  6 10:11:29 2026

"""
import numpy as np
import scipy.stats as stats
from eqmomframework.kernel.kernel_base import KernelDensityFunction, register_kernel

def stirling_first_kind_unsigned(n):
    """Table c[k, j] of unsigned Stirling numbers of the first kind for k, j < n."""
    c = np.zeros((n, n))
    c[0, 0] = 1.0
    for k in range(1, n):
        for j in range(1, k + 1):
            c[k, j] = c[k - 1, j - 1] + (k - 1) * c[k - 1, j]
    return c

def stirling_second_kind(n):
    """Table s[k, j] of Stirling numbers of the second kind for k, j < n."""
    s = np.zeros((n, n))
    s[0, 0] = 1.0
    for k in range(1, n):
        for j in range(1, k + 1):
            s[k, j] = s[k - 1, j - 1] + j * s[k - 1, j]
    return s

@register_kernel("gamma")
class GammaEQMOM(KernelDensityFunction):
    """
    Gamma kernel with mean x_i, shape lambda = x_i / sigma and scale sigma.

    Its k-th moment is the rising factorial x_i (x_i + sigma) ... (x_i + (k-1) sigma),
    so that M_k = sum_j c(k, j) sigma^(k-j) M*_j with the unsigned Stirling
    numbers of the first kind c(k, j). The inverse map uses the Stirling
    numbers of the second kind S(k, j) with alternating signs.
    """
    support = "RPlus"

    def _transform_matrix(self, n_mom, sigma, inverse):
        k = np.arange(n_mom)
        powers = float(sigma) ** np.clip(k[:, None] - k[None, :], 0, None)
        if inverse:
            signs = (-1.0) ** np.clip(k[:, None] - k[None, :], 0, None)
            return stirling_second_kind(n_mom) * signs * powers
        return stirling_first_kind_unsigned(n_mom) * powers

    def moments_to_moments_star(self, sigma, moments):
        moments = np.asarray(moments, dtype=np.float64)
        return self._transform_matrix(len(moments), sigma, inverse=True) @ moments

    def moments_star_to_moments(self, sigma, moments_star):
        moments_star = np.asarray(moments_star, dtype=np.float64)
        return self._transform_matrix(len(moments_star), sigma, inverse=False) @ moments_star

    def recurrence_relation(self, sigma, primary_abscissa, n_nodes):
        # Generalized Laguerre polynomials of the gamma distribution with unit scale
        lam = primary_abscissa / sigma
        i = np.arange(n_nodes, dtype=np.float64)
        a = 2.0*i + lam
        b = i * (i + lam - 1.0)
        b[0] = 0.0
        return a, b

    def sigma_max(self, moments):
        sigma_zeta1 = (moments[0]*moments[2] - moments[1]**2) / (moments[0]*moments[1])
        if moments.n_realizable_moments > 3:
            sigma_zeta2 = (moments[1]*moments[3] - moments[2]**2) / (moments[1]*moments[2])
            return max(min(sigma_zeta1, sigma_zeta2), 0.0)
        return max(sigma_zeta1, 0.0)

    def secondary_abscissa(self, primary_abscissa, local_abscissa, sigma):
        return sigma * local_abscissa

    def f(self, x, primary_abscissa, sigma):
        x = np.asarray(x, dtype=np.float64)
        return stats.gamma.pdf(x, primary_abscissa / sigma, scale=sigma)
