# -*- coding: utf-8 -*-
"""
Created on Tue Oct  6 11:37:02 2026

"""
import numpy as np
from scipy.special import comb
from eqmomframework.kernel.kernel_base import KernelDensityFunction, register_kernel

def gaussian_moment_coefficients(n_mom):
    """
    Table g[k, j] = C(k, j) * (j-1)!! for even j (zero for odd j), so that the
    moments of N(x, sigma^2) are sum_j g[k, j] sigma^j x^(k-j).
    """
    g = np.zeros((n_mom, n_mom))
    for k in range(n_mom):
        double_fact = 1.0
        for j in range(0, k + 1, 2):
            if j > 0:
                double_fact *= j - 1
            g[k, j] = comb(k, j, exact=False) * double_fact
    return g

@register_kernel("gaussian")
class GaussianEQMOM(KernelDensityFunction):
    """
    Gaussian kernel with mean x_i and standard deviation sigma on (-inf, +inf).

    M_k = sum_(j even) C(k, j) (j-1)!! sigma^j M*_(k-j) and, for the inverse,
    M*_k = sum_(j even) C(k, j) (j-1)!! (-sigma^2)^(j/2) M_(k-j).
    """
    support = "R"

    def _transform(self, values, sigma, inverse):
        values = np.asarray(values, dtype=np.float64)
        n_mom = len(values)
        g = gaussian_moment_coefficients(n_mom)
        j = np.arange(n_mom)
        scale = (-sigma**2)**(j // 2) if inverse else (sigma**2)**(j // 2)
        transformed = np.zeros(n_mom)
        for k in range(n_mom):
            transformed[k] = np.sum(g[k, :k + 1] * scale[:k + 1] * values[k::-1])
        return transformed

    def moments_to_moments_star(self, sigma, moments):
        return self._transform(moments, sigma, inverse=True)

    def moments_star_to_moments(self, sigma, moments_star):
        return self._transform(moments_star, sigma, inverse=False)

    def recurrence_relation(self, sigma, primary_abscissa, n_nodes):
        # Probabilists' Hermite polynomials of the standard normal distribution
        a = np.zeros(n_nodes)
        b = np.arange(n_nodes, dtype=np.float64)
        return a, b

    def sigma_max(self, moments):
        return np.sqrt(max(moments.variance, 0.0))

    def secondary_abscissa(self, primary_abscissa, local_abscissa, sigma):
        return primary_abscissa + sigma * local_abscissa

    def f(self, x, primary_abscissa, sigma):
        x = np.asarray(x, dtype=np.float64)
        return np.exp(-(x - primary_abscissa)**2 / (2.0*sigma**2)) / (sigma * np.sqrt(2.0*np.pi))
